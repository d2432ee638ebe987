"""Host-facing helpers: subprocesses, interpreters, filesystem."""

from .files import isolated_directory, remove_tree
from .process import ProcessError, run, run_silent
from .python import find_python, venv_python, venv_script

__all__ = [
    "ProcessError",
    "find_python",
    "isolated_directory",
    "remove_tree",
    "run",
    "run_silent",
    "venv_python",
    "venv_script",
]
