"""Process exit codes.

The values are part of the command-line contract and should remain stable:
- 0: Success
- 1: Generic failure (a tool could not be started or gave no usable status)
- 2: Usage or precondition error (bad flags, missing pyproject.toml,
     undeterminable version, no Python interpreter)

Failures of external tools (build, twine, pip, venv) exit with the tool's own
status instead of one of these codes.
"""

from enum import IntEnum

__all__ = ["ErrorCode", "tool_exit_code"]


class ErrorCode(IntEnum):
    """Exit codes for the pubflow command."""

    OK = 0
    FAILURE = 1
    USAGE_ERROR = 2


def tool_exit_code(returncode: int) -> int:
    """Exit code that propagates a failed tool's status.

    Negative codes (the tool never started, or died on a signal) and a
    spurious zero collapse to ``ErrorCode.FAILURE``.
    """
    if returncode > 0:
        return returncode
    return int(ErrorCode.FAILURE)
