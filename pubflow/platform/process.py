"""Subprocess execution with Result-based error handling.

This is the only module that calls ``subprocess`` directly. Commands either
stream to the terminal (``run_silent``, used for build/twine/pip so their own
progress and errors stay visible) or have stdout captured (``run``).

Usage:
    match run_silent([python, "-m", "build"], cwd=project.root):
        case Ok(_):
            pass
        case Err(error):
            return Err(StepFailed(..., returncode=error.returncode))
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from pubflow.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run", "run_silent"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code of the process; -1 if it could not be started.
        stdout: Standard output (empty when not captured).
        stderr: Standard error, or the OS error text.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def run(
    cmd: list[str],
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and return its stdout.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory (current directory if None).
        env: Environment variables (inherits the current env if None).

    Returns:
        Ok(stdout) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def run_silent(
    cmd: list[str],
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
    *,
    quiet: bool = False,
) -> Result[None, ProcessError]:
    """Execute a command with output going straight to the terminal.

    No timeout is applied: a hanging tool hangs the run.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory (current directory if None).
        env: Environment variables (inherits the current env if None).
        quiet: Discard stdout and stderr instead of streaming them.

    Returns:
        Ok(None) on success, Err(ProcessError) on failure.
    """
    sink = subprocess.DEVNULL if quiet else None
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            env=env,
            stdout=sink,
            stderr=sink,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout="",
                stderr="",
            )
        )

    return Ok(None)
