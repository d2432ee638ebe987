"""Result type for explicit error handling.

Every pipeline stage returns either ``Ok(value)`` or ``Err(error)`` instead of
raising, so the first failure short-circuits the run without try/except
blocks around each stage.

Usage:
    match read_pyproject(pyproject):
        case Ok(data):
            console.print(f"Loaded {len(data)} tables")
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
