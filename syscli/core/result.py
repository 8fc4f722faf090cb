"""Result type for explicit error handling.

Handlers and loaders return `Ok(value)` or `Err(error)` instead of raising,
so the CLI layer decides how each failure maps to an exit code:

    match dispatcher.dispatch(Operation.RELEASE):
        case Ok():
            return ErrorCode.OK
        case Err(error):
            console.error(error.pretty())
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Err", "Ok", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Represents a successful result containing a value.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Represents a failed result containing an error.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
