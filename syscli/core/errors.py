"""Error types and exit codes.

`ErrorCode` maps failures to shell exit codes. The numeric values follow the
conventions of argument parsers (click, argparse): 2 is reserved for usage
errors so that scripts can tell a bad invocation apart from a failed one.

Two kinds of failure exist:
- `UsageError` is raised while parsing arguments and is never recoverable.
- `HandlerError` is returned (inside `Err`) by release/update handlers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from syscli.core.operation import Operation

__all__ = ["ErrorCode", "HandlerError", "UsageError"]


class ErrorCode(IntEnum):
    """Exit codes for the CLI.

    These values are used as process exit codes and should remain stable.
    """

    OK = 0
    HANDLER_ERROR = 1
    USAGE_ERROR = 2


class UsageError(Exception):
    """Invocation arguments cannot be mapped to an operation."""

    exit_code = ErrorCode.USAGE_ERROR

    def __init__(self, message: str, usage: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.usage = usage


@dataclass(frozen=True, slots=True)
class HandlerError:
    """Failure reported by a release/update handler.

    `kind` is a short machine-friendly tag (e.g. "missing-handler"),
    `message` is shown to the user.
    """

    operation: Operation
    kind: str
    message: str
    hint: str | None = None

    @property
    def exit_code(self) -> ErrorCode:
        return ErrorCode.HANDLER_ERROR

    def pretty(self) -> str:
        text = f"{self.operation.value}: {self.message}"
        if self.hint:
            return f"{text} (hint: {self.hint})"
        return text
