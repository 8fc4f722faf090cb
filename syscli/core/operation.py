"""Operations selectable from the command line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["InvocationArguments", "Operation"]


class Operation(Enum):
    """The closed set of subcommands.

    Values are the subcommand names as typed on the command line.
    """

    RELEASE = "release"
    UPDATE = "update"

    def __str__(self) -> str:
        return self.value

    @property
    def summary(self) -> str:
        """One-line description used as the subcommand help."""
        return _SUMMARIES[self]


_SUMMARIES: dict[Operation, str] = {
    Operation.RELEASE: "Release a new version",
    Operation.UPDATE: "Update system configuration",
}


@dataclass(frozen=True, slots=True)
class InvocationArguments:
    """Parsed command line: the single selected operation."""

    operation: Operation
