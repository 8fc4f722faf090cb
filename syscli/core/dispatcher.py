"""Routing of a parsed operation to its handler."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from .errors import HandlerError
from .operation import Operation
from .result import Err, Ok, Result

__all__ = ["Dispatcher", "Handler"]

Handler = Callable[[], Result[None, HandlerError]]


@dataclass(frozen=True, slots=True)
class Dispatcher:
    """Invoke the handler registered for an operation.

    The dispatcher knows nothing about what handlers do. It logs through the
    logger it was built with, so tests can pass a capturing one.
    """

    handlers: Mapping[Operation, Handler]
    logger: logging.Logger

    def dispatch(self, op: Operation) -> Result[None, HandlerError]:
        self.logger.debug("Dispatching %s command", op.value)

        handler = self.handlers.get(op)
        if handler is None:
            return Err(
                HandlerError(
                    operation=op,
                    kind="missing-handler",
                    message="no handler registered",
                    hint="install a plugin providing the 'syscli.handlers' entry point",
                )
            )

        result: object = handler()
        if not isinstance(result, (Ok, Err)):
            return Err(
                HandlerError(
                    operation=op,
                    kind="bad-result",
                    message=f"handler returned {result!r} instead of Ok/Err",
                )
            )
        if isinstance(result, Err):
            self.logger.debug("%s handler failed: %s", op.value, result.error.kind)
        return result
