"""Release/update handlers.

Built-in handlers live in the submodules of this package and register
themselves with `@register(Operation.X)`. Installed distributions can
replace them through the `syscli.handlers` entry-point group, where the
entry point name is the operation ("release" or "update"):

  [project.entry-points."syscli.handlers"]
  release = "mypkg.release:run"
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
import sys
from collections.abc import Callable
from importlib import metadata

from syscli.core.dispatcher import Handler
from syscli.core.operation import Operation
from syscli.output.diagnostics import get_logger

__all__ = ["ENTRY_POINT_GROUP", "HANDLERS", "load_handlers", "register"]

ENTRY_POINT_GROUP = "syscli.handlers"

HANDLERS: dict[Operation, Handler] = {}


def register(operation: Operation) -> Callable[[Handler], Handler]:
    def decorator(fn: Handler) -> Handler:
        HANDLERS[operation] = fn
        return fn

    return decorator


def load_handlers(logger: logging.Logger | None = None) -> dict[Operation, Handler]:
    """Return the handler table: built-ins overridden by entry points.

    Broken or unknown entry points are reported and skipped; the built-in
    handler for that operation stays in place.
    """
    log = logger or get_logger(__name__)
    handlers = dict(HANDLERS)

    for ep in metadata.entry_points(group=ENTRY_POINT_GROUP):
        try:
            op = Operation(ep.name)
        except ValueError:
            log.warning("Ignoring handler entry point %r: unknown operation", ep.name)
            continue

        try:
            handler: object = ep.load()
        except Exception as e:  # noqa: BLE001
            log.warning("Could not load %s handler from %s: %s", op.value, ep.value, e)
            continue

        if not callable(handler):
            log.warning("Ignoring %s handler from %s: not callable", op.value, ep.value)
            continue

        log.debug("Using %s handler from %s", op.value, ep.value)
        handlers[op] = handler

    return handlers


def _load_builtin_handlers() -> None:
    package = sys.modules[__name__]
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{__name__}.{module_name}")


_load_builtin_handlers()
