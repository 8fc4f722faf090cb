"""Process-wide diagnostic sink.

Diagnostics are leveled log records written to stderr through a Rich
handler attached to the `syscli` logger. Besides the standard levels a
`TRACE` level (below DEBUG) is registered for startup chatter.

The sink is initialized once per process by `init_diagnostics`; the returned
logger is handed to the components that need it.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = [
    "LOGGER_NAME",
    "TRACE",
    "DiagnosticHandler",
    "get_logger",
    "init_diagnostics",
    "level_from_name",
    "reset_diagnostics",
    "trace",
]

LOGGER_NAME = "syscli"
TRACE = 5

logging.addLevelName(TRACE, "TRACE")

_LEVELS: dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class DiagnosticHandler(RichHandler):
    """Rich handler owned by the diagnostic sink."""


def level_from_name(name: str) -> int:
    """Map a level name (case-insensitive) to its numeric value.

    Raises:
        ValueError: for an unknown name.
    """
    try:
        return _LEVELS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown log level: {name!r}") from None


def init_diagnostics(level: str = "trace", *, console: Console | None = None) -> logging.Logger:
    """Attach the stderr handler to the `syscli` logger.

    Calling this again is a no-op: the first call decides handler and level.

    Args:
        level: Minimum level name (trace, debug, info, warning, error)
        console: Rich console to write to (stderr by default)
    """
    logger = logging.getLogger(LOGGER_NAME)
    if any(isinstance(h, DiagnosticHandler) for h in logger.handlers):
        return logger

    handler = DiagnosticHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level_from_name(level))
    logger.propagate = False
    return logger


def reset_diagnostics() -> None:
    """Detach the sink handler (tests only)."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, DiagnosticHandler):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def get_logger(name: str | None = None) -> logging.Logger:
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def trace(logger: logging.Logger, msg: str, *args: object) -> None:
    logger.log(TRACE, msg, *args)
