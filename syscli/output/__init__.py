"""Output abstraction layer: user console and diagnostic log."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .diagnostics import TRACE, get_logger, init_diagnostics, trace

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "Style",
    "TRACE",
    "get_logger",
    "init_diagnostics",
    "trace",
]
