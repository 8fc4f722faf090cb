from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

from syscli.output.diagnostics import (
    LOGGER_NAME,
    TRACE,
    DiagnosticHandler,
    get_logger,
    init_diagnostics,
    level_from_name,
    trace,
)


def _capture() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=200, force_terminal=False), buf


def test_trace_level_is_below_debug() -> None:
    assert TRACE < logging.DEBUG
    assert logging.getLevelName(TRACE) == "TRACE"


@pytest.mark.parametrize(
    ("name", "level"),
    [("trace", TRACE), ("DEBUG", logging.DEBUG), (" info ", logging.INFO), ("error", logging.ERROR)],
)
def test_level_from_name(name: str, level: int) -> None:
    assert level_from_name(name) == level


def test_level_from_name_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="unknown log level"):
        level_from_name("chatty")


def test_init_writes_trace_messages() -> None:
    console, buf = _capture()
    logger = init_diagnostics("trace", console=console)

    trace(logger, "Starting system CLI...")

    out = buf.getvalue()
    assert "TRACE" in out
    assert "Starting system CLI..." in out


def test_minimum_level_filters() -> None:
    console, buf = _capture()
    logger = init_diagnostics("debug", console=console)

    trace(logger, "hidden")
    logger.debug("Dispatching release command")

    out = buf.getvalue()
    assert "hidden" not in out
    assert "Dispatching release command" in out


def test_init_is_idempotent() -> None:
    first_console, first_buf = _capture()
    second_console, second_buf = _capture()

    first = init_diagnostics("info", console=first_console)
    second = init_diagnostics("trace", console=second_console)

    assert first is second
    assert sum(isinstance(h, DiagnosticHandler) for h in first.handlers) == 1
    assert first.level == logging.INFO

    first.info("once")
    assert "once" in first_buf.getvalue()
    assert second_buf.getvalue() == ""


def test_child_loggers_use_the_sink() -> None:
    console, buf = _capture()
    init_diagnostics("debug", console=console)

    get_logger("handlers.release").debug("from child")

    assert "from child" in buf.getvalue()


def test_get_logger_names() -> None:
    assert get_logger().name == LOGGER_NAME
    assert get_logger("syscli.handlers").name == "syscli.handlers"
    assert get_logger("core").name == "syscli.core"
