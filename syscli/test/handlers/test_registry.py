from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

import syscli.handlers as handlers
from syscli.core.errors import HandlerError
from syscli.core.operation import Operation
from syscli.core.result import Ok, Result


class FakeEntryPoint:
    def __init__(self, name: str, target: object = None, error: Exception | None = None) -> None:
        self.name = name
        self.value = f"plugin.{name}:run"
        self._target = target
        self._error = error

    def load(self) -> object:
        if self._error is not None:
            raise self._error
        return self._target


def _fake_entry_points(*eps: FakeEntryPoint) -> Callable[..., list[FakeEntryPoint]]:
    def entry_points(*, group: str) -> list[FakeEntryPoint]:
        assert group == handlers.ENTRY_POINT_GROUP
        return list(eps)

    return entry_points


def _plugin() -> Result[None, HandlerError]:
    return Ok(None)


def test_builtin_handlers_cover_every_operation() -> None:
    assert set(handlers.HANDLERS) == set(Operation)


@pytest.mark.parametrize("op", list(Operation))
def test_builtin_handlers_succeed(op: Operation) -> None:
    assert handlers.HANDLERS[op]() == Ok(None)


def test_load_handlers_without_plugins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(handlers.metadata, "entry_points", _fake_entry_points())

    table = handlers.load_handlers()

    assert table == handlers.HANDLERS
    assert table is not handlers.HANDLERS


def test_entry_point_overrides_builtin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        handlers.metadata, "entry_points", _fake_entry_points(FakeEntryPoint("release", _plugin))
    )

    table = handlers.load_handlers()

    assert table[Operation.RELEASE] is _plugin
    assert table[Operation.UPDATE] is handlers.HANDLERS[Operation.UPDATE]


def test_unknown_entry_point_is_ignored(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(
        handlers.metadata, "entry_points", _fake_entry_points(FakeEntryPoint("deploy", _plugin))
    )

    with caplog.at_level(logging.WARNING):
        table = handlers.load_handlers()

    assert set(table) == set(Operation)
    assert "unknown operation" in caplog.text


def test_broken_entry_point_keeps_builtin(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(
        handlers.metadata,
        "entry_points",
        _fake_entry_points(FakeEntryPoint("update", error=ImportError("no module named plugin"))),
    )

    with caplog.at_level(logging.WARNING):
        table = handlers.load_handlers()

    assert table[Operation.UPDATE] is handlers.HANDLERS[Operation.UPDATE]
    assert "no module named plugin" in caplog.text


def test_non_callable_entry_point_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        handlers.metadata, "entry_points", _fake_entry_points(FakeEntryPoint("update", "nope"))
    )

    table = handlers.load_handlers()

    assert table[Operation.UPDATE] is handlers.HANDLERS[Operation.UPDATE]
