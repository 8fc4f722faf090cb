"""Tests for syscli.core.result module."""

from __future__ import annotations

import pytest

from syscli.core.result import Err, Ok, Result


def test_repr() -> None:
    assert repr(Ok("x")) == "Ok('x')"
    assert repr(Err("bad")) == "Err('bad')"


def test_frozen() -> None:
    with pytest.raises(AttributeError):
        Ok(1).value = 2  # type: ignore[misc]


def test_pattern_matching() -> None:
    def describe(result: Result[int, str]) -> str:
        match result:
            case Ok(value):
                return f"value={value}"
            case Err(error):
                return f"error={error}"

    assert describe(Ok(3)) == "value=3"
    assert describe(Err("no")) == "error=no"
