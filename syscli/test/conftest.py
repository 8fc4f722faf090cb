from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from syscli.output.diagnostics import reset_diagnostics


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep tests away from the user's config and the process-wide sink."""
    monkeypatch.setenv("SYSCLI_CONFIG", str(tmp_path / "absent-config.toml"))
    monkeypatch.delenv("SYSCLI_LOG_LEVEL", raising=False)
    # Rich wraps at 80 columns when not attached to a terminal.
    monkeypatch.setenv("COLUMNS", "200")
    reset_diagnostics()
    yield
    reset_diagnostics()
