"""Pytest configuration for test isolation.

The CLI reads defaults from ``VENMO_QUICKEN_*`` environment variables and
loads a ``.env`` from the current working directory. A developer's shell (or a
stray ``.env`` in the checkout) would otherwise change expected output, so
every test starts from a clean environment inside its own temporary
directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest

_ENV_VARS = ("VENMO_QUICKEN_ACCOUNT", "VENMO_QUICKEN_DATE_FORMAT", "VENMO_QUICKEN_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
