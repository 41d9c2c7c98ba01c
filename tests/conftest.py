"""
Shared test configuration.
"""

from __future__ import annotations

import datetime as dt
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep dashboard settings deterministic regardless of the developer's .env."""
    for key in ("SUNDOWN_REFRESH_SECONDS", "SUNDOWN_HOUR12", "SUNDOWN_CARD_COLUMNS"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")


@pytest.fixture
def summer_noon_utc() -> dt.datetime:
    return dt.datetime(2024, 6, 21, 12, 0, tzinfo=dt.timezone.utc)
