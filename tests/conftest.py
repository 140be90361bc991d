"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from typed_accessors.config import DAYFIRST_ENV, YEARFIRST_ENV, reset_date_settings


@pytest.fixture(autouse=True)
def reset_date_parser_settings(monkeypatch):
    monkeypatch.delenv(DAYFIRST_ENV, raising=False)
    monkeypatch.delenv(YEARFIRST_ENV, raising=False)
    reset_date_settings()
    yield
    reset_date_settings()
