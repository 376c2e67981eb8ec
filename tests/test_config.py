# tests/test_config.py

from __future__ import annotations

import pytest

from recurrence_engine.config import get_settings
from recurrence_engine.middleware.cors import allowed_origins


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "RECURRENCE_PREVIEW_DEFAULT_COUNT",
        "RECURRENCE_PREVIEW_MAX_COUNT",
        "RECURRENCE_RANGE_MAX_INSTANCES",
        "LOG_LEVEL",
        "ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()
    assert settings.preview_default_count == 5
    assert settings.preview_max_count == 100
    assert settings.range_max_instances == 100
    assert settings.log_level == "INFO"
    assert settings.environment == "development"


def test_malformed_integer_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RECURRENCE_PREVIEW_MAX_COUNT", "lots")
    assert get_settings().preview_max_count == 100


def test_frontend_url_is_allowed_once(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRONTEND_URL", "https://tasks.example.com")
    origins = allowed_origins(get_settings())
    assert origins[-1] == "https://tasks.example.com"

    monkeypatch.setenv("FRONTEND_URL", "http://localhost:3000")
    assert allowed_origins(get_settings()).count("http://localhost:3000") == 1
