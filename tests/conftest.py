# tests/conftest.py

from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from .factories import FIXED_NOW


@pytest.fixture()
def monday() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def fixed_clock():
    """Clock that always returns the same Monday morning."""
    return lambda: FIXED_NOW


@pytest.fixture()
def client() -> TestClient:
    from recurrence_engine.main import app

    return TestClient(app)
