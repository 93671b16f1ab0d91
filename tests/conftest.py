"""Pytest configuration and shared fixtures."""

import os

# Settings are read at import time; keep tests off any real database.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")

import pytest


@pytest.fixture
def increment_form():
    return {"increment": "1"}


@pytest.fixture
def e2e_headers():
    return {"x-e2e-random-id": "123"}
