"""Shared pytest fixtures for books-fixture tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from books_fixture import ACTIVATION_NAME, FixtureConfig, create_app
from books_fixture.config import ENV_NAME, ENV_ROUTE_PREFIX, ENV_TITLE


@pytest.fixture
def active_config() -> FixtureConfig:
    """Return a configuration that switches the books route on."""
    return FixtureConfig(name=ACTIVATION_NAME)


@pytest.fixture
def app(active_config: FixtureConfig) -> FastAPI:
    """Build an application with the books route active."""
    return create_app(active_config)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Return a TestClient bound to the active application."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clean_fixture_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep BOOKS_FIXTURE_* variables from the outer shell out of every test."""
    for var in (ENV_NAME, ENV_ROUTE_PREFIX, ENV_TITLE):
        monkeypatch.delenv(var, raising=False)
