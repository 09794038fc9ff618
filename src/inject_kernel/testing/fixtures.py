"""
──────────────────────────────────────────────────────────────────────────────
inject_kernel.testing.fixtures
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Provide reusable pytest fixtures for registry-based applications.

Exports:
    - settings  → AppSettings pinned to in-memory SQLite
    - registry  → Registry built by web.api.deps()
    - client    → TestClient over the example app

Usage in your conftest.py:
    from inject_kernel.testing.fixtures import settings, registry, client

    def test_home(client):
        assert client.get("/").status_code == 200
──────────────────────────────────────────────────────────────────────────────
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine

from inject_kernel.config.base_settings import AppSettings
from inject_kernel.web.api import create_app, deps


def _engine(engine: Engine) -> Engine:
    return engine


@pytest.fixture()
def settings():
    """Settings that never touch the environment's database."""
    return AppSettings(database_url="sqlite://", home_template="Hello, now it's $now!")


@pytest.fixture()
def registry(settings):
    """A fresh Registry per test; its engine is disposed afterwards."""
    reg = deps(settings)
    yield reg
    reg.call(_engine).dispose()


@pytest.fixture()
def client(registry):
    """TestClient over the example app built from 'registry'."""
    with TestClient(create_app(registry)) as c:
        yield c
