"""Shared fixtures."""

import logging

import pytest

from hello_api.settings import get_settings
from hello_api.stores import mongo as mongo_store
from hello_api.stores import redis as redis_store
from tests.fakes import FakeMongo, FakeRedis


@pytest.fixture(autouse=True)
def _reset_settings():
    """Clear cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _capture_service_logs(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="uvicorn.error")


@pytest.fixture
def install_stores(monkeypatch: pytest.MonkeyPatch):
    """Install fake store clients as the process-wide handles."""

    def _install(cache: FakeRedis, documents: FakeMongo) -> None:
        monkeypatch.setattr(redis_store, "_redis", cache)
        monkeypatch.setattr(mongo_store, "_mongo", documents)

    return _install
