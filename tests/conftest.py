import pytest
from fastapi.testclient import TestClient

from hello_web.core.config import Settings
from hello_web.main import create_app

ENV_KEYS = ("PORT", "HOST", "APP_VERSION", "GIT_SHA", "BUILD_TIME", "READ_HEADER_TIMEOUT_SECONDS", "LOG_LEVEL", "SENTRY_DSN")


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield monkeypatch


@pytest.fixture
def settings(clean_env):
    return Settings(APP_VERSION="1.2.3", GIT_SHA="abc1234", BUILD_TIME="2024-01-15T10:00:00Z")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
