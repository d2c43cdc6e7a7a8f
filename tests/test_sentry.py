from hello_web.core import sentry
from hello_web.core.config import Settings


def test_no_dsn_is_noop(clean_env, monkeypatch):
    calls = []
    monkeypatch.setattr(sentry.sentry_sdk, "init", lambda *a, **kw: calls.append((a, kw)))
    assert sentry.init_sentry(Settings()) is False
    assert calls == []


def test_dsn_enables_reporting(clean_env, monkeypatch):
    calls = []
    monkeypatch.setattr(sentry.sentry_sdk, "init", lambda *a, **kw: calls.append((a, kw)))
    settings = Settings(SENTRY_DSN="https://key@example.invalid/1", APP_VERSION="9.9.9")
    assert sentry.init_sentry(settings) is True
    (args, kwargs), = calls
    assert args == ("https://key@example.invalid/1",)
    assert kwargs["release"] == "9.9.9"
    assert kwargs["traces_sample_rate"] == 0.0
