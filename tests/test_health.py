import pytest

from hello_web import models


def test_healthz_ok(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.headers["content-type"] == "text/plain; charset=utf-8"
    assert r.content == b"ok\n"


def test_healthz_does_not_touch_hostname(client, monkeypatch):
    def boom():
        raise AssertionError("hostname looked up on /healthz")

    monkeypatch.setattr(models, "resolve_hostname", boom)
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.text == "ok\n"


def test_healthz_stable_after_other_requests(client):
    for path in ("/", "/nope", "/healthz", "/"):
        client.get(path)
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.content == b"ok\n"


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "PATCH", "OPTIONS"])
def test_healthz_answers_any_method(client, method):
    r = client.request(method, "/healthz")
    assert r.status_code == 200
    assert r.content == b"ok\n"
