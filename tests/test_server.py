"""Tests for the HTTP sidecar."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import json
import threading
import urllib.error
import urllib.request

import pytest

from malaysian_patterns import server as server_module
from malaysian_patterns.server import make_server, serve

# Bypass any proxy settings for localhost
_opener = urllib.request.build_opener(urllib.request.ProxyHandler({}))


@pytest.fixture(scope="module")
def base_url():
    server = make_server(port=0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_port}"
    server.shutdown()
    server.server_close()


def _get(url):
    with _opener.open(url) as resp:
        return resp.status, json.loads(resp.read())


def _post(url, body):
    req = urllib.request.Request(
        url,
        data=json.dumps(body).encode("utf-8"),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    try:
        with _opener.open(req) as resp:
            return resp.status, json.loads(resp.read())
    except urllib.error.HTTPError as e:
        return e.code, json.loads(e.read())


def test_health(base_url):
    assert _get(base_url + "/health") == (200, {"status": "ok"})


def test_patterns(base_url):
    status, data = _get(base_url + "/patterns")
    assert status == 200
    assert set(data) == {"name", "phone", "email"}
    assert data["email"]["description"] == "Standard email address format"


def test_validate(base_url):
    status, data = _post(base_url + "/validate", {"class": "phone", "value": " 03-12345678 "})
    assert status == 200
    assert data["match"] is True


def test_validate_bad_class(base_url):
    status, data = _post(base_url + "/validate", {"class": "ic", "value": "900101-14-5678"})
    assert status == 400
    assert "unknown data class" in data["error"]


def test_extract(base_url):
    status, data = _post(base_url + "/extract", {"text": "reach Lee Chong Wei at 04-1234567"})
    assert status == 200
    assert [(s["class"], s["value"]) for s in data["spans"]] == [
        ("name", "Lee Chong Wei"),
        ("phone", "04-1234567"),
    ]


def test_extract_html(base_url):
    status, data = _post(base_url + "/extract", {"text": "mail a@b.co", "html": True})
    assert status == 200
    assert data["annotated_text"] == 'mail <mark class="email">a@b.co</mark>'


def test_metrics(base_url):
    status, data = _post(base_url + "/metrics", {"class": "email", "annotations": {"email-47": True}})
    assert status == 200
    assert data["total_cases"] == 1
    assert data["accuracy"] == 1.0


def test_metrics_for_patterns(base_url):
    status, data = _post(base_url + "/metrics", {"patterns": True})
    assert status == 200
    assert data["total_cases"] == 64


def test_not_found(base_url):
    status, data = _post(base_url + "/nope", {})
    assert status == 404
    with pytest.raises(urllib.error.HTTPError) as exc:
        _opener.open(base_url + "/nope")
    assert exc.value.code == 404


def test_metrics_rejects_string_verdict(base_url):
    status, data = _post(base_url + "/metrics", {"annotations": {"name-1": "false"}})
    assert status == 400
    assert "name-1" in data["error"]


def test_metrics_rejects_list(base_url):
    status, _ = _post(base_url + "/metrics", {"annotations": ["name-1"]})
    assert status == 400


def test_bad_overlap_env_fails_at_startup(monkeypatch):
    monkeypatch.setenv("MALAYSIAN_PATTERNS_OVERLAP", "merge")
    with pytest.raises(ValueError):
        make_server(port=0)


class _FailingServer:
    server_port = 0
    closed = False

    def serve_forever(self):
        raise RuntimeError("socket error")

    def server_close(self):
        self.closed = True


def test_serve_closes_socket_on_error(monkeypatch):
    stub = _FailingServer()
    monkeypatch.setattr(server_module, "make_server", lambda port: stub)
    with pytest.raises(RuntimeError):
        serve(port=0)
    assert stub.closed
