import pytest
from fastapi.testclient import TestClient

from linkconsole.config import ConsoleSettings
import linkconsole.upstream_client as upstream_client
from microbin_console import create_app


class FakeResponse:
    def __init__(self, status_code=200, text="{}"):
        self.status_code = status_code
        self.text = text


class FakeUpstream:
    """Records outbound calls and replays queued responses."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def queue(self, status_code=200, text="{}"):
        self.responses.append(FakeResponse(status_code, text))

    def fail(self, exc):
        self.responses.append(exc)

    def __call__(self, method, url, json=None, headers=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "headers": headers, "timeout": timeout})
        if not self.responses:
            return FakeResponse(200, "{}")
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


@pytest.fixture
def settings():
    return ConsoleSettings(
        console_password="hunter2",
        api_base_url="https://api.example.test",
        admin_token="admintoken",
    )


@pytest.fixture
def upstream(monkeypatch):
    fake = FakeUpstream()
    monkeypatch.setattr(upstream_client.requests, "request", fake)
    return fake


@pytest.fixture
def client(settings, upstream):
    c = TestClient(create_app(settings))
    c.cookies.set("session", "authenticated")
    return c
