import importlib

import pytest
from fastapi.testclient import TestClient

from linkconsole.config import ConsoleSettings
from linkconsole.gate import has_valid_session, is_public_path
from microbin_console import create_app


def _reload_app(monkeypatch, extra_env=None):
    keys_to_clear = [
        "CONSOLE_PASSWORD",
        "API_BASE_URL",
        "ADMIN_TOKEN",
        "CONSOLE_ENV",
        "NODE_ENV",
        "NEXT_PUBLIC_SITE_TITLE",
        "SITE_TITLE",
    ]
    for key in keys_to_clear:
        monkeypatch.delenv(key, raising=False)
    if extra_env:
        for k, v in extra_env.items():
            monkeypatch.setenv(k, str(v))

    import microbin_console

    importlib.reload(microbin_console)
    return microbin_console.app


def test_public_paths():
    assert is_public_path("/login")
    assert is_public_path("/api/auth/login")
    assert is_public_path("/api/auth/logout")
    assert is_public_path("/favicon.ico")
    assert is_public_path("/static/app.css")
    assert is_public_path("/logo.webp")
    assert is_public_path("/Logo.PNG")
    assert is_public_path("/site.webmanifest")
    assert not is_public_path("/")
    assert not is_public_path("/api/links")
    assert not is_public_path("/images/logo.png")
    assert not is_public_path("/logo.txt")


def test_has_valid_session():
    assert has_valid_session({"session": "authenticated"})
    assert not has_valid_session({})
    assert not has_valid_session({"session": "Authenticated"})
    assert not has_valid_session({"session": "yes"})


@pytest.fixture
def app(settings):
    return create_app(settings)


def test_protected_pages_redirect_without_session(app):
    client = TestClient(app)
    for path in ["/", "/api/links", "/api/links/foo", "/api/health", "/images/logo.png"]:
        resp = client.get(path, follow_redirects=False)
        assert resp.status_code == 307, path
        assert resp.headers["location"] == "/login"


def test_invalid_cookie_value_redirects(app):
    client = TestClient(app)
    client.cookies.set("session", "admin")
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/login"


def test_login_and_auth_api_never_redirected(app):
    client = TestClient(app)
    for cookie in (None, "bogus", "authenticated"):
        if cookie:
            client.cookies.set("session", cookie)
        assert client.get("/login", follow_redirects=False).status_code == 200
        resp = client.post("/api/auth/login", json={"password": ""}, follow_redirects=False)
        assert resp.status_code == 400
        client.cookies.clear()


def test_static_assets_pass_gate(app):
    client = TestClient(app)
    # No route serves these; reaching the router (404) proves the gate let them through.
    assert client.get("/favicon.ico", follow_redirects=False).status_code == 404
    assert client.get("/logo.webp", follow_redirects=False).status_code == 404


def test_login_success_sets_cookie(app):
    client = TestClient(app)
    resp = client.post("/api/auth/login", json={"password": "  hunter2  "})
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    cookie = resp.headers["set-cookie"]
    assert "session=authenticated" in cookie
    assert "HttpOnly" in cookie
    assert "Max-Age=604800" in cookie
    assert "Path=/" in cookie
    assert "samesite=lax" in cookie.lower()
    assert "Secure" not in cookie

    page = client.get("/", follow_redirects=False)
    assert page.status_code == 200
    assert "Microbin Console" in page.text


def test_login_secure_cookie_in_production(settings):
    prod = ConsoleSettings(console_password=settings.console_password, production=True)
    client = TestClient(create_app(prod))
    resp = client.post("/api/auth/login", json={"password": "hunter2"})
    assert resp.status_code == 200
    assert "Secure" in resp.headers["set-cookie"]


def test_login_wrong_password(app):
    client = TestClient(app)
    resp = client.post("/api/auth/login", json={"password": "nope"})
    assert resp.status_code == 401
    assert resp.json()["error"] == "Incorrect password."
    assert "set-cookie" not in resp.headers


def test_login_empty_or_invalid_body(app):
    client = TestClient(app)
    assert client.post("/api/auth/login", json={"password": "   "}).status_code == 400
    assert client.post("/api/auth/login", json={}).status_code == 400
    resp = client.post("/api/auth/login", content=b"not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Password is required."


def test_login_without_configured_password():
    client = TestClient(create_app(ConsoleSettings()))
    resp = client.post("/api/auth/login", json={"password": "anything"})
    assert resp.status_code == 500
    assert "CONSOLE_PASSWORD" in resp.json()["error"]


def test_logout_clears_cookie(app):
    client = TestClient(app)
    client.post("/api/auth/login", json={"password": "hunter2"})
    resp = client.post("/api/auth/logout")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert "Max-Age=0" in resp.headers["set-cookie"]
    assert client.get("/", follow_redirects=False).status_code == 307


def test_module_app_reads_env(monkeypatch):
    app = _reload_app(monkeypatch, {"CONSOLE_PASSWORD": "envpass", "NEXT_PUBLIC_SITE_TITLE": "Short <Links>"})
    client = TestClient(app)
    page = client.get("/login")
    assert "Short &lt;Links&gt;" in page.text
    assert client.post("/api/auth/login", json={"password": "envpass"}).status_code == 200
    health = client.get("/api/health")
    assert health.status_code == 200
    data = health.json()
    assert data["status"] == "ok"
    assert data["config"]["auth_configured"] is True
    assert data["config"]["relay_configured"] is False
    assert "envpass" not in health.text
