from __future__ import annotations

import hmac

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from linkconsole.config import ConsoleSettings, dlog
from linkconsole.gate import SESSION_COOKIE, SESSION_VALUE


SESSION_MAX_AGE = 60 * 60 * 24 * 7


def auth_error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def read_json_body(request: Request) -> dict:
    """Parse a JSON object body; anything unparsable counts as empty."""
    try:
        body = await request.json()
    except Exception:
        return {}
    return body if isinstance(body, dict) else {}


def _verify_password(expected: str, provided: str) -> bool:
    return hmac.compare_digest(expected.encode("utf-8"), provided.encode("utf-8"))


def create_auth_router(settings: ConsoleSettings) -> APIRouter:
    router = APIRouter(prefix="/api/auth")

    @router.post("/login")
    async def login(request: Request):
        if not settings.auth_configured:
            return auth_error("Server is not configured (missing CONSOLE_PASSWORD).", 500)

        body = await read_json_body(request)
        raw = body.get("password")
        password = "" if raw is None else str(raw).strip()
        if not password:
            return auth_error("Password is required.", 400)

        if not _verify_password(settings.console_password, password):
            dlog("login_rejected", "incorrect password")
            return auth_error("Incorrect password.", 401)

        resp = JSONResponse({"success": True})
        resp.set_cookie(
            SESSION_COOKIE,
            SESSION_VALUE,
            max_age=SESSION_MAX_AGE,
            path="/",
            secure=settings.production,
            httponly=True,
            samesite="lax",
        )
        dlog("login_ok", {"secure_cookie": settings.production})
        return resp

    @router.post("/logout")
    async def logout():
        resp = JSONResponse({"success": True})
        resp.delete_cookie(
            SESSION_COOKIE,
            path="/",
            secure=settings.production,
            httponly=True,
            samesite="lax",
        )
        return resp

    return router
