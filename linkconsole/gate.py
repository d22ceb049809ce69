from __future__ import annotations

import re
from typing import Mapping

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse

from linkconsole.config import dlog


LOGIN_PATH = "/login"
AUTH_API_PREFIX = "/api/auth"
SESSION_COOKIE = "session"
SESSION_VALUE = "authenticated"

# Root-level public image files, e.g. /logo.webp
PUBLIC_IMAGE_PATTERN = re.compile(r"^/[^/]+\.(webp|png|jpg|jpeg|gif|svg|ico|webmanifest)$", re.IGNORECASE)
STATIC_PREFIXES = ("/static/", "/favicon.ico")


def is_public_path(path: str) -> bool:
    if path.startswith(LOGIN_PATH) or path.startswith(AUTH_API_PREFIX):
        return True
    if path.startswith(STATIC_PREFIXES):
        return True
    return bool(PUBLIC_IMAGE_PATTERN.match(path))


def has_valid_session(cookies: Mapping[str, str]) -> bool:
    return cookies.get(SESSION_COOKIE) == SESSION_VALUE


class SessionGateMiddleware(BaseHTTPMiddleware):
    """Redirect requests without the session cookie to the login page."""

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if is_public_path(path) or has_valid_session(request.cookies):
            return await call_next(request)

        dlog("gate_redirect", {"method": request.method, "path": path})
        return RedirectResponse(url=LOGIN_PATH, status_code=307)
