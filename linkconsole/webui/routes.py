from __future__ import annotations

import html
import json
import time

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from linkconsole.config import ConsoleSettings, public_settings
from linkconsole.webui.templates import CONSOLE_INDEX_HTML, LOGIN_HTML, BASE_CSS


def _client_config(settings: ConsoleSettings) -> str:
    data = {"redirect_base_url": settings.redirect_base_url}
    # Keep "</script>" out of the inline script block.
    return json.dumps(data).replace("<", "\\u003c")


def render_login(settings: ConsoleSettings) -> str:
    return (
        LOGIN_HTML.replace("{{BASE_CSS}}", BASE_CSS)
        .replace("{{SITE_TITLE}}", html.escape(settings.site_title))
    )


def render_console(settings: ConsoleSettings) -> str:
    link = settings.header_link
    return (
        CONSOLE_INDEX_HTML.replace("{{BASE_CSS}}", BASE_CSS)
        .replace("{{SITE_TITLE}}", html.escape(settings.site_title))
        .replace("{{SITE_SUBTITLE}}", html.escape(settings.site_subtitle))
        .replace("{{HEADER_LINK_HREF}}", html.escape(link["href"]))
        .replace("{{HEADER_LINK_TEXT}}", html.escape(link["text"]))
        .replace("{{CONFIG_JSON}}", _client_config(settings))
    )


def create_console_router(settings: ConsoleSettings) -> APIRouter:
    """Create the page routes plus a small JSON health endpoint."""
    router = APIRouter()
    start_time = time.time()
    login_page = render_login(settings)
    console_page = render_console(settings)

    @router.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def console_index() -> HTMLResponse:
        return HTMLResponse(content=console_page)

    @router.get("/login", response_class=HTMLResponse, include_in_schema=False)
    async def login_index() -> HTMLResponse:
        return HTMLResponse(content=login_page)

    @router.get("/api/health")
    async def health():
        return {
            "status": "ok",
            "uptime_seconds": int(time.time() - start_time),
            "config": public_settings(settings),
        }

    return router
