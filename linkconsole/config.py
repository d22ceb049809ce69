from __future__ import annotations

import os
import json
import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urlparse


# Debug flag: default off. Enable via CLI arg "--console-debug" or env CONSOLE_DEBUG=1.
DEBUG = "--console-debug" in sys.argv or os.environ.get("CONSOLE_DEBUG") == "1"

DEFAULT_REDIRECT_BASE_URL = "https://link.microbin.dev"
DEFAULT_SITE_TITLE = "Microbin Console"
DEFAULT_SITE_SUBTITLE = "Create custom short links (301 redirect)"
DEFAULT_UPSTREAM_TIMEOUT = 30.0


def dlog(label: str, data):
    if not DEBUG:
        return
    try:
        printable = data if isinstance(data, str) else json.dumps(data, indent=2, ensure_ascii=False)
    except Exception:
        printable = str(data)
    print(f"[console-debug] {label}: {printable}")


class ConfigurationError(RuntimeError):
    """A required server-side setting is missing."""


def _env(*names: str) -> Optional[str]:
    for name in names:
        value = os.environ.get(name)
        if value is not None and value.strip():
            return value.strip()
    return None


def _float_env(name: str, default: float) -> float:
    raw = _env(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        dlog("settings_invalid_value", f"{name}={raw!r} is not a number; using {default}")
        return default
    return value if value > 0 else default


def _int_env(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        dlog("settings_invalid_value", f"{name}={raw!r} is not an integer; using {default}")
        return default
    return max(1, value)


@dataclass(frozen=True)
class ConsoleSettings:
    console_password: Optional[str] = None
    api_base_url: Optional[str] = None
    admin_token: Optional[str] = None
    redirect_base_url: str = DEFAULT_REDIRECT_BASE_URL
    site_title: str = DEFAULT_SITE_TITLE
    site_subtitle: str = DEFAULT_SITE_SUBTITLE
    header_link_text: Optional[str] = None
    header_link_href: Optional[str] = None
    production: bool = False
    upstream_timeout: float = DEFAULT_UPSTREAM_TIMEOUT
    batch_delete_workers: int = 1

    @property
    def auth_configured(self) -> bool:
        return bool(self.console_password)

    @property
    def relay_configured(self) -> bool:
        return bool(self.api_base_url and self.admin_token)

    @property
    def header_link(self) -> Dict[str, str]:
        href = self.header_link_href or self.redirect_base_url
        text = self.header_link_text or urlparse(href).netloc or href
        return {"text": text, "href": href}


def load_console_settings() -> ConsoleSettings:
    """Read console settings from env once at startup."""
    api_base_url = _env("API_BASE_URL")
    if api_base_url:
        api_base_url = api_base_url.rstrip("/")
    redirect_base_url = (
        _env("NEXT_PUBLIC_REDIRECT_BASE_URL", "REDIRECT_BASE_URL") or DEFAULT_REDIRECT_BASE_URL
    ).rstrip("/")
    environment = (_env("CONSOLE_ENV", "NODE_ENV") or "").lower()

    settings = ConsoleSettings(
        console_password=_env("CONSOLE_PASSWORD"),
        api_base_url=api_base_url,
        admin_token=_env("ADMIN_TOKEN"),
        redirect_base_url=redirect_base_url,
        site_title=_env("NEXT_PUBLIC_SITE_TITLE", "SITE_TITLE") or DEFAULT_SITE_TITLE,
        site_subtitle=_env("NEXT_PUBLIC_SITE_SUBTITLE", "SITE_SUBTITLE") or DEFAULT_SITE_SUBTITLE,
        header_link_text=_env("NEXT_PUBLIC_HEADER_LINK_TEXT", "HEADER_LINK_TEXT"),
        header_link_href=_env("NEXT_PUBLIC_HEADER_LINK_HREF", "HEADER_LINK_HREF"),
        production=environment == "production",
        upstream_timeout=_float_env("UPSTREAM_TIMEOUT", DEFAULT_UPSTREAM_TIMEOUT),
        batch_delete_workers=_int_env("BATCH_DELETE_WORKERS", 1),
    )
    dlog("console_settings", public_settings(settings))
    return settings


def public_settings(settings: ConsoleSettings) -> Dict[str, Any]:
    """Return a redacted view suitable for status endpoints and the UI."""
    return {
        "auth_configured": settings.auth_configured,
        "relay_configured": settings.relay_configured,
        "api_base_url": settings.api_base_url,
        "has_admin_token": bool(settings.admin_token),
        "redirect_base_url": settings.redirect_base_url,
        "site_title": settings.site_title,
        "site_subtitle": settings.site_subtitle,
        "header_link": settings.header_link,
        "production": settings.production,
        "upstream_timeout": settings.upstream_timeout,
        "batch_delete_workers": settings.batch_delete_workers,
    }
