from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import requests

from .config import ConfigurationError, ConsoleSettings, dlog


MISSING_RELAY_CONFIG = "Server is not configured (missing API_BASE_URL or ADMIN_TOKEN)."


class UpstreamUnavailable(ValueError):
    """The upstream admin API could not be reached at all."""


@dataclass(frozen=True)
class ParsedJson:
    value: Any


@dataclass(frozen=True)
class RawText:
    text: str


UpstreamBody = Union[ParsedJson, RawText]


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def parse_upstream_body(text: str) -> UpstreamBody:
    try:
        return ParsedJson(json.loads(text, parse_constant=_reject_constant))
    except ValueError:
        return RawText(text)


@dataclass(frozen=True)
class UpstreamResult:
    status_code: int
    body: UpstreamBody

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def envelope(self) -> Any:
        if isinstance(self.body, ParsedJson):
            return self.body.value
        return {"raw": self.body.text}


class AdminApiClient:
    """Minimal client for the upstream short-link admin API.

    The bearer token stays on the server; callers only ever see the
    relayed status and body.
    """

    def __init__(self, settings: ConsoleSettings, session: Optional[requests.Session] = None) -> None:
        if not settings.relay_configured:
            raise ConfigurationError(MISSING_RELAY_CONFIG)
        self._base_url = settings.api_base_url
        self._token = settings.admin_token
        self._timeout = settings.upstream_timeout
        self._session = session

    def _url(self, path: str = "") -> str:
        if not path:
            return f"{self._base_url}/links"
        return f"{self._base_url}/links/{quote(path, safe='/')}"

    def _request(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> UpstreamResult:
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Cache-Control": "no-store",
        }
        if payload is not None:
            headers["Content-Type"] = "application/json"
        dlog("upstream_request", {"method": method, "url": url, "payload": payload})
        sender = self._session or requests
        try:
            resp = sender.request(method, url, json=payload, headers=headers, timeout=self._timeout)
        except requests.RequestException as e:
            raise UpstreamUnavailable(f"Could not reach upstream admin API: {e}") from e

        result = UpstreamResult(status_code=resp.status_code, body=parse_upstream_body(resp.text))
        dlog(
            "upstream_response",
            {
                "method": method,
                "url": url,
                "status": result.status_code,
                "raw": isinstance(result.body, RawText),
            },
        )
        return result

    def list_links(self, query: str = "") -> UpstreamResult:
        url = self._url()
        if query:
            url = f"{url}?{query}"
        return self._request("GET", url)

    def get_link(self, path: str) -> UpstreamResult:
        return self._request("GET", self._url(path))

    def create_link(self, payload: Dict[str, Any]) -> UpstreamResult:
        return self._request("POST", self._url(), payload=payload)

    def delete_link(self, path: str) -> UpstreamResult:
        return self._request("DELETE", self._url(path))
