from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, Response

from linkconsole.batch import delete_many
from linkconsole.config import ConsoleSettings, dlog
from linkconsole.paths import (
    join_segments,
    normalize_path,
    validate_link_path,
    validate_subdomain_options,
    validate_target_url,
)
from linkconsole.routes_auth import read_json_body
from linkconsole.upstream_client import MISSING_RELAY_CONFIG, AdminApiClient, UpstreamResult


def link_error(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def relay(result: UpstreamResult) -> Response:
    """Pass the upstream body back with its status untouched."""
    if result.status_code < 200 or result.status_code in (204, 304):
        # These statuses must not carry a body.
        return Response(status_code=result.status_code)
    return JSONResponse(result.envelope(), status_code=result.status_code)


def build_create_payload(body: Dict[str, Any]) -> tuple[Optional[Dict[str, Any]], Optional[str]]:
    """Validate a create request; return (payload, None) or (None, error)."""
    path = normalize_path(str(body.get("path") or ""))
    target_url = str(body.get("targetUrl") or "").strip()

    err = validate_link_path(path) or validate_target_url(target_url)
    if err:
        return None, err

    random_subdomain = body.get("randomSubdomain")
    subdomain_length = body.get("subdomainLength")
    err = validate_subdomain_options(random_subdomain, subdomain_length)
    if err:
        return None, err

    payload: Dict[str, Any] = {"path": path, "targetUrl": target_url}
    if random_subdomain is not None:
        payload["randomSubdomain"] = random_subdomain
    if subdomain_length is not None:
        payload["subdomainLength"] = subdomain_length
    return payload, None


def create_links_router(settings: ConsoleSettings, client: AdminApiClient | None = None) -> APIRouter:
    """Create the /api/links relay router in front of the upstream admin API."""
    router = APIRouter(prefix="/api/links")
    if client is None and settings.relay_configured:
        client = AdminApiClient(settings)

    def not_configured() -> JSONResponse:
        dlog("relay_not_configured", MISSING_RELAY_CONFIG)
        return link_error(MISSING_RELAY_CONFIG, 500)

    @router.get("")
    async def list_links(request: Request):
        if client is None:
            return not_configured()
        result = await run_in_threadpool(client.list_links, request.url.query)
        return relay(result)

    @router.post("")
    async def create_link(request: Request):
        if client is None:
            return not_configured()
        body = await read_json_body(request)
        payload, err = build_create_payload(body)
        if err:
            return link_error(err)
        result = await run_in_threadpool(client.create_link, payload)
        return relay(result)

    @router.delete("")
    async def delete_link_by_query(path: str | None = None):
        if client is None:
            return not_configured()
        link_path = normalize_path(path)
        if not link_path:
            return link_error("path is required")
        result = await run_in_threadpool(client.delete_link, link_path)
        return relay(result)

    @router.post("/batch-delete")
    async def batch_delete(request: Request):
        if client is None:
            return not_configured()
        body = await read_json_body(request)
        paths = body.get("paths")
        if not isinstance(paths, list) or not paths:
            return link_error("paths must be a non-empty list")
        if not all(isinstance(p, str) for p in paths):
            return link_error("paths must contain only strings")
        result = await run_in_threadpool(delete_many, client, paths, settings.batch_delete_workers)
        return JSONResponse(result.to_dict(), status_code=200 if result.all_succeeded else 207)

    @router.get("/{path:path}")
    async def get_link(path: str):
        if client is None:
            return not_configured()
        link_path = join_segments(path.split("/"))
        if not link_path:
            return link_error("path is required")
        result = await run_in_threadpool(client.get_link, link_path)
        return relay(result)

    @router.delete("/{path:path}")
    async def delete_link(path: str):
        if client is None:
            return not_configured()
        link_path = join_segments(path.split("/"))
        if not link_path:
            return link_error("path is required")
        result = await run_in_threadpool(client.delete_link, link_path)
        return relay(result)

    return router
