from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from linkconsole.config import ConsoleSettings, dlog, load_console_settings, public_settings
from linkconsole.gate import SessionGateMiddleware
from linkconsole.routes_auth import create_auth_router
from linkconsole.routes_links import create_links_router
from linkconsole.upstream_client import AdminApiClient, UpstreamUnavailable
from linkconsole.webui.routes import create_console_router


def create_app(settings: ConsoleSettings, client: AdminApiClient | None = None) -> FastAPI:
    """Build the console app; settings are fixed for the life of the process."""
    app = FastAPI(title=settings.site_title)
    app.add_middleware(SessionGateMiddleware)
    app.include_router(create_auth_router(settings))
    app.include_router(create_links_router(settings, client))
    app.include_router(create_console_router(settings))

    @app.exception_handler(UpstreamUnavailable)
    async def upstream_unavailable(request: Request, exc: UpstreamUnavailable):
        dlog("upstream_unavailable", {"path": request.url.path, "error": str(exc)})
        return JSONResponse(
            {"error": "Upstream admin API is unreachable.", "detail": str(exc)},
            status_code=502,
        )

    if not settings.auth_configured:
        dlog("auth_not_configured", "CONSOLE_PASSWORD is missing; login will return 500.")
    if not settings.relay_configured:
        dlog("relay_not_configured", public_settings(settings))
    return app


load_dotenv()
app = create_app(load_console_settings())


if __name__ == "__main__":
    # Convenience for local runs: python microbin_console.py --console-debug
    import os

    import uvicorn

    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "18000"))
    uvicorn.run("microbin_console:app", host=host, port=port, reload=False)
