"""FastAPI application entry point.

Wiring only: logging, lifespan, exception handlers, middleware, routers.
No business logic here (SRP). See loresearch.core.lifespan and
loresearch.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from loresearch.api.v1 import api_router
from loresearch.api.v1.dependencies import build_store_repository
from loresearch.core.config import get_settings
from loresearch.core.exception_handlers import register_exception_handlers
from loresearch.core.lifespan import create_lifespan
from loresearch.core.limiter import limiter
from loresearch.middleware import RequestIDMiddleware, TimeoutMiddleware
from loresearch.pages import render_root_page
from loresearch.shared.telemetry import setup_logging

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    # One repository per app; each search takes its own snapshot from it.
    app.state.store_repo = build_store_repository(settings)

    app.state.limiter = limiter

    register_exception_handlers(app)

    # Middleware: first added = innermost. Order: timeout → request ID → CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", settings.request_id_header],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    app.include_router(api_router, prefix=API_PREFIX)

    page = render_root_page(
        settings.app_name,
        search_url=f"{API_PREFIX}/search",
        start_marker=settings.highlight_start_marker,
        end_marker=settings.highlight_end_marker,
    )

    @app.get("/", response_class=HTMLResponse)
    def root() -> HTMLResponse:
        """Search page."""
        return HTMLResponse(content=page)

    return app


app = create_app()
