"""FastAPI application factory / entrypoint.

This service exposes read-only HTTP endpoints for NFL reference data:
- teams (all, by id, by division)
- players (all, by id, by team)
- conferences and position types
- the current week's schedule
- health checks

Operational notes:
- The document store handle is created once in the application lifespan from
  `Settings` (see `db.build_store`) and shared by every request.
- CORS is enabled for the configured frontend origins.
- Interactive API docs are served at `/`, the OpenAPI document at `/openapi.json`.
- All error responses use the body `{"error": "<message>"}`.
"""

from __future__ import annotations

import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from common.logging import clear_log_context, configure_logging, get_logger, log_context
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .db import build_store
from .routes import router
from .settings import Settings, settings as default_settings
from .store import DocumentStore

logger = get_logger(__name__)

DESCRIPTION = "A public API for NFL teams, players, conferences, position types and the weekly schedule."


def create_app(settings: Settings | None = None, store: DocumentStore | None = None) -> FastAPI:
    """Build the API application.

    Args:
        settings: Service configuration; defaults to the environment-derived
            module-level settings.
        store: Pre-built document store. When omitted, the lifespan builds one
            from `settings` at startup and closes it at shutdown.

    Returns:
        FastAPI: The configured application.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level, json_logs=settings.log_json)
        owns_store = app.state.store is None
        if owns_store:
            app.state.store = build_store(settings)
        try:
            yield
        finally:
            if owns_store:
                app.state.store.close()
                app.state.store = None

    app = FastAPI(
        title="NFL Public API",
        version="1.0.0",
        description=DESCRIPTION,
        docs_url="/",
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        log_context(request_id=request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            logger.info(
                "request",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            return response
        finally:
            clear_log_context("request_id")

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error(
                "request failed",
                method=request.method,
                path=request.url.path,
                detail=exc.detail,
                exc_info=exc,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.error("unhandled error", method=request.method, path=request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error."})

    app.include_router(router, prefix=settings.api_prefix)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/public", StaticFiles(directory=static_dir), name="public")

    @app.get("/health", include_in_schema=False)
    def health():
        """Health check endpoint.

        Returns a minimal payload used by containers and orchestrators to
        determine whether the API process is up. It does not touch the store.

        Returns:
            dict: `{"status": "ok", "service": "api"}`.
        """
        return {"status": "ok", "service": "api"}

    return app


app = create_app()


def run() -> None:
    """Serve `app` with uvicorn on the configured host/port."""
    uvicorn.run("nfl_api.main:app", host=default_settings.host, port=default_settings.port)
