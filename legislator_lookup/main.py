"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, load_settings
from .context import ServiceContext, build_context
from .routers import health, kansas, legislators

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if getattr(app.state, "context", None) is None:
        app.state.context = build_context(app.state.settings)
    yield


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()))
        message = f"Invalid request: {location}: {errors[0].get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def create_app(
    context: ServiceContext | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Build the application.

    When ``context`` is given it is used as-is; otherwise the datasets are
    loaded on startup from the configured paths.
    """
    app = FastAPI(
        title="Legislator Lookup API",
        description="Congressional legislator and Kansas senate district lookup",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = context.settings if context is not None else settings or load_settings()
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health.router)
    app.include_router(legislators.router, prefix="/api")
    app.include_router(kansas.router, prefix="/api")
    return app


def run() -> None:
    """Start the HTTP server."""
    import uvicorn

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app = create_app(settings=settings)
    logger.info("Server running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
