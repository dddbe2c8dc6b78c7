"""FastAPI application factory for prismalint."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI

from prismalint import __version__
from prismalint.api.deps import init_linter, is_linter_initialised, reset_linter
from prismalint.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from prismalint.api.routers import lint, rules
from prismalint.api.schemas import HealthResponse
from prismalint.config import load_config
from prismalint.service.linter import SchemaLinter
from prismalint.settings import Settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Build the SchemaLinter from settings unless one was injected."""
    settings: Settings = app.state.settings
    owned = not is_linter_initialised()
    if owned:
        config = load_config(default_name=settings.config_file)
        init_linter(SchemaLinter.from_settings(settings, config))
    try:
        yield
    finally:
        if owned:
            reset_linter()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="prismalint",
        description="Naming-convention linting for Prisma schemas.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(RequestBodyLimitMiddleware)

    app.include_router(lint.router, tags=["lint"])
    app.include_router(rules.router, prefix="/rules", tags=["rules"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("prismalint.api")
    logger.info(
        "prismalint API Server v%s starting (host=%s, port=%d, cwd=%s)",
        __version__, settings.api_server_host, settings.effective_port, Path.cwd(),
    )

    uvicorn.run(
        "prismalint.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
