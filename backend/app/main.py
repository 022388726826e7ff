"""FastAPI application factory and server entry point."""

import logging
import socket
import sys
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.domain.exceptions import StartupError
from app.infrastructure.logging.log_config import setup_logging
from app.infrastructure.memory import InMemoryRecordRepository
from app.presentation.api.router import router as api_router
from app.presentation.graphql import build_graphql_router

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and report the endpoint."""
    settings = get_settings()
    setup_logging()

    logger.info(
        "Record store ready with %d records; GraphQL at %s",
        await app.state.record_repository.count(),
        settings.graphql_path,
    )

    yield

    logger.info("Shutting down")

def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    Each call owns a freshly seeded record store, kept on ``app.state``.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.record_repository = InMemoryRecordRepository.seeded()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)
    app.include_router(build_graphql_router(settings))

    return app

def ensure_port_available(host: str, port: int) -> None:
    """Probe-bind ``host:port`` so a busy port fails fast with a clear message."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, port))
        except OSError as exc:
            raise StartupError(host, port, exc.strerror or str(exc), exc.errno) from exc

def run() -> None:
    """Console entry point: start uvicorn on the configured port."""
    import uvicorn

    settings = get_settings()
    setup_logging()

    try:
        ensure_port_available(settings.host, settings.port)
    except StartupError as exc:
        if exc.address_in_use:
            logger.error(
                "Port %d is already in use. Try: PORT=%d (%s)",
                exc.port,
                exc.port + 1,
                exc.reason,
            )
        else:
            logger.error("Server error: %s", exc)
        sys.exit(1)

    logger.info("Server running at http://localhost:%d%s", settings.port, settings.graphql_path)
    try:
        uvicorn.run(app, host=settings.host, port=settings.port)
    except Exception:
        logger.exception("Error starting server")
        sys.exit(1)

app = create_app()


if __name__ == "__main__":
    run()
