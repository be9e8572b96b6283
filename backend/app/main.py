"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from app.config import get_settings
from app.infrastructure.database import Base, engine
from app.infrastructure.logging.log_config import setup_logging
from app.presentation.api.endpoints.clients import router as clients_router
from app.presentation.api.responses import register_exception_handlers
from app.presentation.middleware.cors import PermissiveCORSMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, dispose the engine."""
    settings = get_settings()
    setup_logging()

    # The clients table is created on first start; there are no migrations
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Storage ready at %s", settings.database_url)

    yield

    # Shutdown
    await engine.dispose()
    logger.info("Storage connection closed")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.add_middleware(PermissiveCORSMiddleware)
    register_exception_handlers(app)

    # Mount API routes
    app.include_router(clients_router, prefix=settings.resource_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    setup_logging(settings)
    logger.info("Starting server on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
    )
