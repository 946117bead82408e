"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, knowledge.api, knowledge.observability, knowledge.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from knowledge.api.deps.dependencies import get_service_cache
from knowledge.api.routers import documents_router, health_router
from knowledge.configs import get_settings
from knowledge.observability.logger import configure_logging
from knowledge.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Opens the document collection, creates its table when configured,
    and refuses to start if the backend does not answer a ping.
    The collection's connections are released on shutdown.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.logging)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    collection = cache.collection
    try:
        if settings.database.create_schema:
            await collection.create_schema()
        await collection.ping()
    except Exception as e:
        logger.exception(
            "Failed to connect to document collection",
            extra={"error": str(e)},
        )
        await cache.close()
        raise
    logger.info("Connected to document collection")

    yield

    # Shutdown
    await cache.close()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Knowledge Document API",
        description="Versioned storage of structured client documents",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router, prefix=settings.api.prefix)
    app.include_router(documents_router, prefix=settings.api.prefix)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "knowledge.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )


if __name__ == "__main__":
    run()
