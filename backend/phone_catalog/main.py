"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from phone_catalog.config import get_settings
from phone_catalog.infrastructure.database import create_mongo_client
from phone_catalog.infrastructure.logging.log_config import setup_logging
from phone_catalog.presentation.api.endpoints.upload import UPLOADS_PATH
from phone_catalog.presentation.api.errors import register_exception_handlers
from phone_catalog.presentation.api.router import router as api_router
from phone_catalog.presentation.middleware.allow_header import AllowHeaderMiddleware
from phone_catalog.presentation.middleware.content_negotiation import (
    AcceptJsonMiddleware,
    WriteContentTypeMiddleware,
)
from phone_catalog.presentation.middleware.method_override import MethodOverrideMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: logging, Mongo client, upload directory."""
    settings = get_settings()
    setup_logging()

    # 1. One client per process; connections open lazily on first query
    app.state.mongo_client = create_mongo_client(settings)
    logger.info(
        "MongoDB client ready for database '%s' at %s",
        settings.mongodb_database,
        settings.mongodb_url,
    )

    # 2. Ensure upload directory exists
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)

    yield

    # Shutdown
    await app.state.mongo_client.close()
    logger.info("MongoDB client closed")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Middleware runs outermost-last-added: Allow header → CORS → Accept
    # gate → method override → write content-type gate → routing.
    app.add_middleware(WriteContentTypeMiddleware)
    app.add_middleware(MethodOverrideMiddleware)
    app.add_middleware(AcceptJsonMiddleware, exempt_prefixes=(UPLOADS_PATH,))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Allow", "Last-Modified"],
    )
    app.add_middleware(AllowHeaderMiddleware, routes=app.router.routes)

    # Mount API routes and uploaded files
    app.include_router(api_router)
    app.mount(
        UPLOADS_PATH,
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "phone_catalog.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        proxy_headers=True,
    )
