"""FastAPI application factory.

Learn: App factory pattern — create_app() returns a configured FastAPI
instance. Lifespan handles startup/shutdown (optional table creation,
engine disposal). Middleware, error handlers and routers are all
registered here; each concern lives in its own module.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from blogboard import __version__
from blogboard.api import api_router
from blogboard.config import settings
from blogboard.errors import BlogboardError, blogboard_error_handler
from blogboard.logging_config import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    from blogboard.db.engine import engine

    logger.info(
        "blogboard.starting",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
    )

    if settings.create_tables_on_startup:
        from blogboard.db.models import Base

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("blogboard.tables_created")

    yield

    logger.info("blogboard.shutdown")
    await engine.dispose()


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    configure_logging()

    app = FastAPI(
        title="Blogboard",
        description="Blog board backend — session login, posts and replies",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Middleware stack ──────────────────────────────────────
    # Note: Starlette middleware executes in reverse order of registration.
    # Request flow: RequestId → CORS → Session → handler

    from blogboard.middleware.request_id import RequestIdMiddleware

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.environment != "development",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIdMiddleware)

    app.add_exception_handler(BlogboardError, blogboard_error_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


# Default app instance (used by uvicorn: blogboard.main:app)
app = create_app()
