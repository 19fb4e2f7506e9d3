"""Async SQLAlchemy engine and session factory.

Learn: one engine with connection pooling, one AsyncSession per request
via the get_db dependency. The session is the unit of work: repositories
commit at the end of each mutating operation, and anything left
uncommitted is rolled back when the session closes.
"""

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blogboard.config import settings


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given URL.

    SQLite has no server-side pool, so pool sizing only applies to
    client/server databases.
    """
    kwargs: dict[str, Any] = {"echo": echo}
    if not database_url.startswith("sqlite"):
        kwargs.update(pool_size=5, max_overflow=15, pool_pre_ping=True)
    return create_async_engine(database_url, **kwargs)


engine = build_engine(settings.database_url, echo=settings.debug)

# Session factory — each request gets its own session.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncSession:
    """FastAPI dependency — yields a session per request, auto-closes."""
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
