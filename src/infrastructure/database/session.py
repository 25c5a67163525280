"""Database session management."""

from typing import Any, AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.config import settings
from infrastructure.database.models import Base


def build_engine(url: str, echo: bool = False, **kwargs: Any) -> AsyncEngine:
    """Create an async engine, enabling foreign keys on SQLite."""
    is_sqlite = url.startswith("sqlite")
    if not is_sqlite:
        kwargs.setdefault("pool_pre_ping", True)
    async_engine = create_async_engine(url, echo=echo, **kwargs)

    if is_sqlite:
        event.listen(async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return async_engine


def build_session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# Create async engine
engine = build_engine(settings.async_database_url, echo=settings.debug)

# Create async session factory
async_session_factory = build_session_factory(engine)


async def init_models(async_engine: AsyncEngine | None = None) -> None:
    """Create missing tables. Used for local SQLite runs; production uses Alembic."""
    async with (async_engine or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database sessions."""
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
