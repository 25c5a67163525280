"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timedelta
from pathlib import Path

# Disable rate limiting and keep the app off the on-disk database in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.database.models import Base
from infrastructure.database.session import build_engine, build_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

T0 = datetime(2026, 1, 28, 10, 0, 0)


class FrozenClock:
    """Controllable replacement for ``datetime.utcnow``."""

    def __init__(self, start: datetime = T0) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> datetime:
        self.current = self.current + timedelta(seconds=seconds)
        return self.current


@pytest.fixture
def clock() -> FrozenClock:
    """A clock frozen at a fixed instant; advance it explicitly."""
    return FrozenClock()


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables for each test."""
    engine = build_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return build_session_factory(engine)


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Unit of Work factory bound to the test database."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with no dependency overrides."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def api_client(
    session_factory: async_sessionmaker[AsyncSession],
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    clock: FrozenClock,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client wired to the in-memory database.

    Every service dependency is overridden to use the test UoW factory, and
    session controllers use the frozen ``clock``.
    """
    from api.v1 import dependencies as deps
    from domain.services.action_service import ActionService
    from domain.services.comment_service import CommentService
    from domain.services.ledger_service import LedgerService
    from domain.services.multi_step_action_service import MultiStepActionService
    from domain.services.session_controller import SessionControllerRegistry
    from domain.services.space_service import SpaceService
    from domain.services.todo_service import TodoService
    from domain.services.waste_service import WasteService
    from infrastructure.database.session import get_async_session
    from main import create_app

    app = create_app()

    ledger = LedgerService(uow_factory)
    registry = SessionControllerRegistry(uow_factory, ledger=ledger, now=clock)

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[deps.get_ledger_service] = lambda: ledger
    app.dependency_overrides[deps.get_session_registry] = lambda: registry
    app.dependency_overrides[deps.get_space_service] = lambda: SpaceService(
        uow_factory, sessions=registry
    )
    app.dependency_overrides[deps.get_action_service] = lambda: ActionService(uow_factory)
    app.dependency_overrides[deps.get_multi_step_action_service] = (
        lambda: MultiStepActionService(uow_factory)
    )
    app.dependency_overrides[deps.get_waste_service] = lambda: WasteService(uow_factory)
    app.dependency_overrides[deps.get_todo_service] = lambda: TodoService(uow_factory)
    app.dependency_overrides[deps.get_comment_service] = lambda: CommentService(uow_factory)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
