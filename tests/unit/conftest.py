"""Shared fixtures for unit tests."""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.space import Space


class FakeUnitOfWork:
    """Fake Unit of Work with all 7 repository mocks for unit testing."""

    def __init__(self) -> None:
        self.spaces = AsyncMock()
        self.logs = AsyncMock()
        self.actions = AsyncMock()
        self.multi_step_actions = AsyncMock()
        self.waste = AsyncMock()
        self.todos = AsyncMock()
        self.comments = AsyncMock()
        self.commits = 0
        self.rolled_back = False

    @property
    def committed(self) -> bool:
        return self.commits > 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def space_id() -> UUID:
    """A random space ID."""
    return uuid4()


@pytest.fixture
def space(space_id: UUID) -> Space:
    """A clocked-out space with no clocked time."""
    return Space(
        id=space_id,
        name="Garage",
        date_created=datetime(2026, 1, 1),
        date_modified=datetime(2026, 1, 1),
    )
