"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.repositories.sqlalchemy_action_repo import SQLAlchemyActionRepository
from infrastructure.database.repositories.sqlalchemy_comment_repo import (
    SQLAlchemyCommentRepository,
)
from infrastructure.database.repositories.sqlalchemy_log_entry_repo import (
    SQLAlchemyLogEntryRepository,
)
from infrastructure.database.repositories.sqlalchemy_multi_step_action_repo import (
    SQLAlchemyMultiStepActionRepository,
)
from infrastructure.database.repositories.sqlalchemy_space_repo import SQLAlchemySpaceRepository
from infrastructure.database.repositories.sqlalchemy_todo_repo import SQLAlchemyTodoRepository
from infrastructure.database.repositories.sqlalchemy_waste_repo import (
    SQLAlchemyWasteEntryRepository,
)


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    @property
    def session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._session

    @property
    def spaces(self) -> SQLAlchemySpaceRepository:
        """Get space repository."""
        return SQLAlchemySpaceRepository(self.session)

    @property
    def logs(self) -> SQLAlchemyLogEntryRepository:
        """Get ledger repository."""
        return SQLAlchemyLogEntryRepository(self.session)

    @property
    def actions(self) -> SQLAlchemyActionRepository:
        """Get action repository."""
        return SQLAlchemyActionRepository(self.session)

    @property
    def multi_step_actions(self) -> SQLAlchemyMultiStepActionRepository:
        """Get multi-step action repository."""
        return SQLAlchemyMultiStepActionRepository(self.session)

    @property
    def waste(self) -> SQLAlchemyWasteEntryRepository:
        """Get waste entry repository."""
        return SQLAlchemyWasteEntryRepository(self.session)

    @property
    def todos(self) -> SQLAlchemyTodoRepository:
        """Get to-do repository."""
        return SQLAlchemyTodoRepository(self.session)

    @property
    def comments(self) -> SQLAlchemyCommentRepository:
        """Get comment repository."""
        return SQLAlchemyCommentRepository(self.session)

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager and cleanup."""
        if self._session:
            if exc_type:
                await self.rollback()
            await self._session.close()
            self._session = None
