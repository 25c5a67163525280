"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.action_repository import IActionRepository
from domain.repositories.comment_repository import ICommentRepository
from domain.repositories.log_entry_repository import ILogEntryRepository
from domain.repositories.multi_step_action_repository import IMultiStepActionRepository
from domain.repositories.space_repository import ISpaceRepository
from domain.repositories.todo_repository import ITodoRepository
from domain.repositories.waste_repository import IWasteEntryRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions."""

    spaces: ISpaceRepository
    logs: ILogEntryRepository
    actions: IActionRepository
    multi_step_actions: IMultiStepActionRepository
    waste: IWasteEntryRepository
    todos: ITodoRepository
    comments: ICommentRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
