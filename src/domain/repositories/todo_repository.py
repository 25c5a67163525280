"""To-do repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.todo import TodoItem


class ITodoRepository(Protocol):
    """Repository interface for TodoItem entities."""

    async def get(self, id: UUID) -> TodoItem | None:
        """Get a to-do by ID."""
        ...

    async def list_by_space(self, space_id: UUID) -> list[TodoItem]:
        """Get all to-dos of a space, oldest first."""
        ...

    async def create(self, item: TodoItem) -> TodoItem:
        """Create a new to-do."""
        ...

    async def update(self, item: TodoItem) -> TodoItem:
        """Update an existing to-do."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a to-do and return success status."""
        ...
