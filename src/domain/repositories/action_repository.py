"""Action repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.action import Action


class IActionRepository(Protocol):
    """Repository interface for Action entities."""

    async def get(self, id: UUID) -> Action | None:
        """Get an action by ID."""
        ...

    async def list_by_space(self, space_id: UUID) -> list[Action]:
        """Get all actions of a space."""
        ...

    async def create(self, action: Action) -> Action:
        """Create a new action."""
        ...

    async def update(self, action: Action) -> Action:
        """Update an existing action."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete an action and return success status."""
        ...
