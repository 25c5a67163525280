"""Multi-step action repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.multi_step_action import MultiStepAction


class IMultiStepActionRepository(Protocol):
    """Repository interface for MultiStepAction entities."""

    async def get(self, id: UUID) -> MultiStepAction | None:
        """Get a multi-step action by ID."""
        ...

    async def list_by_space(self, space_id: UUID) -> list[MultiStepAction]:
        """Get all multi-step actions of a space."""
        ...

    async def create(self, action: MultiStepAction) -> MultiStepAction:
        """Create a new multi-step action."""
        ...

    async def update(self, action: MultiStepAction) -> MultiStepAction:
        """Persist step progress and details."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a multi-step action and return success status."""
        ...
