"""Space repository protocol."""

from typing import Any, Protocol
from uuid import UUID

from domain.entities.space import Space


class ISpaceRepository(Protocol):
    """Repository interface for Space aggregates."""

    async def get(self, id: UUID) -> Space | None:
        """Get a space by ID."""
        ...

    async def list(self) -> list[Space]:
        """Get all spaces, most recently modified first."""
        ...

    async def create(self, space: Space) -> Space:
        """Create a new space."""
        ...

    async def update(self, id: UUID, **fields: Any) -> Space:
        """Apply a partial update to an existing space.

        Implementations always stamp ``date_modified``, so calling this with
        no fields marks the space as touched. Raises ValueError if missing.
        """
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a space and everything it owns."""
        ...
