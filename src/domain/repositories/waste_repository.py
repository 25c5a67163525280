"""Waste entry repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.waste import WasteEntry


class IWasteEntryRepository(Protocol):
    """Repository interface for WasteEntry entities."""

    async def get(self, id: UUID) -> WasteEntry | None:
        """Get a waste entry by ID."""
        ...

    async def list_by_space(self, space_id: UUID) -> list[WasteEntry]:
        """Get all waste entries of a space, newest first."""
        ...

    async def create(self, entry: WasteEntry) -> WasteEntry:
        """Create a new waste entry."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a waste entry and return success status."""
        ...
