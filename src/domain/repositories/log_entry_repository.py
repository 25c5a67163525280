"""Log entry repository protocol (append-only ledger)."""

from typing import Protocol
from uuid import UUID

from domain.entities.log_entry import LogEntry


class ILogEntryRepository(Protocol):
    """Append-only storage for ledger entries.

    There is deliberately no update or delete: corrections are new entries.
    """

    async def append(self, entry: LogEntry) -> LogEntry:
        """Durably store a new entry."""
        ...

    async def get(self, id: UUID) -> LogEntry | None:
        """Get a single entry by ID."""
        ...

    async def list_by_space(self, space_id: UUID) -> list[LogEntry]:
        """Get all entries for a space, newest first."""
        ...
