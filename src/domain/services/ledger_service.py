"""Ledger service: the only writer of scoring log entries."""

from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from core.exceptions import SpaceNotFoundError
from domain.entities.log_entry import (
    CLOCK_IN_LABEL,
    CLOCK_OUT_LABEL,
    LogEntry,
    LogEntryType,
)
from domain.repositories.unit_of_work import IUnitOfWork


class LedgerService:
    """Append-only access to a space's log history.

    The ``append_*`` methods run inside the caller's Unit of Work (same
    pattern as an in-transaction audit log); the caller decides when to
    commit. Nothing here updates or deletes an entry.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def append(
        self,
        uow: IUnitOfWork,
        space_id: UUID,
        action_name: str,
        entry_type: LogEntryType,
        points: int = 0,
        timestamp: datetime | None = None,
        **fields: object,
    ) -> LogEntry:
        """Create and store a new entry, stamping it with ``timestamp`` or now.

        Args:
            uow: The active Unit of Work (caller manages commit).
            space_id: Owning space.
            action_name: Human label shown in the log.
            entry_type: The kind of entry.
            points: Points awarded (0 for clock events).
            timestamp: Event time; defaults to the current UTC time.
            **fields: Type-specific fields (step index, clock times, ...).

        Returns:
            The stored LogEntry.
        """
        entry = LogEntry(
            space_id=space_id,
            action_name=action_name,
            type=entry_type,
            points=points,
            timestamp=timestamp or datetime.utcnow(),
            **fields,  # type: ignore[arg-type]
        )
        return await uow.logs.append(entry)

    async def append_clock_in(self, uow: IUnitOfWork, space_id: UUID, at: datetime) -> LogEntry:
        return await self.append(uow, space_id, CLOCK_IN_LABEL, LogEntryType.CLOCK_IN, timestamp=at)

    async def append_clock_out(
        self,
        uow: IUnitOfWork,
        space_id: UUID,
        clock_in_time: datetime,
        clock_out_time: datetime,
        minutes: int,
    ) -> LogEntry:
        return await self.append(
            uow,
            space_id,
            CLOCK_OUT_LABEL,
            LogEntryType.CLOCK_OUT,
            timestamp=clock_out_time,
            clock_in_time=clock_in_time,
            clock_out_time=clock_out_time,
            minutes_clocked_in=max(0, minutes),
        )

    async def list_for_space(self, space_id: UUID) -> list[LogEntry]:
        """Get the log history of a space, newest first."""
        async with self._uow_factory() as uow:
            space = await uow.spaces.get(space_id)
            if not space:
                raise SpaceNotFoundError(str(space_id))
            return await uow.logs.list_by_space(space_id)  # type: ignore[no-any-return]
