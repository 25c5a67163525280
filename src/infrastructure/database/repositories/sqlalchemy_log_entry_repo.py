"""SQLAlchemy implementation of the append-only ledger."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.log_entry import LogEntry, LogEntryType
from infrastructure.database.models import LogEntryModel


class SQLAlchemyLogEntryRepository:
    """SQLAlchemy implementation of ILogEntryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(self, entry: LogEntry) -> LogEntry:
        """Insert a new entry. Existing rows are never modified."""
        model = LogEntryModel(
            id=entry.id,
            space_id=entry.space_id,
            timestamp=entry.timestamp,
            type=entry.type.value,
            action_name=entry.action_name,
            points=entry.points,
            multi_step_action_id=entry.multi_step_action_id,
            step_index=entry.step_index,
            clock_in_time=entry.clock_in_time,
            clock_out_time=entry.clock_out_time,
            minutes_clocked_in=entry.minutes_clocked_in,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def get(self, id: UUID) -> LogEntry | None:
        stmt = select(LogEntryModel).where(LogEntryModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_by_space(self, space_id: UUID) -> list[LogEntry]:
        """Get all entries for a space, newest first."""
        stmt = (
            select(LogEntryModel)
            .where(LogEntryModel.space_id == space_id)
            .order_by(LogEntryModel.timestamp.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    @staticmethod
    def _to_entity(model: LogEntryModel) -> LogEntry:
        return LogEntry(
            id=model.id,
            space_id=model.space_id,
            timestamp=model.timestamp,
            type=LogEntryType(model.type),
            action_name=model.action_name,
            points=model.points,
            multi_step_action_id=model.multi_step_action_id,
            step_index=model.step_index,
            clock_in_time=model.clock_in_time,
            clock_out_time=model.clock_out_time,
            minutes_clocked_in=model.minutes_clocked_in,
        )
