"""SQLAlchemy implementation of WasteEntry repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.waste import WasteEntry
from infrastructure.database.models import WasteEntryModel


class SQLAlchemyWasteEntryRepository:
    """SQLAlchemy implementation of IWasteEntryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> WasteEntry | None:
        stmt = select(WasteEntryModel).where(WasteEntryModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_by_space(self, space_id: UUID) -> list[WasteEntry]:
        """Get all waste entries of a space, newest first."""
        stmt = (
            select(WasteEntryModel)
            .where(WasteEntryModel.space_id == space_id)
            .order_by(WasteEntryModel.timestamp.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, entry: WasteEntry) -> WasteEntry:
        model = WasteEntryModel(
            id=entry.id,
            space_id=entry.space_id,
            type=entry.type,
            points=entry.points,
            timestamp=entry.timestamp,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        stmt = select(WasteEntryModel).where(WasteEntryModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    @staticmethod
    def _to_entity(model: WasteEntryModel) -> WasteEntry:
        return WasteEntry(
            id=model.id,
            space_id=model.space_id,
            type=model.type,
            points=model.points,
            timestamp=model.timestamp,
        )
