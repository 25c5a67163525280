"""SQLAlchemy implementation of Space repository."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.space import Space
from infrastructure.database.models import (
    ActionModel,
    CommentModel,
    LogEntryModel,
    MultiStepActionModel,
    SpaceModel,
    TodoItemModel,
    WasteEntryModel,
)

# Tables owned by a space, removed together with it.
_OWNED_MODELS = (
    LogEntryModel,
    ActionModel,
    MultiStepActionModel,
    WasteEntryModel,
    TodoItemModel,
    CommentModel,
)

_UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "description",
        "goal",
        "before_image",
        "after_image",
        "total_clocked_in_time",
        "is_clocked_in",
        "clock_in_start_time",
    }
)


class SQLAlchemySpaceRepository:
    """SQLAlchemy implementation of ISpaceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Space | None:
        """Get a space by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def list(self) -> list[Space]:
        """Get all spaces, most recently modified first."""
        stmt = select(SpaceModel).order_by(SpaceModel.date_modified.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, space: Space) -> Space:
        """Create a new space."""
        model = self._to_model(space)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, id: UUID, **fields: Any) -> Space:
        """Apply a partial update and stamp ``date_modified``."""
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update space fields: {sorted(unknown)}")

        model = await self._get_model(id)
        if not model:
            raise ValueError(f"Space {id} not found")

        for name, value in fields.items():
            setattr(model, name, value)
        model.date_modified = datetime.utcnow()

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a space together with everything it owns."""
        model = await self._get_model(id)
        if not model:
            return False

        # Explicit deletes so the cascade does not depend on SQLite's
        # foreign_keys pragma.
        for owned in _OWNED_MODELS:
            await self._session.execute(delete(owned).where(owned.space_id == id))
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, id: UUID) -> SpaceModel | None:
        stmt = select(SpaceModel).where(SpaceModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(model: SpaceModel) -> Space:
        """Convert ORM model to domain entity."""
        return Space(
            id=model.id,
            name=model.name,
            description=model.description,
            goal=model.goal,
            before_image=model.before_image,
            after_image=model.after_image,
            date_created=model.date_created,
            date_modified=model.date_modified,
            total_clocked_in_time=model.total_clocked_in_time,
            is_clocked_in=model.is_clocked_in,
            clock_in_start_time=model.clock_in_start_time,
        )

    @staticmethod
    def _to_model(entity: Space) -> SpaceModel:
        """Convert domain entity to ORM model."""
        return SpaceModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            goal=entity.goal,
            before_image=entity.before_image,
            after_image=entity.after_image,
            date_created=entity.date_created,
            date_modified=entity.date_modified,
            total_clocked_in_time=entity.total_clocked_in_time,
            is_clocked_in=entity.is_clocked_in,
            clock_in_start_time=entity.clock_in_start_time,
        )
