"""SQLAlchemy implementation of Action repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.action import Action
from infrastructure.database.models import ActionModel


class SQLAlchemyActionRepository:
    """SQLAlchemy implementation of IActionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Action | None:
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def list_by_space(self, space_id: UUID) -> list[Action]:
        stmt = (
            select(ActionModel)
            .where(ActionModel.space_id == space_id)
            .order_by(ActionModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, action: Action) -> Action:
        model = ActionModel(
            id=action.id,
            space_id=action.space_id,
            name=action.name,
            description=action.description,
            points=action.points,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, action: Action) -> Action:
        model = await self._get_model(action.id)
        if not model:
            raise ValueError(f"Action {action.id} not found")

        model.name = action.name
        model.description = action.description
        model.points = action.points

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        model = await self._get_model(id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, id: UUID) -> ActionModel | None:
        stmt = select(ActionModel).where(ActionModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(model: ActionModel) -> Action:
        return Action(
            id=model.id,
            space_id=model.space_id,
            name=model.name,
            description=model.description,
            points=model.points,
        )
