"""SQLAlchemy implementation of MultiStepAction repository."""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.multi_step_action import ActionStep, MultiStepAction
from infrastructure.database.models import MultiStepActionModel


class SQLAlchemyMultiStepActionRepository:
    """SQLAlchemy implementation of IMultiStepActionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> MultiStepAction | None:
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def list_by_space(self, space_id: UUID) -> list[MultiStepAction]:
        stmt = (
            select(MultiStepActionModel)
            .where(MultiStepActionModel.space_id == space_id)
            .order_by(MultiStepActionModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, action: MultiStepAction) -> MultiStepAction:
        model = MultiStepActionModel(
            id=action.id,
            space_id=action.space_id,
            name=action.name,
            description=action.description,
            points_per_step=action.points_per_step,
            steps=self._dump_steps(action.steps),
            current_step_index=action.current_step_index,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, action: MultiStepAction) -> MultiStepAction:
        """Persist details and step progress."""
        model = await self._get_model(action.id)
        if not model:
            raise ValueError(f"Multi-step action {action.id} not found")

        model.name = action.name
        model.description = action.description
        model.points_per_step = action.points_per_step
        # Assign a new list so the JSON column is flagged dirty.
        model.steps = self._dump_steps(action.steps)
        model.current_step_index = action.current_step_index

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        model = await self._get_model(id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, id: UUID) -> MultiStepActionModel | None:
        stmt = select(MultiStepActionModel).where(MultiStepActionModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _dump_steps(steps: list[ActionStep]) -> list[dict[str, Any]]:
        return [{"id": str(s.id), "name": s.name, "completed": s.completed} for s in steps]

    @staticmethod
    def _to_entity(model: MultiStepActionModel) -> MultiStepAction:
        return MultiStepAction(
            id=model.id,
            space_id=model.space_id,
            name=model.name,
            description=model.description,
            points_per_step=model.points_per_step,
            steps=[
                ActionStep(id=UUID(s["id"]), name=s["name"], completed=bool(s["completed"]))
                for s in model.steps
            ],
            current_step_index=model.current_step_index,
        )
