"""Action service layer."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import ActionNotFoundError, SpaceNotFoundError, ValidationError
from domain.entities.action import Action
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

MIN_POINTS = 1


def normalize_points(points: int, field: str = "points") -> int:
    """Coerce non-positive point values to the minimum of 1."""
    if points < MIN_POINTS:
        logger.warning("non_positive_points_coerced", field=field, points=points)
        return MIN_POINTS
    return points


class ActionService:
    """Service layer for simple (single-click) actions."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_for_space(self, space_id: UUID) -> list[Action]:
        async with self._uow_factory() as uow:
            await self._require_space(uow, space_id)
            return await uow.actions.list_by_space(space_id)  # type: ignore[no-any-return]

    async def create(
        self,
        space_id: UUID,
        name: str,
        points: int,
        description: str | None = None,
    ) -> Action:
        """Create an action. Non-positive points become 1."""
        name = name.strip()
        if not name:
            raise ValidationError("Action name cannot be empty")

        async with self._uow_factory() as uow:
            await self._require_space(uow, space_id)
            created = await uow.actions.create(
                Action(
                    space_id=space_id,
                    name=name,
                    points=normalize_points(points),
                    description=description,
                )
            )
            await uow.spaces.update(space_id)
            await uow.commit()
            return created

    async def update(
        self,
        space_id: UUID,
        action_id: UUID,
        name: str | None = None,
        points: int | None = None,
        description: str | None = None,
    ) -> Action:
        """Edit an action. Past log entries keep the points they were awarded."""
        async with self._uow_factory() as uow:
            action = await self._get_owned(uow, space_id, action_id)
            if name is not None:
                name = name.strip()
                if not name:
                    raise ValidationError("Action name cannot be empty")
                action.name = name
            if points is not None:
                action.points = normalize_points(points)
            if description is not None:
                action.description = description

            updated = await uow.actions.update(action)
            await uow.spaces.update(space_id)
            await uow.commit()
            return updated

    async def delete(self, space_id: UUID, action_id: UUID) -> bool:
        async with self._uow_factory() as uow:
            await self._get_owned(uow, space_id, action_id)
            deleted = await uow.actions.delete(action_id)
            await uow.spaces.update(space_id)
            await uow.commit()
            return deleted  # type: ignore[no-any-return]

    async def _get_owned(self, uow: IUnitOfWork, space_id: UUID, action_id: UUID) -> Action:
        action = await uow.actions.get(action_id)
        if not action or action.space_id != space_id:
            raise ActionNotFoundError(str(action_id))
        return action

    @staticmethod
    async def _require_space(uow: IUnitOfWork, space_id: UUID) -> None:
        if not await uow.spaces.get(space_id):
            raise SpaceNotFoundError(str(space_id))
