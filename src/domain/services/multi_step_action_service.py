"""Multi-step action service layer."""

from collections.abc import Callable
from uuid import UUID

from core.exceptions import MultiStepActionNotFoundError, SpaceNotFoundError, ValidationError
from domain.entities.multi_step_action import ActionStep, MultiStepAction
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.action_service import normalize_points


class MultiStepActionService:
    """Service layer for creating and browsing multi-step actions.

    Step progress is only ever advanced through the session controller,
    which also writes the matching ledger entry.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_for_space(self, space_id: UUID) -> list[MultiStepAction]:
        async with self._uow_factory() as uow:
            if not await uow.spaces.get(space_id):
                raise SpaceNotFoundError(str(space_id))
            return await uow.multi_step_actions.list_by_space(space_id)  # type: ignore[no-any-return]

    async def get(self, space_id: UUID, action_id: UUID) -> MultiStepAction:
        async with self._uow_factory() as uow:
            action = await uow.multi_step_actions.get(action_id)
            if not action or action.space_id != space_id:
                raise MultiStepActionNotFoundError(str(action_id))
            return action

    async def create(
        self,
        space_id: UUID,
        name: str,
        points_per_step: int,
        step_names: list[str],
        description: str | None = None,
    ) -> MultiStepAction:
        """Create a multi-step action starting at its first step.

        Args:
            space_id: Owning space.
            name: Display name.
            points_per_step: Points per completed step; non-positive becomes 1.
            step_names: Ordered step names, at least one non-blank.
            description: Optional description.
        """
        name = name.strip()
        if not name:
            raise ValidationError("Multi-step action name cannot be empty")
        steps = [ActionStep(name=s.strip()) for s in step_names if s and s.strip()]
        if not steps:
            raise ValidationError("Multi-step action must have at least one step")

        async with self._uow_factory() as uow:
            if not await uow.spaces.get(space_id):
                raise SpaceNotFoundError(str(space_id))
            created = await uow.multi_step_actions.create(
                MultiStepAction(
                    space_id=space_id,
                    name=name,
                    description=description,
                    points_per_step=normalize_points(points_per_step, "points_per_step"),
                    steps=steps,
                )
            )
            await uow.spaces.update(space_id)
            await uow.commit()
            return created

    async def delete(self, space_id: UUID, action_id: UUID) -> bool:
        async with self._uow_factory() as uow:
            action = await uow.multi_step_actions.get(action_id)
            if not action or action.space_id != space_id:
                raise MultiStepActionNotFoundError(str(action_id))
            deleted = await uow.multi_step_actions.delete(action_id)
            await uow.spaces.update(space_id)
            await uow.commit()
            return deleted  # type: ignore[no-any-return]
