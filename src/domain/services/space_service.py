"""Space service layer with business logic."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

import structlog

from core.exceptions import SpaceNotFoundError, ValidationError
from domain.entities.action import Action
from domain.entities.multi_step_action import ActionStep, MultiStepAction
from domain.entities.space import Space
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.session_controller import SessionControllerRegistry

logger = structlog.get_logger()

COPY_SUFFIX = " (Copy)"

# Fields a client may change directly. Clock markers and clocked time are
# owned by the session controller.
EDITABLE_FIELDS = frozenset({"name", "description", "goal", "before_image", "after_image"})


class SpaceService:
    """Service layer for Space management."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        sessions: SessionControllerRegistry | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._sessions = sessions

    async def create(
        self,
        name: str,
        description: str | None = None,
        goal: str | None = None,
        before_image: str | None = None,
        after_image: str | None = None,
    ) -> Space:
        """Create a new, clocked-out space with no clocked time."""
        name = self._require_name(name)
        async with self._uow_factory() as uow:
            created = await uow.spaces.create(
                Space(
                    name=name,
                    description=description,
                    goal=goal,
                    before_image=before_image,
                    after_image=after_image,
                )
            )
            await uow.commit()

        logger.info("space_created", space_id=str(created.id))
        return created

    async def get(self, space_id: UUID) -> Space:
        async with self._uow_factory() as uow:
            space = await uow.spaces.get(space_id)
            if not space:
                raise SpaceNotFoundError(str(space_id))
            return space

    async def list(self) -> list[Space]:
        """Get all spaces, most recently modified first."""
        async with self._uow_factory() as uow:
            return await uow.spaces.list()  # type: ignore[no-any-return]

    async def update(self, space_id: UUID, **fields: Any) -> Space:
        """Update descriptive fields of a space.

        Only keys in ``EDITABLE_FIELDS`` are accepted; ``None`` values for
        ``name`` are ignored.
        """
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(
                "Only descriptive fields can be edited",
                details={"fields": sorted(unknown)},
            )
        if "name" in fields:
            if fields["name"] is None:
                del fields["name"]
            else:
                fields["name"] = self._require_name(fields["name"])

        async with self._uow_factory() as uow:
            space = await uow.spaces.get(space_id)
            if not space:
                raise SpaceNotFoundError(str(space_id))
            updated = await uow.spaces.update(space_id, **fields)
            await uow.commit()
            return updated

    async def delete(self, space_id: UUID) -> bool:
        """Delete a space; owned actions, logs and entries go with it."""
        async with self._uow_factory() as uow:
            space = await uow.spaces.get(space_id)
            if not space:
                raise SpaceNotFoundError(str(space_id))
            deleted = await uow.spaces.delete(space_id)
            await uow.commit()

        if self._sessions:
            self._sessions.discard(space_id)
        logger.info("space_deleted", space_id=str(space_id))
        return deleted  # type: ignore[no-any-return]

    async def duplicate(self, space_id: UUID) -> Space:
        """Copy a space with its actions and multi-step actions.

        Logs, waste entries, to-dos, comments, clocked time and clock state
        are not copied; multi-step progress starts over.
        """
        async with self._uow_factory() as uow:
            original = await uow.spaces.get(space_id)
            if not original:
                raise SpaceNotFoundError(str(space_id))

            copy = await uow.spaces.create(
                Space(
                    name=f"{original.name}{COPY_SUFFIX}",
                    description=original.description,
                    goal=original.goal,
                    before_image=original.before_image,
                    after_image=original.after_image,
                )
            )

            for action in await uow.actions.list_by_space(space_id):
                await uow.actions.create(
                    Action(
                        space_id=copy.id,
                        name=action.name,
                        points=action.points,
                        description=action.description,
                    )
                )

            for msa in await uow.multi_step_actions.list_by_space(space_id):
                await uow.multi_step_actions.create(
                    MultiStepAction(
                        space_id=copy.id,
                        name=msa.name,
                        description=msa.description,
                        points_per_step=msa.points_per_step,
                        steps=[ActionStep(name=step.name) for step in msa.steps],
                    )
                )

            await uow.commit()

        logger.info("space_duplicated", space_id=str(space_id), copy_id=str(copy.id))
        return copy

    @staticmethod
    def _require_name(name: str) -> str:
        name = name.strip()
        if not name:
            raise ValidationError("Space name cannot be empty")
        return name
