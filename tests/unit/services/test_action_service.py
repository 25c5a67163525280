"""Unit tests for Action and Multi-step Action services."""

from uuid import UUID, uuid4

import pytest

from core.exceptions import (
    ActionNotFoundError,
    MultiStepActionNotFoundError,
    SpaceNotFoundError,
    ValidationError,
)
from domain.entities.action import Action
from domain.entities.multi_step_action import MultiStepAction
from domain.entities.space import Space
from domain.services.action_service import ActionService, normalize_points
from domain.services.multi_step_action_service import MultiStepActionService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def action_service(uow: FakeUnitOfWork, space: Space) -> ActionService:
    uow.spaces.get.return_value = space
    uow.actions.create.side_effect = lambda a: a
    uow.actions.update.side_effect = lambda a: a
    return ActionService(lambda: uow)


@pytest.fixture
def msa_service(uow: FakeUnitOfWork, space: Space) -> MultiStepActionService:
    uow.spaces.get.return_value = space
    uow.multi_step_actions.create.side_effect = lambda a: a
    return MultiStepActionService(lambda: uow)


class TestNormalizePoints:
    @pytest.mark.parametrize(("points", "expected"), [(5, 5), (1, 1), (0, 1), (-4, 1)])
    def test_coerces_non_positive_to_one(self, points: int, expected: int) -> None:
        assert normalize_points(points) == expected


class TestActionService:
    @pytest.mark.asyncio
    async def test_create_coerces_points_and_touches_space(
        self, action_service: ActionService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        action = await action_service.create(space_id, "Sweep", 0)

        assert action.points == 1
        assert action.space_id == space_id
        uow.spaces.update.assert_called_once_with(space_id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_create_in_missing_space(
        self, action_service: ActionService, uow: FakeUnitOfWork
    ) -> None:
        uow.spaces.get.return_value = None

        with pytest.raises(SpaceNotFoundError):
            await action_service.create(uuid4(), "Sweep", 10)

    @pytest.mark.asyncio
    async def test_create_blank_name(self, action_service: ActionService, space_id: UUID) -> None:
        with pytest.raises(ValidationError):
            await action_service.create(space_id, "  ", 10)

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(
        self, action_service: ActionService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        existing = Action(space_id=space_id, name="Sweep", points=10, description="Floor")
        uow.actions.get.return_value = existing

        updated = await action_service.update(space_id, existing.id, points=-3)

        assert updated.points == 1
        assert updated.name == "Sweep"
        assert updated.description == "Floor"

    @pytest.mark.asyncio
    async def test_update_action_of_other_space(
        self, action_service: ActionService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        uow.actions.get.return_value = Action(space_id=uuid4(), name="Sweep", points=10)

        with pytest.raises(ActionNotFoundError):
            await action_service.update(space_id, uuid4(), name="Mop")

    @pytest.mark.asyncio
    async def test_delete(
        self, action_service: ActionService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        existing = Action(space_id=space_id, name="Sweep", points=10)
        uow.actions.get.return_value = existing
        uow.actions.delete.return_value = True

        assert await action_service.delete(space_id, existing.id) is True
        uow.actions.delete.assert_called_once_with(existing.id)


class TestMultiStepActionService:
    @pytest.mark.asyncio
    async def test_create_starts_at_first_step(
        self, msa_service: MultiStepActionService, space_id: UUID
    ) -> None:
        action = await msa_service.create(
            space_id, "Tidy", points_per_step=3, step_names=["Clear", "Wipe", "Stack"]
        )

        assert action.current_step_index == 0
        assert [s.name for s in action.steps] == ["Clear", "Wipe", "Stack"]
        assert not any(s.completed for s in action.steps)
        assert len({s.id for s in action.steps}) == 3

    @pytest.mark.asyncio
    async def test_create_skips_blank_steps_and_coerces_points(
        self, msa_service: MultiStepActionService, space_id: UUID
    ) -> None:
        action = await msa_service.create(
            space_id, "Tidy", points_per_step=0, step_names=["", " Clear ", "  "]
        )

        assert [s.name for s in action.steps] == ["Clear"]
        assert action.points_per_step == 1

    @pytest.mark.asyncio
    async def test_create_without_steps_rejected(
        self, msa_service: MultiStepActionService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        with pytest.raises(ValidationError):
            await msa_service.create(space_id, "Tidy", points_per_step=3, step_names=[" "])

        uow.multi_step_actions.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_from_other_space_not_found(
        self, msa_service: MultiStepActionService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        uow.multi_step_actions.get.return_value = MultiStepAction(
            space_id=uuid4(), name="Tidy", points_per_step=1
        )

        with pytest.raises(MultiStepActionNotFoundError):
            await msa_service.get(space_id, uuid4())

    @pytest.mark.asyncio
    async def test_delete_missing(
        self, msa_service: MultiStepActionService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        uow.multi_step_actions.get.return_value = None

        with pytest.raises(MultiStepActionNotFoundError):
            await msa_service.delete(space_id, uuid4())
