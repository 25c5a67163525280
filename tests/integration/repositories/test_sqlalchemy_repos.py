"""Integration tests for the SQLAlchemy repositories."""

from collections.abc import Callable
from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from domain.entities.log_entry import LogEntry, LogEntryType
from domain.entities.multi_step_action import ActionStep, MultiStepAction
from domain.entities.space import Space
from domain.entities.todo import TodoItem
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

UowFactory = Callable[[], SQLAlchemyUnitOfWork]


async def _create_space(uow_factory: UowFactory, name: str = "Garage") -> Space:
    async with uow_factory() as uow:
        space = await uow.spaces.create(Space(name=name))
        await uow.commit()
    return space


class TestSpaceRepository:
    @pytest.mark.asyncio
    async def test_update_stamps_date_modified(self, uow_factory: UowFactory) -> None:
        space = await _create_space(uow_factory)

        async with uow_factory() as uow:
            updated = await uow.spaces.update(space.id, goal="Park the car inside")
            await uow.commit()

        assert updated.goal == "Park the car inside"
        assert updated.date_modified >= space.date_modified

    @pytest.mark.asyncio
    async def test_update_rejects_unknown_field(self, uow_factory: UowFactory) -> None:
        space = await _create_space(uow_factory)

        async with uow_factory() as uow:
            with pytest.raises(ValueError):
                await uow.spaces.update(space.id, date_created=datetime(2020, 1, 1))

    @pytest.mark.asyncio
    async def test_list_most_recently_modified_first(self, uow_factory: UowFactory) -> None:
        first = await _create_space(uow_factory, "First")
        second = await _create_space(uow_factory, "Second")

        async with uow_factory() as uow:
            await uow.spaces.update(first.id, description="touched")
            await uow.commit()
            spaces = await uow.spaces.list()

        assert [s.id for s in spaces] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_half_written_clock_markers_rejected(self, uow_factory: UowFactory) -> None:
        space = await _create_space(uow_factory)

        async with uow_factory() as uow:
            with pytest.raises(IntegrityError):
                await uow.spaces.update(space.id, is_clocked_in=True)

    @pytest.mark.asyncio
    async def test_delete_missing_returns_false(self, uow_factory: UowFactory) -> None:
        async with uow_factory() as uow:
            assert await uow.spaces.delete(uuid4()) is False


class TestLogEntryRepository:
    @pytest.mark.asyncio
    async def test_list_newest_first(self, uow_factory: UowFactory) -> None:
        space = await _create_space(uow_factory)
        t0 = datetime(2026, 1, 28, 10)

        async with uow_factory() as uow:
            for offset, name in enumerate(["Clock In", "Sweep", "Mop"]):
                entry_type = LogEntryType.CLOCK_IN if offset == 0 else LogEntryType.ACTION
                await uow.logs.append(
                    LogEntry(
                        space_id=space.id,
                        action_name=name,
                        type=entry_type,
                        points=0 if offset == 0 else 5,
                        timestamp=t0 + timedelta(seconds=offset),
                    )
                )
            await uow.commit()
            entries = await uow.logs.list_by_space(space.id)

        assert [e.action_name for e in entries] == ["Mop", "Sweep", "Clock In"]
        assert entries[0].type is LogEntryType.ACTION

    @pytest.mark.asyncio
    async def test_clock_out_fields_round_trip(self, uow_factory: UowFactory) -> None:
        space = await _create_space(uow_factory)
        start = datetime(2026, 1, 28, 10)
        end = start + timedelta(minutes=3, seconds=5)

        async with uow_factory() as uow:
            stored = await uow.logs.append(
                LogEntry(
                    space_id=space.id,
                    action_name="Clock Out",
                    type=LogEntryType.CLOCK_OUT,
                    timestamp=end,
                    clock_in_time=start,
                    clock_out_time=end,
                    minutes_clocked_in=3,
                )
            )
            await uow.commit()
            fetched = await uow.logs.get(stored.id)

        assert fetched == stored
        assert fetched is not None and fetched.minutes_clocked_in == 3


class TestMultiStepActionRepository:
    @pytest.mark.asyncio
    async def test_step_progress_persists(self, uow_factory: UowFactory) -> None:
        space = await _create_space(uow_factory)
        action = MultiStepAction(
            space_id=space.id,
            name="Tidy",
            points_per_step=2,
            steps=[ActionStep("Clear"), ActionStep("Wipe")],
        )

        async with uow_factory() as uow:
            created = await uow.multi_step_actions.create(action)
            created.advance()
            await uow.multi_step_actions.update(created)
            await uow.commit()

        async with uow_factory() as uow:
            fetched = await uow.multi_step_actions.get(action.id)

        assert fetched is not None
        assert fetched.current_step_index == 1
        assert [s.completed for s in fetched.steps] == [True, False]
        assert [s.id for s in fetched.steps] == [s.id for s in action.steps]


class TestTodoRepository:
    @pytest.mark.asyncio
    async def test_update_and_list(self, uow_factory: UowFactory) -> None:
        space = await _create_space(uow_factory)

        async with uow_factory() as uow:
            todo = await uow.todos.create(TodoItem(space_id=space.id, description="Sweep"))
            todo.completed = True
            todo.after_image = "https://img/after.png"
            await uow.todos.update(todo)
            await uow.commit()
            todos = await uow.todos.list_by_space(space.id)

        assert len(todos) == 1
        assert todos[0].completed is True
        assert todos[0].after_image == "https://img/after.png"
