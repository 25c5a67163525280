"""Unit tests for To-do service layer."""

from uuid import UUID, uuid4

import pytest

from core.exceptions import SpaceNotFoundError, TodoNotFoundError, ValidationError
from domain.entities.space import Space
from domain.entities.todo import TodoItem
from domain.services.todo_service import TodoService

# FakeUnitOfWork is provided by the shared conftest at tests/unit/conftest.py.
# Import it here only for type-hint usage in fixtures/tests.
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork, space: Space) -> TodoService:
    """Create service with fake UoW."""
    uow.spaces.get.return_value = space
    uow.todos.create.side_effect = lambda t: t
    uow.todos.update.side_effect = lambda t: t
    return TodoService(lambda: uow)


@pytest.fixture
def sample_todo(space_id: UUID) -> TodoItem:
    return TodoItem(space_id=space_id, description="Sweep the floor")


class TestTodoServiceList:
    @pytest.mark.asyncio
    async def test_returns_space_todos(
        self, service: TodoService, uow: FakeUnitOfWork, space_id: UUID, sample_todo: TodoItem
    ) -> None:
        uow.todos.list_by_space.return_value = [sample_todo]

        result = await service.list_for_space(space_id)

        assert result == [sample_todo]
        uow.todos.list_by_space.assert_called_once_with(space_id)

    @pytest.mark.asyncio
    async def test_missing_space(self, service: TodoService, uow: FakeUnitOfWork) -> None:
        uow.spaces.get.return_value = None

        with pytest.raises(SpaceNotFoundError):
            await service.list_for_space(uuid4())


class TestTodoServiceCreate:
    @pytest.mark.asyncio
    async def test_creates_uncompleted_todo(
        self, service: TodoService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        todo = await service.create(space_id, " Sweep ", before_image="https://img/1.png")

        assert todo.description == "Sweep"
        assert todo.completed is False
        assert todo.before_image == "https://img/1.png"
        uow.spaces.update.assert_called_once_with(space_id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_empty_description_rejected(
        self, service: TodoService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        with pytest.raises(ValidationError):
            await service.create(space_id, "   ")

        uow.todos.create.assert_not_called()


class TestTodoServiceUpdate:
    @pytest.mark.asyncio
    async def test_marks_completed(
        self, service: TodoService, uow: FakeUnitOfWork, space_id: UUID, sample_todo: TodoItem
    ) -> None:
        uow.todos.get.return_value = sample_todo

        result = await service.update(space_id, sample_todo.id, completed=True)

        assert result.completed is True
        assert result.description == "Sweep the floor"

    @pytest.mark.asyncio
    async def test_todo_of_other_space(
        self, service: TodoService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        uow.todos.get.return_value = TodoItem(space_id=uuid4(), description="Elsewhere")

        with pytest.raises(TodoNotFoundError):
            await service.update(space_id, uuid4(), completed=True)

        uow.todos.update.assert_not_called()


class TestTodoServiceDelete:
    @pytest.mark.asyncio
    async def test_deletes(
        self, service: TodoService, uow: FakeUnitOfWork, space_id: UUID, sample_todo: TodoItem
    ) -> None:
        uow.todos.get.return_value = sample_todo
        uow.todos.delete.return_value = True

        assert await service.delete(space_id, sample_todo.id) is True
        uow.todos.delete.assert_called_once_with(sample_todo.id)

    @pytest.mark.asyncio
    async def test_missing(self, service: TodoService, uow: FakeUnitOfWork, space_id: UUID) -> None:
        uow.todos.get.return_value = None

        with pytest.raises(TodoNotFoundError):
            await service.delete(space_id, uuid4())
