"""To-do service layer with business logic."""

from collections.abc import Callable
from uuid import UUID

from core.exceptions import SpaceNotFoundError, TodoNotFoundError, ValidationError
from domain.entities.todo import TodoItem
from domain.repositories.unit_of_work import IUnitOfWork


class TodoService:
    """Service layer for a space's to-do list."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_for_space(self, space_id: UUID) -> list[TodoItem]:
        async with self._uow_factory() as uow:
            if not await uow.spaces.get(space_id):
                raise SpaceNotFoundError(str(space_id))
            return await uow.todos.list_by_space(space_id)  # type: ignore[no-any-return]

    async def create(
        self,
        space_id: UUID,
        description: str,
        before_image: str | None = None,
        after_image: str | None = None,
    ) -> TodoItem:
        """Create a new, uncompleted to-do."""
        description = self._require_description(description)
        async with self._uow_factory() as uow:
            if not await uow.spaces.get(space_id):
                raise SpaceNotFoundError(str(space_id))

            created = await uow.todos.create(
                TodoItem(
                    space_id=space_id,
                    description=description,
                    before_image=before_image,
                    after_image=after_image,
                )
            )
            await uow.spaces.update(space_id)
            await uow.commit()
            return created

    async def update(
        self,
        space_id: UUID,
        todo_id: UUID,
        description: str | None = None,
        completed: bool | None = None,
        before_image: str | None = None,
        after_image: str | None = None,
    ) -> TodoItem:
        """Update an existing to-do. ``None`` leaves a field unchanged."""
        async with self._uow_factory() as uow:
            todo = await uow.todos.get(todo_id)
            if not todo or todo.space_id != space_id:
                raise TodoNotFoundError(str(todo_id))

            if description is not None:
                todo.description = self._require_description(description)
            if completed is not None:
                todo.completed = completed
            if before_image is not None:
                todo.before_image = before_image
            if after_image is not None:
                todo.after_image = after_image

            updated = await uow.todos.update(todo)
            await uow.spaces.update(space_id)
            await uow.commit()
            return updated

    async def delete(self, space_id: UUID, todo_id: UUID) -> bool:
        async with self._uow_factory() as uow:
            todo = await uow.todos.get(todo_id)
            if not todo or todo.space_id != space_id:
                raise TodoNotFoundError(str(todo_id))

            deleted = await uow.todos.delete(todo_id)
            await uow.spaces.update(space_id)
            await uow.commit()
            return deleted  # type: ignore[no-any-return]

    @staticmethod
    def _require_description(description: str) -> str:
        description = description.strip()
        if not description:
            raise ValidationError("To-do description cannot be empty")
        return description
