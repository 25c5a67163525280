"""SQLAlchemy implementation of TodoItem repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.todo import TodoItem
from infrastructure.database.models import TodoItemModel


class SQLAlchemyTodoRepository:
    """SQLAlchemy implementation of ITodoRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> TodoItem | None:
        """Get a to-do by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def list_by_space(self, space_id: UUID) -> list[TodoItem]:
        """Get all to-dos of a space, oldest first."""
        stmt = (
            select(TodoItemModel)
            .where(TodoItemModel.space_id == space_id)
            .order_by(TodoItemModel.date_created)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, item: TodoItem) -> TodoItem:
        """Create a new to-do."""
        model = self._to_model(item)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, item: TodoItem) -> TodoItem:
        """Update an existing to-do."""
        model = await self._get_model(item.id)
        if not model:
            raise ValueError(f"Todo {item.id} not found")

        model.description = item.description
        model.completed = item.completed
        model.before_image = item.before_image
        model.after_image = item.after_image

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a to-do."""
        model = await self._get_model(id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, id: UUID) -> TodoItemModel | None:
        stmt = select(TodoItemModel).where(TodoItemModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(model: TodoItemModel) -> TodoItem:
        """Convert ORM model to domain entity."""
        return TodoItem(
            id=model.id,
            space_id=model.space_id,
            description=model.description,
            completed=model.completed,
            before_image=model.before_image,
            after_image=model.after_image,
            date_created=model.date_created,
        )

    @staticmethod
    def _to_model(entity: TodoItem) -> TodoItemModel:
        """Convert domain entity to ORM model."""
        return TodoItemModel(
            id=entity.id,
            space_id=entity.space_id,
            description=entity.description,
            completed=entity.completed,
            before_image=entity.before_image,
            after_image=entity.after_image,
            date_created=entity.date_created,
        )
