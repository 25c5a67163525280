"""SQLAlchemy implementation of Comment repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.comment import Comment
from infrastructure.database.models import CommentModel


class SQLAlchemyCommentRepository:
    """SQLAlchemy implementation of ICommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Comment | None:
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def list_by_space(self, space_id: UUID) -> list[Comment]:
        """Get all comments of a space, newest first."""
        stmt = (
            select(CommentModel)
            .where(CommentModel.space_id == space_id)
            .order_by(CommentModel.timestamp.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            id=comment.id,
            space_id=comment.space_id,
            text=comment.text,
            image_url=comment.image_url,
            timestamp=comment.timestamp,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        model = await self._get_model(id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, id: UUID) -> CommentModel | None:
        stmt = select(CommentModel).where(CommentModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            space_id=model.space_id,
            text=model.text,
            image_url=model.image_url,
            timestamp=model.timestamp,
        )
