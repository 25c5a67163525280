"""Comment service layer."""

from collections.abc import Callable
from uuid import UUID

from core.exceptions import CommentNotFoundError, SpaceNotFoundError, ValidationError
from domain.entities.comment import Comment
from domain.repositories.unit_of_work import IUnitOfWork


class CommentService:
    """Service layer for notes attached to a space."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_for_space(self, space_id: UUID) -> list[Comment]:
        """Get comments of a space, newest first."""
        async with self._uow_factory() as uow:
            if not await uow.spaces.get(space_id):
                raise SpaceNotFoundError(str(space_id))
            return await uow.comments.list_by_space(space_id)  # type: ignore[no-any-return]

    async def add(self, space_id: UUID, text: str = "", image_url: str | None = None) -> Comment:
        """Attach a comment. It needs text, an image reference, or both."""
        text = (text or "").strip()
        if not text and not image_url:
            raise ValidationError("Comment must have text or an image")

        async with self._uow_factory() as uow:
            if not await uow.spaces.get(space_id):
                raise SpaceNotFoundError(str(space_id))
            created = await uow.comments.create(
                Comment(space_id=space_id, text=text, image_url=image_url)
            )
            await uow.spaces.update(space_id)
            await uow.commit()
            return created

    async def delete(self, space_id: UUID, comment_id: UUID) -> bool:
        async with self._uow_factory() as uow:
            comment = await uow.comments.get(comment_id)
            if not comment or comment.space_id != space_id:
                raise CommentNotFoundError(str(comment_id))
            deleted = await uow.comments.delete(comment_id)
            await uow.spaces.update(space_id)
            await uow.commit()
            return deleted  # type: ignore[no-any-return]
