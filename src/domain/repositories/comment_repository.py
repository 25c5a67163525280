"""Comment repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.comment import Comment


class ICommentRepository(Protocol):
    """Repository interface for Comment entities."""

    async def get(self, id: UUID) -> Comment | None:
        ...

    async def list_by_space(self, space_id: UUID) -> list[Comment]:
        """Get all comments of a space, newest first."""
        ...

    async def create(self, comment: Comment) -> Comment:
        ...

    async def delete(self, id: UUID) -> bool:
        ...
