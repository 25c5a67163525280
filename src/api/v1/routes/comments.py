"""Comment API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_comment_service
from api.v1.schemas.comment import (
    CommentCreate,
    CommentDetailResponse,
    CommentListResponse,
    CommentResponse,
)
from core.rate_limit import MANAGEMENT_WRITE_LIMIT, READ_LIMIT, limiter
from domain.services.comment_service import CommentService

router = APIRouter(prefix="/spaces/{space_id}/comments", tags=["comments"])


@router.get(
    "",
    response_model=CommentListResponse,
    summary="List comments",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_comments(
    request: Request,
    space_id: UUID,
    service: CommentService = Depends(get_comment_service),
) -> CommentListResponse:
    """Get comments of a space, newest first."""
    comments = await service.list_for_space(space_id)
    return CommentListResponse(data=[CommentResponse.model_validate(c) for c in comments])


@router.post(
    "",
    response_model=CommentDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a comment",
    responses={
        201: {"description": "Comment added"},
        400: {"description": "Comment has neither text nor image"},
        404: {"description": "Space not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_comment(
    request: Request,
    space_id: UUID,
    body: CommentCreate,
    service: CommentService = Depends(get_comment_service),
) -> CommentDetailResponse:
    """Attach a note to a space."""
    comment = await service.add(space_id, text=body.text, image_url=body.image_url)
    return CommentDetailResponse(data=CommentResponse.model_validate(comment))


@router.delete(
    "/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a comment",
    responses={
        204: {"description": "Comment deleted successfully"},
        404: {"description": "Comment not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_comment(
    request: Request,
    space_id: UUID,
    comment_id: UUID,
    service: CommentService = Depends(get_comment_service),
) -> None:
    """Delete a comment."""
    await service.delete(space_id, comment_id)
    return None
