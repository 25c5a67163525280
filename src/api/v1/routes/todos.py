"""To-do API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_todo_service
from api.v1.schemas.todo import (
    TodoCreate,
    TodoDetailResponse,
    TodoListResponse,
    TodoResponse,
    TodoUpdate,
)
from core.rate_limit import MANAGEMENT_WRITE_LIMIT, READ_LIMIT, limiter
from domain.services.todo_service import TodoService

router = APIRouter(prefix="/spaces/{space_id}/todos", tags=["todos"])


@router.get(
    "",
    response_model=TodoListResponse,
    summary="List to-dos",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_todos(
    request: Request,
    space_id: UUID,
    service: TodoService = Depends(get_todo_service),
) -> TodoListResponse:
    """Get the to-do list of a space, oldest first."""
    todos = await service.list_for_space(space_id)
    return TodoListResponse(data=[TodoResponse.model_validate(t) for t in todos])


@router.post(
    "",
    response_model=TodoDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a to-do",
    responses={
        201: {"description": "To-do created successfully"},
        404: {"description": "Space not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_todo(
    request: Request,
    space_id: UUID,
    body: TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> TodoDetailResponse:
    """Add a to-do to a space."""
    todo = await service.create(
        space_id=space_id,
        description=body.description,
        before_image=body.before_image,
        after_image=body.after_image,
    )
    return TodoDetailResponse(data=TodoResponse.model_validate(todo))


@router.patch(
    "/{todo_id}",
    response_model=TodoDetailResponse,
    summary="Update a to-do",
    responses={
        200: {"description": "To-do updated successfully"},
        404: {"description": "To-do not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_todo(
    request: Request,
    space_id: UUID,
    todo_id: UUID,
    body: TodoUpdate,
    service: TodoService = Depends(get_todo_service),
) -> TodoDetailResponse:
    """Update a to-do. Only provided fields change."""
    todo = await service.update(
        space_id=space_id,
        todo_id=todo_id,
        description=body.description,
        completed=body.completed,
        before_image=body.before_image,
        after_image=body.after_image,
    )
    return TodoDetailResponse(data=TodoResponse.model_validate(todo))


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a to-do",
    responses={
        204: {"description": "To-do deleted successfully"},
        404: {"description": "To-do not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_todo(
    request: Request,
    space_id: UUID,
    todo_id: UUID,
    service: TodoService = Depends(get_todo_service),
) -> None:
    """Delete a to-do."""
    await service.delete(space_id, todo_id)
    return None
