"""Action API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_action_service
from api.v1.schemas.action import (
    ActionCreate,
    ActionDetailResponse,
    ActionListResponse,
    ActionResponse,
    ActionUpdate,
)
from core.rate_limit import MANAGEMENT_WRITE_LIMIT, READ_LIMIT, limiter
from domain.services.action_service import ActionService

router = APIRouter(prefix="/spaces/{space_id}/actions", tags=["actions"])


@router.get(
    "",
    response_model=ActionListResponse,
    summary="List actions",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_actions(
    request: Request,
    space_id: UUID,
    service: ActionService = Depends(get_action_service),
) -> ActionListResponse:
    """Get the actions defined for a space."""
    actions = await service.list_for_space(space_id)
    return ActionListResponse(data=[ActionResponse.model_validate(a) for a in actions])


@router.post(
    "",
    response_model=ActionDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an action",
    responses={
        201: {"description": "Action created successfully"},
        404: {"description": "Space not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_action(
    request: Request,
    space_id: UUID,
    body: ActionCreate,
    service: ActionService = Depends(get_action_service),
) -> ActionDetailResponse:
    """Create an action. Points below 1 are stored as 1."""
    action = await service.create(
        space_id=space_id,
        name=body.name,
        points=body.points,
        description=body.description,
    )
    return ActionDetailResponse(data=ActionResponse.model_validate(action))


@router.patch(
    "/{action_id}",
    response_model=ActionDetailResponse,
    summary="Update an action",
    responses={404: {"description": "Action not found"}},
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_action(
    request: Request,
    space_id: UUID,
    action_id: UUID,
    body: ActionUpdate,
    service: ActionService = Depends(get_action_service),
) -> ActionDetailResponse:
    """Update an action. Existing log entries keep their points."""
    action = await service.update(
        space_id=space_id,
        action_id=action_id,
        name=body.name,
        points=body.points,
        description=body.description,
    )
    return ActionDetailResponse(data=ActionResponse.model_validate(action))


@router.delete(
    "/{action_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an action",
    responses={
        204: {"description": "Action deleted successfully"},
        404: {"description": "Action not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_action(
    request: Request,
    space_id: UUID,
    action_id: UUID,
    service: ActionService = Depends(get_action_service),
) -> None:
    """Delete an action. Its log entries stay in the history."""
    await service.delete(space_id, action_id)
    return None
