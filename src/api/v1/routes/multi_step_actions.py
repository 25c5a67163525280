"""Multi-step Action API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_multi_step_action_service
from api.v1.schemas.multi_step_action import (
    MultiStepActionCreate,
    MultiStepActionDetailResponse,
    MultiStepActionListResponse,
    MultiStepActionResponse,
)
from core.rate_limit import MANAGEMENT_WRITE_LIMIT, READ_LIMIT, limiter
from domain.services.multi_step_action_service import MultiStepActionService

router = APIRouter(prefix="/spaces/{space_id}/multi-step-actions", tags=["multi-step-actions"])


@router.get(
    "",
    response_model=MultiStepActionListResponse,
    summary="List multi-step actions",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_multi_step_actions(
    request: Request,
    space_id: UUID,
    service: MultiStepActionService = Depends(get_multi_step_action_service),
) -> MultiStepActionListResponse:
    """Get the multi-step actions of a space with their progress."""
    actions = await service.list_for_space(space_id)
    return MultiStepActionListResponse(
        data=[MultiStepActionResponse.model_validate(a) for a in actions]
    )


@router.get(
    "/{multi_step_action_id}",
    response_model=MultiStepActionDetailResponse,
    summary="Get a multi-step action",
    responses={404: {"description": "Multi-step action not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_multi_step_action(
    request: Request,
    space_id: UUID,
    multi_step_action_id: UUID,
    service: MultiStepActionService = Depends(get_multi_step_action_service),
) -> MultiStepActionDetailResponse:
    """Get a single multi-step action."""
    action = await service.get(space_id, multi_step_action_id)
    return MultiStepActionDetailResponse(data=MultiStepActionResponse.model_validate(action))


@router.post(
    "",
    response_model=MultiStepActionDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a multi-step action",
    responses={
        201: {"description": "Multi-step action created successfully"},
        400: {"description": "No usable steps"},
        404: {"description": "Space not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_multi_step_action(
    request: Request,
    space_id: UUID,
    body: MultiStepActionCreate,
    service: MultiStepActionService = Depends(get_multi_step_action_service),
) -> MultiStepActionDetailResponse:
    """Create a multi-step action starting at its first step."""
    action = await service.create(
        space_id=space_id,
        name=body.name,
        points_per_step=body.points_per_step,
        step_names=body.steps,
        description=body.description,
    )
    return MultiStepActionDetailResponse(data=MultiStepActionResponse.model_validate(action))


@router.delete(
    "/{multi_step_action_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a multi-step action",
    responses={
        204: {"description": "Multi-step action deleted successfully"},
        404: {"description": "Multi-step action not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_multi_step_action(
    request: Request,
    space_id: UUID,
    multi_step_action_id: UUID,
    service: MultiStepActionService = Depends(get_multi_step_action_service),
) -> None:
    """Delete a multi-step action. Its log entries stay in the history."""
    await service.delete(space_id, multi_step_action_id)
    return None
