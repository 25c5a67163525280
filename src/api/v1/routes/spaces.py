"""Space API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_space_service
from api.v1.schemas.space import (
    SpaceCreate,
    SpaceDetailResponse,
    SpaceListResponse,
    SpaceResponse,
    SpaceUpdate,
)
from core.rate_limit import MANAGEMENT_WRITE_LIMIT, READ_LIMIT, limiter
from domain.services.space_service import SpaceService

router = APIRouter(prefix="/spaces", tags=["spaces"])


@router.get(
    "",
    response_model=SpaceListResponse,
    summary="List all spaces",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_spaces(
    request: Request,
    service: SpaceService = Depends(get_space_service),
) -> SpaceListResponse:
    """Get all spaces, most recently modified first."""
    spaces = await service.list()
    return SpaceListResponse(
        data=[SpaceResponse.model_validate(space) for space in spaces],
        meta={"total": len(spaces)},
    )


@router.post(
    "",
    response_model=SpaceDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a space",
    responses={
        201: {"description": "Space created successfully"},
        400: {"description": "Invalid space name"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_space(
    request: Request,
    body: SpaceCreate,
    service: SpaceService = Depends(get_space_service),
) -> SpaceDetailResponse:
    """Create a new space. It starts clocked out with no clocked time."""
    space = await service.create(
        name=body.name,
        description=body.description,
        goal=body.goal,
        before_image=body.before_image,
        after_image=body.after_image,
    )
    return SpaceDetailResponse(data=SpaceResponse.model_validate(space))


@router.get(
    "/{space_id}",
    response_model=SpaceDetailResponse,
    summary="Get a space",
    responses={404: {"description": "Space not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_space(
    request: Request,
    space_id: UUID,
    service: SpaceService = Depends(get_space_service),
) -> SpaceDetailResponse:
    """Get a single space by ID."""
    space = await service.get(space_id)
    return SpaceDetailResponse(data=SpaceResponse.model_validate(space))


@router.patch(
    "/{space_id}",
    response_model=SpaceDetailResponse,
    summary="Update a space",
    responses={
        200: {"description": "Space updated successfully"},
        404: {"description": "Space not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_space(
    request: Request,
    space_id: UUID,
    body: SpaceUpdate,
    service: SpaceService = Depends(get_space_service),
) -> SpaceDetailResponse:
    """Update a space's descriptive fields. Only provided fields change."""
    space = await service.update(space_id, **body.model_dump(exclude_unset=True))
    return SpaceDetailResponse(data=SpaceResponse.model_validate(space))


@router.delete(
    "/{space_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a space",
    responses={
        204: {"description": "Space deleted successfully"},
        404: {"description": "Space not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_space(
    request: Request,
    space_id: UUID,
    service: SpaceService = Depends(get_space_service),
) -> None:
    """Delete a space with its actions, log history, waste, to-dos and comments."""
    await service.delete(space_id)
    return None


@router.post(
    "/{space_id}/duplicate",
    response_model=SpaceDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Duplicate a space",
    responses={404: {"description": "Space not found"}},
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def duplicate_space(
    request: Request,
    space_id: UUID,
    service: SpaceService = Depends(get_space_service),
) -> SpaceDetailResponse:
    """Copy a space's details, actions and multi-step actions.

    History, waste, to-dos, comments and clocked time are not copied.
    """
    space = await service.duplicate(space_id)
    return SpaceDetailResponse(data=SpaceResponse.model_validate(space))
