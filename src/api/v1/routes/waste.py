"""Waste API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_waste_service
from api.v1.schemas.waste import (
    WasteCategoryListResponse,
    WasteCategoryResponse,
    WasteEntryCreate,
    WasteEntryListResponse,
    WasteEntryResponse,
)
from core.rate_limit import MANAGEMENT_WRITE_LIMIT, READ_LIMIT, limiter
from domain.services.scoring import total_waste_points
from domain.services.waste_service import WasteService

router = APIRouter(prefix="/spaces/{space_id}/waste", tags=["waste"])
categories_router = APIRouter(prefix="/waste-categories", tags=["waste"])


@categories_router.get(
    "",
    response_model=WasteCategoryListResponse,
    summary="List waste categories",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_waste_categories(
    request: Request,
    service: WasteService = Depends(get_waste_service),
) -> WasteCategoryListResponse:
    """Get the eight TIMWOODS categories with their point weights."""
    return WasteCategoryListResponse(
        data=[WasteCategoryResponse.model_validate(c) for c in service.categories()]
    )


@router.get(
    "",
    response_model=WasteEntryListResponse,
    summary="List waste entries",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_waste(
    request: Request,
    space_id: UUID,
    service: WasteService = Depends(get_waste_service),
) -> WasteEntryListResponse:
    """Get logged waste, newest first, with the point total in ``meta``."""
    entries = await service.list_for_space(space_id)
    return WasteEntryListResponse(
        data=[WasteEntryResponse.model_validate(e) for e in entries],
        meta={"total": len(entries), "total_waste_points": total_waste_points(entries)},
    )


@router.post(
    "",
    response_model=WasteEntryListResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Log waste",
    responses={
        201: {"description": "Waste logged"},
        400: {"description": "No valid category ids"},
        404: {"description": "Space not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def log_waste(
    request: Request,
    space_id: UUID,
    body: WasteEntryCreate,
    service: WasteService = Depends(get_waste_service),
) -> WasteEntryListResponse:
    """Log one entry per category id. Unknown ids are skipped."""
    created = await service.add_entries(space_id, body.category_ids)
    return WasteEntryListResponse(
        data=[WasteEntryResponse.model_validate(e) for e in created],
        meta={"total": len(created), "total_waste_points": total_waste_points(created)},
    )


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a waste entry",
    responses={
        204: {"description": "Waste entry deleted successfully"},
        404: {"description": "Waste entry not found"},
    },
)
@limiter.limit(MANAGEMENT_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_waste(
    request: Request,
    space_id: UUID,
    entry_id: UUID,
    service: WasteService = Depends(get_waste_service),
) -> None:
    """Delete a logged waste entry."""
    await service.delete(space_id, entry_id)
    return None
