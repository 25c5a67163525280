"""Pydantic schemas for Waste API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class WasteCategoryResponse(BaseModel):
    """Schema for a TIMWOODS category."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    points: int


class WasteCategoryListResponse(BaseModel):
    """Schema for the list of categories."""

    data: list[WasteCategoryResponse]


class WasteEntryCreate(BaseModel):
    """Schema for logging waste. One entry is created per category id."""

    category_ids: list[str] = Field(..., min_length=1)


class WasteEntryResponse(BaseModel):
    """Schema for a logged waste entry."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    space_id: UUID
    type: str
    points: int
    timestamp: datetime


class WasteEntryListResponse(BaseModel):
    """Schema for list of waste entries. ``meta`` carries the point total."""

    data: list[WasteEntryResponse]
    meta: dict[str, Any] = Field(default_factory=dict)
