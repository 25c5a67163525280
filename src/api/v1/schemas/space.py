"""Pydantic schemas for Space API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SpaceBase(BaseModel):
    """Base schema for Space."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    goal: str | None = Field(None, max_length=5000)
    before_image: str | None = Field(None, max_length=2048)
    after_image: str | None = Field(None, max_length=2048)


class SpaceCreate(SpaceBase):
    """Schema for creating a Space."""

    pass


class SpaceUpdate(BaseModel):
    """Schema for updating a Space's details. Clock fields are not editable."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    goal: str | None = Field(None, max_length=5000)
    before_image: str | None = Field(None, max_length=2048)
    after_image: str | None = Field(None, max_length=2048)


class SpaceResponse(BaseModel):
    """Schema for Space response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Garage",
                "description": "Clear out the garage",
                "goal": "Park the car inside",
                "before_image": None,
                "after_image": None,
                "date_created": "2026-01-28T10:00:00",
                "date_modified": "2026-01-28T11:30:00",
                "total_clocked_in_time": 95,
                "is_clocked_in": False,
                "clock_in_start_time": None,
            }
        },
    )

    id: UUID
    name: str
    description: str | None
    goal: str | None
    before_image: str | None
    after_image: str | None
    date_created: datetime
    date_modified: datetime
    total_clocked_in_time: int
    is_clocked_in: bool
    clock_in_start_time: datetime | None


class SpaceListResponse(BaseModel):
    """Schema for list of Spaces."""

    data: list[SpaceResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class SpaceDetailResponse(BaseModel):
    """Schema for single Space."""

    data: SpaceResponse
