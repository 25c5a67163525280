"""Pydantic schemas for Multi-step Action API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class MultiStepActionCreate(BaseModel):
    """Schema for creating a Multi-step Action."""

    name: str = Field(..., min_length=1, max_length=200)
    points_per_step: int = Field(1, description="Values below 1 become 1")
    steps: list[str] = Field(..., min_length=1, description="Ordered step names")
    description: str | None = Field(None, max_length=2000)


class ActionStepResponse(BaseModel):
    """Schema for a single step."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    completed: bool


class MultiStepActionResponse(BaseModel):
    """Schema for Multi-step Action response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    space_id: UUID
    name: str
    description: str | None
    points_per_step: int
    steps: list[ActionStepResponse]
    current_step_index: int
    is_complete: bool


class MultiStepActionListResponse(BaseModel):
    """Schema for list of Multi-step Actions."""

    data: list[MultiStepActionResponse]


class MultiStepActionDetailResponse(BaseModel):
    """Schema for single Multi-step Action."""

    data: MultiStepActionResponse
