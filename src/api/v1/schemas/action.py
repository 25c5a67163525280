"""Pydantic schemas for Action API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ActionCreate(BaseModel):
    """Schema for creating an Action. Non-positive points are stored as 1."""

    name: str = Field(..., min_length=1, max_length=200)
    points: int = Field(1, description="Points per record; values below 1 become 1")
    description: str | None = Field(None, max_length=2000)


class ActionUpdate(BaseModel):
    """Schema for updating an Action."""

    name: str | None = Field(None, min_length=1, max_length=200)
    points: int | None = None
    description: str | None = Field(None, max_length=2000)


class ActionResponse(BaseModel):
    """Schema for Action response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    space_id: UUID
    name: str
    points: int
    description: str | None


class ActionListResponse(BaseModel):
    """Schema for list of Actions."""

    data: list[ActionResponse]


class ActionDetailResponse(BaseModel):
    """Schema for single Action."""

    data: ActionResponse
