"""Pydantic schemas for Comment API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """Schema for adding a Comment. Needs text, an image URL, or both."""

    text: str = Field("", max_length=5000)
    image_url: str | None = Field(None, max_length=2048)


class CommentResponse(BaseModel):
    """Schema for Comment response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    space_id: UUID
    text: str
    image_url: str | None
    timestamp: datetime


class CommentListResponse(BaseModel):
    """Schema for list of Comments."""

    data: list[CommentResponse]


class CommentDetailResponse(BaseModel):
    """Schema for single Comment."""

    data: CommentResponse
