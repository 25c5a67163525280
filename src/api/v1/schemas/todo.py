"""Pydantic schemas for To-do API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TodoCreate(BaseModel):
    """Schema for creating a To-do."""

    description: str = Field(..., min_length=1, max_length=1000)
    before_image: str | None = Field(None, max_length=2048)
    after_image: str | None = Field(None, max_length=2048)


class TodoUpdate(BaseModel):
    """Schema for updating a To-do."""

    description: str | None = Field(None, min_length=1, max_length=1000)
    completed: bool | None = None
    before_image: str | None = Field(None, max_length=2048)
    after_image: str | None = Field(None, max_length=2048)


class TodoResponse(BaseModel):
    """Schema for To-do response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "789e4567-e89b-12d3-a456-426614174000",
                "space_id": "123e4567-e89b-12d3-a456-426614174000",
                "description": "Sweep the floor",
                "completed": False,
                "before_image": None,
                "after_image": None,
                "date_created": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    space_id: UUID
    description: str
    completed: bool
    before_image: str | None
    after_image: str | None
    date_created: datetime


class TodoListResponse(BaseModel):
    """Schema for list of To-dos."""

    data: list[TodoResponse]


class TodoDetailResponse(BaseModel):
    """Schema for single To-do."""

    data: TodoResponse
