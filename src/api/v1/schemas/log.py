"""Pydantic schemas for ledger entries."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LogEntryResponse(BaseModel):
    """Schema for a single ledger entry."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    space_id: UUID
    timestamp: datetime
    type: str
    action_name: str
    points: int
    multi_step_action_id: UUID | None = None
    step_index: int | None = None
    clock_in_time: datetime | None = None
    clock_out_time: datetime | None = None
    minutes_clocked_in: int | None = None


class LogEntryListResponse(BaseModel):
    """Schema for a space's log history, newest first."""

    data: list[LogEntryResponse]
    meta: dict[str, Any] = Field(default_factory=dict)
