"""Pydantic schemas for the session (clock and scoring) API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.log import LogEntryResponse
from domain.services.scoring import format_elapsed
from domain.services.session_controller import OperationResult, SessionView


class ScoreboardResponse(BaseModel):
    """Derived scoring numbers."""

    model_config = ConfigDict(from_attributes=True)

    total_points: int
    session_points: int
    ap_per_hour: float
    average_ap_per_hour: float
    total_waste_points: int
    net_points: int
    total_clocked_in_time: int


class SessionViewResponse(BaseModel):
    """Schema for a space's session state."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "space_id": "123e4567-e89b-12d3-a456-426614174000",
                "is_clocked_in": True,
                "clock_in_start_time": "2026-01-28T10:00:00",
                "current_session_elapsed_time": 125,
                "elapsed_display": "00:02:05",
                "is_clock_loading": False,
                "scoreboard": {
                    "total_points": 50,
                    "session_points": 50,
                    "ap_per_hour": 1440.0,
                    "average_ap_per_hour": 0.0,
                    "total_waste_points": 0,
                    "net_points": 50,
                    "total_clocked_in_time": 0,
                },
            }
        },
    )

    space_id: UUID
    is_clocked_in: bool
    clock_in_start_time: datetime | None
    current_session_elapsed_time: int
    elapsed_display: str
    is_clock_loading: bool
    scoreboard: ScoreboardResponse

    @classmethod
    def from_view(cls, view: SessionView) -> "SessionViewResponse":
        return cls(
            space_id=view.space_id,
            is_clocked_in=view.is_clocked_in,
            clock_in_start_time=view.clock_in_start_time,
            current_session_elapsed_time=view.current_session_elapsed_time,
            elapsed_display=format_elapsed(view.current_session_elapsed_time),
            is_clock_loading=view.is_clock_loading,
            scoreboard=ScoreboardResponse.model_validate(view.scoreboard),
        )


class SessionDetailResponse(BaseModel):
    """Schema for a single session view."""

    data: SessionViewResponse


class ScoreDetailResponse(BaseModel):
    """Schema for a space's scoreboard."""

    data: ScoreboardResponse


class RecordActionRequest(BaseModel):
    """Schema for recording an action with a multiplier."""

    multiplier: int = Field(1, description="One of 1, 2, 5 or 10")


class OperationResponse(BaseModel):
    """Outcome of a session operation.

    ``status`` is ``applied`` when something was written, otherwise
    ``already_in_progress``, ``not_clocked_in`` or ``busy``.
    """

    status: str
    applied: bool
    entry: LogEntryResponse | None = None
    session: SessionViewResponse

    @classmethod
    def from_result(cls, result: OperationResult) -> "OperationResponse":
        return cls(
            status=result.status.value,
            applied=result.applied,
            entry=LogEntryResponse.model_validate(result.entry) if result.entry else None,
            session=SessionViewResponse.from_view(result.view),
        )


class OperationDetailResponse(BaseModel):
    """Schema wrapping a session operation outcome."""

    data: OperationResponse
