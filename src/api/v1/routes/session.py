"""Session API routes: clock, recording and derived stats."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from api.v1.dependencies import get_ledger_service, get_session_registry
from api.v1.schemas.log import LogEntryListResponse, LogEntryResponse
from api.v1.schemas.session import (
    OperationDetailResponse,
    OperationResponse,
    RecordActionRequest,
    ScoreboardResponse,
    ScoreDetailResponse,
    SessionDetailResponse,
    SessionViewResponse,
)
from core.rate_limit import READ_LIMIT, SESSION_WRITE_LIMIT, limiter
from domain.services.ledger_service import LedgerService
from domain.services.session_controller import SessionControllerRegistry

router = APIRouter(prefix="/spaces/{space_id}", tags=["session"])


@router.get(
    "/session",
    response_model=SessionDetailResponse,
    summary="Get session state",
    responses={404: {"description": "Space not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_session(
    request: Request,
    space_id: UUID,
    reload: bool = Query(False, description="Rebuild state from storage first"),
    sessions: SessionControllerRegistry = Depends(get_session_registry),
) -> SessionDetailResponse:
    """Get clock state, elapsed time and scores. Each read advances the timer."""
    controller = sessions.get(space_id)
    view = await controller.load() if reload else await controller.view()
    return SessionDetailResponse(data=SessionViewResponse.from_view(view))


@router.post(
    "/session/clock-in",
    response_model=OperationDetailResponse,
    summary="Clock in",
    responses={
        200: {"description": "Clocked in, or ignored with a non-applied status"},
        404: {"description": "Space not found"},
        503: {"description": "Storage failure"},
    },
)
@limiter.limit(SESSION_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def clock_in(
    request: Request,
    space_id: UUID,
    sessions: SessionControllerRegistry = Depends(get_session_registry),
) -> OperationDetailResponse:
    """Start a work session. A second clock-in is ignored."""
    result = await sessions.get(space_id).clock_in()
    return OperationDetailResponse(data=OperationResponse.from_result(result))


@router.post(
    "/session/clock-out",
    response_model=OperationDetailResponse,
    summary="Clock out",
    responses={
        200: {"description": "Clocked out, or ignored with a non-applied status"},
        404: {"description": "Space not found"},
        503: {"description": "Storage failure"},
    },
)
@limiter.limit(SESSION_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def clock_out(
    request: Request,
    space_id: UUID,
    sessions: SessionControllerRegistry = Depends(get_session_registry),
) -> OperationDetailResponse:
    """End the running session and credit its whole minutes."""
    result = await sessions.get(space_id).clock_out()
    return OperationDetailResponse(data=OperationResponse.from_result(result))


@router.post(
    "/session/actions/{action_id}/record",
    response_model=OperationDetailResponse,
    summary="Record an action",
    responses={
        400: {"description": "Multiplier not allowed"},
        404: {"description": "Space or action not found"},
        409: {"description": "Not clocked in"},
    },
)
@limiter.limit(SESSION_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def record_action(
    request: Request,
    space_id: UUID,
    action_id: UUID,
    body: RecordActionRequest | None = None,
    sessions: SessionControllerRegistry = Depends(get_session_registry),
) -> OperationDetailResponse:
    """Credit the action's points times the multiplier (1, 2, 5 or 10)."""
    multiplier = body.multiplier if body else 1
    result = await sessions.get(space_id).record_action(action_id, multiplier)
    return OperationDetailResponse(data=OperationResponse.from_result(result))


@router.post(
    "/session/multi-step-actions/{multi_step_action_id}/advance",
    response_model=OperationDetailResponse,
    summary="Complete the next step",
    responses={
        404: {"description": "Space or multi-step action not found"},
        409: {"description": "Not clocked in, or all steps already completed"},
    },
)
@limiter.limit(SESSION_WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def advance_multi_step_action(
    request: Request,
    space_id: UUID,
    multi_step_action_id: UUID,
    sessions: SessionControllerRegistry = Depends(get_session_registry),
) -> OperationDetailResponse:
    """Complete the current step of a multi-step action."""
    result = await sessions.get(space_id).advance_multi_step_action(multi_step_action_id)
    return OperationDetailResponse(data=OperationResponse.from_result(result))


@router.get(
    "/logs",
    response_model=LogEntryListResponse,
    summary="Get log history",
    responses={404: {"description": "Space not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_logs(
    request: Request,
    space_id: UUID,
    ledger: LedgerService = Depends(get_ledger_service),
) -> LogEntryListResponse:
    """Get every ledger entry of a space, newest first."""
    entries = await ledger.list_for_space(space_id)
    return LogEntryListResponse(
        data=[LogEntryResponse.model_validate(e) for e in entries],
        meta={"total": len(entries)},
    )


@router.get(
    "/score",
    response_model=ScoreDetailResponse,
    summary="Get scores",
    responses={404: {"description": "Space not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_score(
    request: Request,
    space_id: UUID,
    sessions: SessionControllerRegistry = Depends(get_session_registry),
) -> ScoreDetailResponse:
    """Get total, session, per-hour, waste and net points."""
    view = await sessions.get(space_id).view()
    return ScoreDetailResponse(data=ScoreboardResponse.model_validate(view.scoreboard))
