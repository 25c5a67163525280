"""Session controller: clock transitions, scoring writes and derived stats.

Every operation writes its ledger entry and commits it before touching the
Space aggregate. If the second write fails the entry stays behind as the
authoritative record; ``load()`` repairs the aggregate from the ledger.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

import structlog

from core.exceptions import (
    ActionNotFoundError,
    AppException,
    InvalidMultiplierError,
    MultiStepActionCompletedError,
    MultiStepActionNotFoundError,
    NotClockedInError,
    PersistenceError,
    SpaceNotFoundError,
)
from domain.entities.log_entry import LogEntry, LogEntryType
from domain.entities.space import Space
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.clock import (
    Now,
    OperationKind,
    OperationStatus,
    SessionClock,
    minutes_between,
)
from domain.services.ledger_service import LedgerService
from domain.services.scoring import (
    Scoreboard,
    build_scoreboard,
    clocked_minutes_from_ledger,
    next_step_indices,
)

logger = structlog.get_logger()

ALLOWED_MULTIPLIERS: tuple[int, ...] = (1, 2, 5, 10)


@dataclass(frozen=True)
class SessionView:
    """What a client renders for a space's session panel."""

    space_id: UUID
    is_clocked_in: bool
    clock_in_start_time: datetime | None
    current_session_elapsed_time: int
    is_clock_loading: bool
    scoreboard: Scoreboard


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a session operation.

    Ignored operations (duplicate clock-in, clock-out while clocked out, a
    trigger while another is in flight) carry a non-``applied`` status and
    no entry; nothing was written for them.
    """

    status: OperationStatus
    view: SessionView
    entry: LogEntry | None = None

    @property
    def applied(self) -> bool:
        return self.status is OperationStatus.APPLIED


class SessionController:
    """Orchestrates the clock, the ledger and the Space aggregate for one space."""

    def __init__(
        self,
        space_id: UUID,
        uow_factory: Callable[[], IUnitOfWork],
        ledger: LedgerService,
        now: Now = datetime.utcnow,
        on_missing: Callable[[UUID], None] | None = None,
    ) -> None:
        self._space_id = space_id
        self._uow_factory = uow_factory
        self._ledger = ledger
        self._clock = SessionClock(now)
        self._loaded = False
        self._on_missing = on_missing

    @property
    def space_id(self) -> UUID:
        return self._space_id

    @property
    def is_clocked_in(self) -> bool:
        return self._clock.is_clocked_in

    @property
    def clock_in_start_time(self) -> datetime | None:
        return self._clock.clock_in_start_time

    @property
    def current_session_elapsed_time(self) -> int:
        """Elapsed seconds of the current (or just finished) session."""
        return self._clock.elapsed_seconds

    @property
    def is_clock_loading(self) -> bool:
        return self._clock.is_clock_loading

    def tick(self, now: datetime | None = None) -> int:
        """Advance the elapsed-time display; the host calls this once a second."""
        return self._clock.tick(now)

    async def load(self) -> SessionView:
        """(Re)build session state from the persisted Space.

        Also repairs aggregates left behind by a write that committed its
        ledger entry but not the follow-up update: a session whose clock-out
        is logged is closed, ``total_clocked_in_time`` is raised to the
        ledger total (never lowered) and multi-step progress is moved up to
        the last logged step.

        Holds the clock guard while it runs. If a clock transition is already
        in flight its outcome is newer than anything read here, so the
        current state is returned as is.
        """
        if not self._clock.try_acquire(OperationKind.CLOCK):
            return await self._snapshot()
        try:
            async with self._uow_factory() as uow:
                space = await self._get_space(uow)
                entries = await uow.logs.list_by_space(self._space_id)

                changes: dict[str, object] = {}
                closed_sessions = {
                    e.clock_in_time for e in entries if e.type == LogEntryType.CLOCK_OUT
                }
                if space.is_clocked_in and space.clock_in_start_time in closed_sessions:
                    changes["is_clocked_in"] = False
                    changes["clock_in_start_time"] = None

                ledger_minutes = clocked_minutes_from_ledger(entries)
                if ledger_minutes > space.total_clocked_in_time:
                    changes["total_clocked_in_time"] = ledger_minutes

                caught_up = await self._catch_up_multi_step_actions(uow, entries)

                if changes or caught_up:
                    logger.warning(
                        "session_state_reconciled",
                        space_id=str(self._space_id),
                        stored_minutes=space.total_clocked_in_time,
                        ledger_minutes=ledger_minutes,
                        closed_dangling_session="is_clocked_in" in changes,
                        multi_step_actions_caught_up=caught_up,
                    )
                    if changes:
                        space = await uow.spaces.update(self._space_id, **changes)
                    await uow.commit()

            self._clock.restore(space.is_clocked_in, space.clock_in_start_time)
            self._loaded = True
        finally:
            self._clock.release(OperationKind.CLOCK)
        return await self.view()

    async def view(self) -> SessionView:
        """Recompute derived numbers from the ledger."""
        if not self._loaded:
            return await self.load()
        return await self._snapshot()

    async def _snapshot(self) -> SessionView:
        elapsed = self._clock.tick()
        async with self._uow_factory() as uow:
            space = await self._get_space(uow)
            entries = await uow.logs.list_by_space(self._space_id)
            waste = await uow.waste.list_by_space(self._space_id)

        return SessionView(
            space_id=self._space_id,
            is_clocked_in=self._clock.is_clocked_in,
            clock_in_start_time=self._clock.clock_in_start_time,
            current_session_elapsed_time=elapsed,
            is_clock_loading=self._clock.is_clock_loading,
            scoreboard=build_scoreboard(
                entries,
                waste,
                total_clocked_in_time=space.total_clocked_in_time,
                session_start=self._clock.clock_in_start_time,
                elapsed_seconds=elapsed,
            ),
        )

    async def clock_in(self) -> OperationResult:
        """Start a session. Ignored if one is running or in flight."""
        loaded = await self._ensure_loaded()
        if not loaded or not self._clock.try_acquire(OperationKind.CLOCK):
            return await self._ignored(OperationKind.CLOCK, OperationStatus.BUSY)
        try:
            status = self._clock.check_clock_in()
            if status is not OperationStatus.APPLIED:
                self._clock.release(OperationKind.CLOCK)
                return await self._ignored(OperationKind.CLOCK, status)

            now = self._clock.now()
            entry: LogEntry | None = None
            async with self._uow_factory() as uow:
                space = await self._get_space(uow)
                if space.is_clocked_in:
                    # Clocked in by another process since our last load; adopt it.
                    self._clock.restore(True, space.clock_in_start_time)
                else:
                    entry = await self._ledger.append_clock_in(uow, self._space_id, now)
                    await uow.commit()

                    await uow.spaces.update(
                        self._space_id, is_clocked_in=True, clock_in_start_time=now
                    )
                    await uow.commit()

            if entry is None:
                self._clock.release(OperationKind.CLOCK)
                return await self._ignored(OperationKind.CLOCK, OperationStatus.ALREADY_IN_PROGRESS)

            self._clock.mark_clocked_in(now)
            logger.info("clock_in_completed", space_id=str(self._space_id))
        except AppException:
            raise
        except Exception as exc:
            raise self._persistence_error("clock_in", exc) from exc
        finally:
            self._clock.release(OperationKind.CLOCK)

        return OperationResult(OperationStatus.APPLIED, await self.view(), entry)

    async def clock_out(self) -> OperationResult:
        """End the running session and credit its whole minutes."""
        loaded = await self._ensure_loaded()
        if not loaded or not self._clock.try_acquire(OperationKind.CLOCK):
            return await self._ignored(OperationKind.CLOCK, OperationStatus.BUSY)
        try:
            now = self._clock.now()
            minutes = 0
            entry: LogEntry | None = None
            async with self._uow_factory() as uow:
                space = await self._get_space(uow)
                if (
                    self._clock.check_clock_out() is not OperationStatus.APPLIED
                    and space.is_clocked_in
                ):
                    # Clocked in by another process since our last load; adopt it.
                    self._clock.restore(True, space.clock_in_start_time)

                start = self._clock.clock_in_start_time
                if start is not None:
                    minutes = minutes_between(start, now)
                    entry = await self._ledger.append_clock_out(
                        uow,
                        self._space_id,
                        clock_in_time=start,
                        clock_out_time=now,
                        minutes=minutes,
                    )
                    await uow.commit()

                    changes: dict[str, object] = {
                        "is_clocked_in": False,
                        "clock_in_start_time": None,
                    }
                    if minutes > 0:
                        changes["total_clocked_in_time"] = space.total_clocked_in_time + minutes
                    await uow.spaces.update(self._space_id, **changes)
                    await uow.commit()

            if entry is None:
                self._clock.release(OperationKind.CLOCK)
                return await self._ignored(OperationKind.CLOCK, OperationStatus.NOT_CLOCKED_IN)

            self._clock.mark_clocked_out(now)
            logger.info(
                "clock_out_completed",
                space_id=str(self._space_id),
                minutes_clocked_in=minutes,
            )
        except AppException:
            raise
        except Exception as exc:
            raise self._persistence_error("clock_out", exc) from exc
        finally:
            self._clock.release(OperationKind.CLOCK)

        return OperationResult(OperationStatus.APPLIED, await self.view(), entry)

    async def record_action(self, action_id: UUID, multiplier: int = 1) -> OperationResult:
        """Credit ``action.points * multiplier`` to the running session."""
        if multiplier not in ALLOWED_MULTIPLIERS:
            raise InvalidMultiplierError(multiplier, ALLOWED_MULTIPLIERS)
        if not await self._ensure_loaded():
            return await self._ignored(OperationKind.RECORD_ACTION, OperationStatus.BUSY)
        if not self._clock.is_clocked_in:
            raise NotClockedInError(str(self._space_id))
        if not self._clock.try_acquire(OperationKind.RECORD_ACTION):
            return await self._ignored(OperationKind.RECORD_ACTION, OperationStatus.BUSY)
        try:
            async with self._uow_factory() as uow:
                await self._get_space(uow)
                action = await uow.actions.get(action_id)
                if not action or action.space_id != self._space_id:
                    raise ActionNotFoundError(str(action_id))

                name = action.name if multiplier == 1 else f"{action.name} (x{multiplier})"
                entry = await self._ledger.append(
                    uow,
                    self._space_id,
                    name,
                    LogEntryType.ACTION,
                    points=action.points * multiplier,
                    timestamp=self._clock.now(),
                )
                await uow.commit()

                await uow.spaces.update(self._space_id)
                await uow.commit()

            logger.info(
                "action_recorded",
                space_id=str(self._space_id),
                action_id=str(action_id),
                points=entry.points,
            )
        except AppException:
            raise
        except Exception as exc:
            raise self._persistence_error("record_action", exc) from exc
        finally:
            self._clock.release(OperationKind.RECORD_ACTION)

        return OperationResult(OperationStatus.APPLIED, await self.view(), entry)

    async def advance_multi_step_action(self, multi_step_action_id: UUID) -> OperationResult:
        """Complete the next step of a multi-step action and credit its points."""
        kind = OperationKind.ADVANCE_MULTI_STEP_ACTION
        if not await self._ensure_loaded():
            return await self._ignored(kind, OperationStatus.BUSY)
        if not self._clock.is_clocked_in:
            raise NotClockedInError(str(self._space_id))
        if not self._clock.try_acquire(kind):
            return await self._ignored(kind, OperationStatus.BUSY)
        try:
            async with self._uow_factory() as uow:
                await self._get_space(uow)
                action = await uow.multi_step_actions.get(multi_step_action_id)
                if not action or action.space_id != self._space_id:
                    raise MultiStepActionNotFoundError(str(multi_step_action_id))
                # Steps already logged by an advance whose update was lost.
                entries = await uow.logs.list_by_space(self._space_id)
                action.catch_up(next_step_indices(entries).get(action.id, 0))
                if action.is_complete:
                    raise MultiStepActionCompletedError(str(multi_step_action_id))

                index, step = action.advance()
                entry = await self._ledger.append(
                    uow,
                    self._space_id,
                    f"{action.name}: {step.name}",
                    LogEntryType.MULTI_STEP_ACTION,
                    points=action.points_per_step,
                    timestamp=self._clock.now(),
                    multi_step_action_id=action.id,
                    step_index=index,
                )
                await uow.commit()

                await uow.multi_step_actions.update(action)
                await uow.spaces.update(self._space_id)
                await uow.commit()

            logger.info(
                "multi_step_action_advanced",
                space_id=str(self._space_id),
                multi_step_action_id=str(multi_step_action_id),
                step_index=index,
            )
        except AppException:
            raise
        except Exception as exc:
            raise self._persistence_error("advance_multi_step_action", exc) from exc
        finally:
            self._clock.release(kind)

        return OperationResult(OperationStatus.APPLIED, await self.view(), entry)

    async def _ensure_loaded(self) -> bool:
        """Load on first use. False while another task is still loading."""
        if not self._loaded:
            await self.load()
        return self._loaded

    async def _get_space(self, uow: IUnitOfWork) -> Space:
        space = await uow.spaces.get(self._space_id)
        if not space:
            if self._on_missing is not None:
                self._on_missing(self._space_id)
            raise SpaceNotFoundError(str(self._space_id))
        return space

    async def _catch_up_multi_step_actions(
        self, uow: IUnitOfWork, entries: list[LogEntry]
    ) -> int:
        """Raise stored multi-step progress to the last logged step."""
        progress = next_step_indices(entries)
        if not progress:
            return 0
        caught_up = 0
        for action in await uow.multi_step_actions.list_by_space(self._space_id):
            if action.catch_up(progress.get(action.id, 0)):
                await uow.multi_step_actions.update(action)
                caught_up += 1
        return caught_up

    async def _ignored(self, kind: OperationKind, status: OperationStatus) -> OperationResult:
        logger.debug(
            "session_operation_ignored",
            space_id=str(self._space_id),
            operation=kind.value,
            status=status.value,
        )
        return OperationResult(status, await self.view())

    def _persistence_error(self, operation: str, exc: Exception) -> PersistenceError:
        logger.error(
            "session_operation_failed",
            space_id=str(self._space_id),
            operation=operation,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return PersistenceError(operation, str(self._space_id), type(exc).__name__)


class SessionControllerRegistry:
    """Keeps one controller per space so concurrent requests share its guard.

    A controller whose space turns out not to exist drops itself again.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        ledger: LedgerService | None = None,
        now: Now = datetime.utcnow,
    ) -> None:
        self._uow_factory = uow_factory
        self._ledger = ledger or LedgerService(uow_factory)
        self._now = now
        self._controllers: dict[UUID, SessionController] = {}

    def get(self, space_id: UUID) -> SessionController:
        controller = self._controllers.get(space_id)
        if controller is None:
            controller = SessionController(
                space_id, self._uow_factory, self._ledger, self._now, on_missing=self.discard
            )
            self._controllers[space_id] = controller
        return controller

    def discard(self, space_id: UUID) -> None:
        """Forget a space's controller (after deletion)."""
        self._controllers.pop(space_id, None)

    def __len__(self) -> int:
        return len(self._controllers)
