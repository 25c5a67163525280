"""Clock-in/clock-out state machine for a single space.

The machine is in-memory only. It is rebuilt from the persisted Space on
every load, so a session started before a restart keeps counting from its
stored start time.
"""

from collections.abc import Callable
from datetime import datetime
from enum import StrEnum

Now = Callable[[], datetime]


class ClockState(StrEnum):
    CLOCKED_OUT = "clocked_out"
    CLOCKED_IN = "clocked_in"


class OperationStatus(StrEnum):
    """Outcome of a guarded session operation."""

    APPLIED = "applied"
    ALREADY_IN_PROGRESS = "already_in_progress"
    NOT_CLOCKED_IN = "not_clocked_in"
    BUSY = "busy"


class OperationKind(StrEnum):
    """In-flight guard scopes. Clock-in and clock-out share one scope."""

    CLOCK = "clock"
    RECORD_ACTION = "record_action"
    ADVANCE_MULTI_STEP_ACTION = "advance_multi_step_action"


def elapsed_seconds_between(start: datetime, end: datetime) -> int:
    """Whole seconds from ``start`` to ``end``, never negative."""
    return max(0, int((end - start).total_seconds()))


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from ``start`` to ``end``, never negative."""
    return elapsed_seconds_between(start, end) // 60


class SessionClock:
    """Tracks whether a space is clocked in and for how long.

    Transitions are two-phase: ``check_clock_in``/``check_clock_out`` decide
    whether a transition may start, the caller persists it, then
    ``mark_clocked_in``/``mark_clocked_out`` commit the in-memory state.
    ``try_acquire``/``release`` implement the in-flight guard that keeps
    duplicate triggers from overlapping.
    """

    def __init__(self, now: Now = datetime.utcnow) -> None:
        self._now = now
        self._state = ClockState.CLOCKED_OUT
        self._start: datetime | None = None
        self._elapsed = 0
        self._in_flight: set[OperationKind] = set()

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def is_clocked_in(self) -> bool:
        return self._state is ClockState.CLOCKED_IN

    @property
    def clock_in_start_time(self) -> datetime | None:
        return self._start

    @property
    def elapsed_seconds(self) -> int:
        """Last computed elapsed time. Frozen after clock-out."""
        return self._elapsed

    @property
    def is_clock_loading(self) -> bool:
        return OperationKind.CLOCK in self._in_flight

    def now(self) -> datetime:
        return self._now()

    def restore(self, is_clocked_in: bool, clock_in_start_time: datetime | None) -> None:
        """Rebuild state from persisted clock markers."""
        if is_clocked_in and clock_in_start_time is not None:
            self._state = ClockState.CLOCKED_IN
            self._start = clock_in_start_time
            self.tick()
        else:
            self._state = ClockState.CLOCKED_OUT
            self._start = None
            self._elapsed = 0

    def tick(self, now: datetime | None = None) -> int:
        """Recompute elapsed seconds while clocked in."""
        if self._state is ClockState.CLOCKED_IN and self._start is not None:
            self._elapsed = elapsed_seconds_between(self._start, now or self._now())
        return self._elapsed

    # --- in-flight guard ---

    def is_busy(self, kind: OperationKind) -> bool:
        return kind in self._in_flight

    def try_acquire(self, kind: OperationKind) -> bool:
        """Claim ``kind``; False if an operation of that kind is running."""
        if kind in self._in_flight:
            return False
        self._in_flight.add(kind)
        return True

    def release(self, kind: OperationKind) -> None:
        self._in_flight.discard(kind)

    # --- transitions ---

    def check_clock_in(self) -> OperationStatus:
        if self._state is ClockState.CLOCKED_IN:
            return OperationStatus.ALREADY_IN_PROGRESS
        return OperationStatus.APPLIED

    def check_clock_out(self) -> OperationStatus:
        if self._state is not ClockState.CLOCKED_IN or self._start is None:
            return OperationStatus.NOT_CLOCKED_IN
        return OperationStatus.APPLIED

    def mark_clocked_in(self, at: datetime) -> None:
        self._state = ClockState.CLOCKED_IN
        self._start = at
        self._elapsed = 0

    def mark_clocked_out(self, at: datetime) -> int:
        """Stop the session at ``at`` and return the whole minutes clocked."""
        if self._start is None:
            raise RuntimeError("Clock is not running")
        minutes = minutes_between(self._start, at)
        self._elapsed = elapsed_seconds_between(self._start, at)
        self._state = ClockState.CLOCKED_OUT
        self._start = None
        return minutes
