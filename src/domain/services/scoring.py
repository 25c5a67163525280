"""Action point calculations derived from a space's ledger.

Everything here is a pure function over already-loaded entries. Scores are
never cached on the Space; callers recompute them from the ledger whenever
they need a fresh number.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from domain.entities.log_entry import LogEntry, LogEntryType
from domain.entities.waste import WasteEntry

SECONDS_PER_HOUR = 3600


@dataclass(frozen=True)
class Scoreboard:
    """Derived display numbers for one space."""

    total_points: int
    session_points: int
    ap_per_hour: float
    average_ap_per_hour: float
    total_waste_points: int
    net_points: int
    total_clocked_in_time: int


def total_points(entries: Iterable[LogEntry]) -> int:
    """Sum points over action and multi-step entries."""
    return sum(e.points for e in entries if e.is_scoring)


def session_points(entries: Iterable[LogEntry], session_start: datetime | None) -> int:
    """Sum scoring points earned at or after ``session_start``."""
    if session_start is None:
        return 0
    return sum(e.points for e in entries if e.is_scoring and e.timestamp >= session_start)


def ap_per_hour(points: int | float, elapsed_seconds: int | float) -> float:
    """Points per hour of elapsed session time, 0 for an empty session."""
    if elapsed_seconds <= 0:
        return 0.0
    return points / (elapsed_seconds / SECONDS_PER_HOUR)


def average_ap_per_hour(points: int | float, clocked_minutes: int | float) -> float:
    """Lifetime points per hour over all clocked time."""
    return ap_per_hour(points, clocked_minutes * 60)


def total_waste_points(entries: Iterable[WasteEntry]) -> int:
    return sum(e.points for e in entries)


def net_points(points: int, waste_points: int) -> int:
    """Display score: action points minus waste points."""
    return points - waste_points


def clocked_minutes_from_ledger(entries: Iterable[LogEntry]) -> int:
    """Total minutes recorded by clock-out entries.

    A retried clock-out can leave two entries for the same session; sessions
    are keyed by their clock-in time and counted once.
    """
    by_session: dict[datetime | None, int] = {}
    for e in entries:
        if e.type != LogEntryType.CLOCK_OUT:
            continue
        minutes = e.minutes_clocked_in or 0
        by_session[e.clock_in_time] = max(by_session.get(e.clock_in_time, 0), minutes)
    return sum(by_session.values())


def next_step_indices(entries: Iterable[LogEntry]) -> dict[UUID, int]:
    """Next step index per multi-step action, as recorded in the ledger."""
    progress: dict[UUID, int] = {}
    for e in entries:
        if (
            e.type != LogEntryType.MULTI_STEP_ACTION
            or e.multi_step_action_id is None
            or e.step_index is None
        ):
            continue
        progress[e.multi_step_action_id] = max(
            progress.get(e.multi_step_action_id, 0), e.step_index + 1
        )
    return progress


def build_scoreboard(
    entries: list[LogEntry],
    waste_entries: list[WasteEntry],
    total_clocked_in_time: int,
    session_start: datetime | None,
    elapsed_seconds: int,
) -> Scoreboard:
    """Compute every derived number for a space in one pass."""
    points = total_points(entries)
    current = session_points(entries, session_start)
    waste = total_waste_points(waste_entries)
    return Scoreboard(
        total_points=points,
        session_points=current,
        ap_per_hour=ap_per_hour(current, elapsed_seconds),
        average_ap_per_hour=average_ap_per_hour(points, total_clocked_in_time),
        total_waste_points=waste,
        net_points=net_points(points, waste),
        total_clocked_in_time=total_clocked_in_time,
    )


def format_elapsed(seconds: int | float) -> str:
    """Format a duration as ``HH:MM:SS``."""
    if seconds < 0:
        return "00:00:00"
    seconds = int(seconds)
    hours, remainder = divmod(seconds, SECONDS_PER_HOUR)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
