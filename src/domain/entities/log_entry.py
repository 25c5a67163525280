"""Log entry domain entity for the append-only scoring ledger."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4


class LogEntryType(StrEnum):
    """Kinds of ledger entries."""

    ACTION = "action"
    MULTI_STEP_ACTION = "multiStepAction"
    CLOCK_IN = "clockIn"
    CLOCK_OUT = "clockOut"


SCORING_TYPES = frozenset({LogEntryType.ACTION, LogEntryType.MULTI_STEP_ACTION})

CLOCK_IN_LABEL = "Clock In"
CLOCK_OUT_LABEL = "Clock Out"


@dataclass(frozen=True)
class LogEntry:
    """Immutable ledger entry.

    ``multi_step_action_id``/``step_index`` are set for multi-step progress,
    ``clock_in_time``/``clock_out_time``/``minutes_clocked_in`` for clock-outs.
    """

    space_id: UUID
    action_name: str
    type: LogEntryType
    points: int = 0
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=datetime.utcnow)
    multi_step_action_id: UUID | None = None
    step_index: int | None = None
    clock_in_time: datetime | None = None
    clock_out_time: datetime | None = None
    minutes_clocked_in: int | None = None

    def __post_init__(self) -> None:
        if self.minutes_clocked_in is not None and self.minutes_clocked_in < 0:
            object.__setattr__(self, "minutes_clocked_in", 0)

    @property
    def is_scoring(self) -> bool:
        """Whether this entry contributes to action points."""
        return self.type in SCORING_TYPES
