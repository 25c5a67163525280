"""Space domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Space:
    """Domain entity for a Space, the aggregate root of a tracked effort.

    ``is_clocked_in`` and ``clock_in_start_time`` always move together:
    a start time is present exactly when a session is active.
    """

    name: str
    id: UUID = field(default_factory=uuid4)
    description: str | None = None
    goal: str | None = None
    before_image: str | None = None
    after_image: str | None = None
    date_created: datetime = field(default_factory=datetime.utcnow)
    date_modified: datetime = field(default_factory=datetime.utcnow)
    total_clocked_in_time: int = 0
    is_clocked_in: bool = False
    clock_in_start_time: datetime | None = None

    def __post_init__(self) -> None:
        """Normalise persisted clock markers and timestamps."""
        if self.date_modified < self.date_created:
            self.date_modified = self.date_created
        if self.total_clocked_in_time < 0:
            self.total_clocked_in_time = 0
        # A start time without the flag (or the reverse) is a half-written
        # session; treat it as clocked out.
        if self.is_clocked_in != (self.clock_in_start_time is not None):
            self.is_clocked_in = False
            self.clock_in_start_time = None
