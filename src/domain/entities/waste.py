"""Waste entry domain entity and TIMWOODS categories."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class WasteCategory:
    """A lean waste category with its fixed point weight."""

    id: str
    name: str
    description: str
    points: int


TIMWOODS_CATEGORIES: tuple[WasteCategory, ...] = (
    WasteCategory(
        "transportation", "Transportation", "Unnecessary movement of materials or products.", 1
    ),
    WasteCategory(
        "inventory", "Inventory", "Excess raw materials, work in progress, or finished goods.", 2
    ),
    WasteCategory("motion", "Motion", "Unnecessary movement of people.", 3),
    WasteCategory("waiting", "Waiting", "Idle time waiting for the next step in a process.", 4),
    WasteCategory("overprocessing", "Overprocessing", "Performing more work than is necessary.", 5),
    WasteCategory("overproduction", "Overproduction", "Producing more than is needed.", 6),
    WasteCategory("defects", "Defects", "Rework or scrap due to errors or defects.", 7),
    WasteCategory("skills", "Skills", "Underutilizing people's talents and skills.", 8),
)

CATEGORIES_BY_ID: dict[str, WasteCategory] = {c.id: c for c in TIMWOODS_CATEGORIES}


@dataclass
class WasteEntry:
    """A logged instance of a non-value-adding activity."""

    space_id: UUID
    type: str
    points: int
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        if self.points < 0:
            self.points = 0
