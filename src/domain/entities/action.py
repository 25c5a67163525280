"""Action domain entity."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class Action:
    """A named, fixed-point scoring event that can be recorded repeatedly."""

    space_id: UUID
    name: str
    points: int
    id: UUID = field(default_factory=uuid4)
    description: str | None = None
