"""To-do item domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class TodoItem:
    """Domain entity for a to-do item within a Space."""

    space_id: UUID
    description: str
    id: UUID = field(default_factory=uuid4)
    completed: bool = False
    before_image: str | None = None
    after_image: str | None = None
    date_created: datetime = field(default_factory=datetime.utcnow)
