"""Comment domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Comment:
    """A note attached to a Space, with optional image reference."""

    space_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    image_url: str | None = None
    timestamp: datetime = field(default_factory=datetime.utcnow)
