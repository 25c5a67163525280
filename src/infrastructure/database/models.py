"""SQLAlchemy ORM models."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class SpaceModel(Base):
    """Space aggregate model."""

    __tablename__ = "spaces"
    __table_args__ = (
        CheckConstraint("total_clocked_in_time >= 0", name="ck_spaces_total_clocked_in_time"),
        CheckConstraint(
            "(is_clocked_in AND clock_in_start_time IS NOT NULL)"
            " OR (NOT is_clocked_in AND clock_in_start_time IS NULL)",
            name="ck_spaces_clock_markers",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    goal: Mapped[str | None] = mapped_column(Text)
    before_image: Mapped[str | None] = mapped_column(String(2048))
    after_image: Mapped[str | None] = mapped_column(String(2048))
    date_created: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    date_modified: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        index=True,
    )
    total_clocked_in_time: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_clocked_in: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    clock_in_start_time: Mapped[datetime | None] = mapped_column(DateTime)


class LogEntryModel(Base):
    """Append-only ledger entry model."""

    __tablename__ = "log_entries"
    __table_args__ = (
        CheckConstraint(
            "type IN ('action', 'multiStepAction', 'clockIn', 'clockOut')",
            name="ck_log_entries_type",
        ),
        # Newest-first history per space
        Index("ix_log_entries_space_timestamp", "space_id", "timestamp"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    space_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("spaces.id", ondelete="CASCADE"),
        nullable=False,
    )
    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    action_name: Mapped[str] = mapped_column(String(300), nullable=False)
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    multi_step_action_id: Mapped[UUID | None] = mapped_column(Uuid)
    step_index: Mapped[int | None] = mapped_column(Integer)
    clock_in_time: Mapped[datetime | None] = mapped_column(DateTime)
    clock_out_time: Mapped[datetime | None] = mapped_column(DateTime)
    minutes_clocked_in: Mapped[int | None] = mapped_column(Integer)


class ActionModel(Base):
    """Simple action model."""

    __tablename__ = "actions"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    space_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("spaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    points: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)


class MultiStepActionModel(Base):
    """Multi-step action model. Steps are stored inline as JSON."""

    __tablename__ = "multi_step_actions"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    space_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("spaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    points_per_step: Mapped[int] = mapped_column(Integer, nullable=False)
    steps: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    current_step_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)


class WasteEntryModel(Base):
    """Logged waste model."""

    __tablename__ = "waste_entries"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    space_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("spaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    points: Mapped[int] = mapped_column(Integer, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)


class TodoItemModel(Base):
    """To-do item model."""

    __tablename__ = "todo_items"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    space_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("spaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    before_image: Mapped[str | None] = mapped_column(String(2048))
    after_image: Mapped[str | None] = mapped_column(String(2048))
    date_created: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)


class CommentModel(Base):
    """Space comment model."""

    __tablename__ = "comments"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    space_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("spaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_url: Mapped[str | None] = mapped_column(String(2048))
    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
