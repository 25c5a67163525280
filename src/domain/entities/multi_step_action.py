"""Multi-step action domain entities."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class ActionStep:
    """A single step of a multi-step action."""

    name: str
    id: UUID = field(default_factory=uuid4)
    completed: bool = False


@dataclass
class MultiStepAction:
    """An ordered checklist whose steps each award ``points_per_step``.

    ``current_step_index`` points at the next incomplete step and equals
    ``len(steps)`` once everything is done.
    """

    space_id: UUID
    name: str
    points_per_step: int
    steps: list[ActionStep] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    description: str | None = None
    current_step_index: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.current_step_index <= len(self.steps):
            raise ValueError(
                f"current_step_index {self.current_step_index} out of range "
                f"for {len(self.steps)} steps"
            )

    @property
    def is_complete(self) -> bool:
        return self.current_step_index >= len(self.steps)

    @property
    def current_step(self) -> ActionStep | None:
        if self.is_complete:
            return None
        return self.steps[self.current_step_index]

    def advance(self) -> tuple[int, ActionStep]:
        """Complete the current step and move to the next one.

        Returns the index and the step that was completed.
        """
        step = self.current_step
        if step is None:
            raise ValueError("All steps are already completed")
        index = self.current_step_index
        step.completed = True
        self.current_step_index = index + 1
        return index, step

    def catch_up(self, next_index: int) -> bool:
        """Move forward to ``next_index``, completing every step before it.

        Never moves backwards. Returns True if the progress changed.
        """
        target = min(next_index, len(self.steps))
        if target <= self.current_step_index:
            return False
        for step in self.steps[:target]:
            step.completed = True
        self.current_step_index = target
        return True
