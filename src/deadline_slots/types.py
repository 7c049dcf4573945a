"""Shared types: Assignment and InvalidDeadlineError."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Assignment:
    """Immutable record of one task placed in one time slot.

    All indices are 0-based. Slot i is the unit interval [i, i+1).
    """

    task: int
    deadline: int
    slot: int

    @property
    def on_time(self) -> bool:
        """Whether the task runs in a slot no later than its deadline."""
        return self.slot <= self.deadline


class InvalidDeadlineError(ValueError):
    """Raised when a deadline does not name a slot of the schedule."""

    def __init__(self, task: int, deadline: object, size: int) -> None:
        self.task = task
        self.deadline = deadline
        self.size = size
        super().__init__(
            f"Invalid deadline: task {task} has deadline {deadline!r}, "
            f"expected an integer in [0, {size})"
        )
