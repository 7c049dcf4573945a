"""Plain-text reports of a scheduling pass.

Everything here is 1-indexed for the reader: task 1 is the first task and
time slot 1 is the interval [0, 1). Functions return strings and never print.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from deadline_slots.scheduler import ScheduleStep, count_on_time
from deadline_slots.types import Assignment

_SLOT_LABEL = "time slot         |"
_RULE_LABEL = "------------------|"
_REPR_LABEL = "repre. of its set |"


def field_width(size: int) -> int:
    """Digits needed to print `size`."""
    return len(str(max(size, 1)))


def _heading(title: str) -> list[str]:
    return [title, "-" * len(title)]


def describe_tasks(deadlines: Sequence[int]) -> str:
    """One line per task: its 1-indexed deadline."""
    width = field_width(len(deadlines))
    lines = _heading("Description of task(s)")
    for task, deadline in enumerate(deadlines):
        lines.append(
            f"task {task + 1:>{width}} has deadline at time {deadline + 1:>{width}}"
        )
    return "\n".join(lines)


def describe_assignment(assignment: Assignment, width: int) -> str:
    """'task N is scheduled in time slot M', 1-indexed."""
    return (
        f"task {assignment.task + 1:>{width}} "
        f"is scheduled in time slot {assignment.slot + 1:>{width}}"
    )


def show_sets(representatives: Sequence[int]) -> str:
    """Three-row table of each slot and the free slot of its set.

    Slots sharing a value in the bottom row belong to the same set.
    """
    width = field_width(len(representatives))
    header = " ".join(f"{i + 1:>{width}}" for i in range(len(representatives)))
    values = " ".join(f"{r + 1:>{width}}" for r in representatives)
    return "\n".join([
        _SLOT_LABEL + header,
        _RULE_LABEL + "-" * len(header),
        _REPR_LABEL + values,
    ])


def render_schedule(
    steps: Iterable[ScheduleStep],
    deadlines: Sequence[int],
    with_sets: bool = True,
) -> str:
    """Full report: task descriptions, each assignment, and a summary.

    With with_sets, the set-membership table follows every assignment.
    """
    width = field_width(len(deadlines))
    lines = [describe_tasks(deadlines), ""]
    lines.extend(_heading("Scheduling of task(s)"))

    assignments: list[Assignment] = []
    for step in steps:
        assignments.append(step.assignment)
        lines.append(describe_assignment(step.assignment, width))
        if with_sets:
            lines.append(show_sets(step.representatives))

    lines.append("")
    lines.append(
        f"{count_on_time(assignments)} of {len(assignments)} task(s) on time"
    )
    return "\n".join(lines)
