"""Layer 2: unit-time task scheduling with deadlines.

Tasks arrive already sorted by decreasing penalty. Each one takes the latest
free slot at or before its deadline; the consumed slot's set is then folded
into the set of the slot just before it, so the next lookup that lands there
resolves to the next earlier free slot. Consuming slot 0 folds into the set
of the last slot, so a task with no free slot before its deadline gets the
latest free slot overall.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from deadline_slots.forest import SlotForest
from deadline_slots.schema import check_deadline
from deadline_slots.types import Assignment, InvalidDeadlineError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleStep:
    """One assignment plus every slot's resolved free slot right after it."""

    assignment: Assignment
    representatives: tuple[int, ...]


def predecessor(slot: int, size: int) -> int:
    """The slot immediately before `slot`, wrapping 0 to the last slot."""
    return size - 1 if slot == 0 else slot - 1


def assign(forest: SlotForest, deadline: int) -> int:
    """Latest free slot reachable from `deadline`. Does NOT mutate the schedule.

    Path compression inside find may reshape the forest but never changes
    which slot any set resolves to.
    """
    return forest.available_slot(deadline)


def consume(forest: SlotForest, slot: int) -> None:
    """Remove `slot` from availability by merging it into its predecessor's set."""
    forest.unite(slot, predecessor(slot, len(forest)))


def _check_deadlines(deadlines: Sequence[int]) -> None:
    if len(deadlines) == 0:
        raise ValueError("cannot schedule zero tasks")
    size = len(deadlines)
    for task, deadline in enumerate(deadlines):
        if check_deadline(task, deadline, size) is not None:
            raise InvalidDeadlineError(task, deadline, size)


def _run(
    deadlines: Sequence[int],
) -> Iterator[tuple[SlotForest, Assignment]]:
    """Drive one scheduling pass, yielding the forest after each assignment."""
    _check_deadlines(deadlines)
    forest = SlotForest.from_size(len(deadlines))
    last = len(deadlines) - 1

    for task, deadline in enumerate(deadlines):
        slot = assign(forest, deadline)
        logger.debug("task %d (deadline %d) -> slot %d", task, deadline, slot)

        # After the last task every slot is taken; there is nothing to merge.
        if task != last:
            consume(forest, slot)

        yield forest, Assignment(task=task, deadline=deadline, slot=slot)


def iter_schedule(deadlines: Sequence[int]) -> Iterator[ScheduleStep]:
    """Schedule tasks in input order, yielding each step as it is made.

    The whole sequence is checked before the first step.

    Raises:
        ValueError: If there are no tasks.
        InvalidDeadlineError: If a deadline is not an int in [0, len(deadlines)).
    """
    for forest, assignment in _run(deadlines):
        yield ScheduleStep(
            assignment=assignment,
            representatives=forest.representatives(),
        )


def schedule(deadlines: Sequence[int]) -> list[Assignment]:
    """Schedule tasks greedily in input order.

    Args:
        deadlines: 0-indexed deadline of each task, highest penalty first.

    Returns:
        One Assignment per task, in the same order as the input. The slots
        form a permutation of range(len(deadlines)).

    Raises:
        ValueError: If there are no tasks.
        InvalidDeadlineError: If a deadline is not an int in [0, len(deadlines)).
    """
    return [assignment for _, assignment in _run(deadlines)]


def count_on_time(assignments: Sequence[Assignment]) -> int:
    """Number of tasks placed at or before their deadline."""
    return sum(1 for a in assignments if a.on_time)
