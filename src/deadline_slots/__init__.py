"""deadline-slots: Unit-time task scheduling with deadlines on a disjoint-set forest."""

from deadline_slots.forest import Slot, SlotForest
from deadline_slots.scheduler import (
    ScheduleStep,
    assign,
    consume,
    count_on_time,
    iter_schedule,
    predecessor,
    schedule,
)
from deadline_slots.tasks import DEFAULT_DEADLINES
from deadline_slots.types import Assignment, InvalidDeadlineError

__all__ = [
    "Assignment",
    "DEFAULT_DEADLINES",
    "InvalidDeadlineError",
    "ScheduleStep",
    "Slot",
    "SlotForest",
    "assign",
    "consume",
    "count_on_time",
    "iter_schedule",
    "predecessor",
    "schedule",
]
