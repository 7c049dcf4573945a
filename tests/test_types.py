"""Tests for Assignment and InvalidDeadlineError."""

from __future__ import annotations

import dataclasses

import pytest


class TestAssignment:
    """Assignment is an immutable (task, deadline, slot) record."""

    @pytest.mark.parametrize(
        "deadline,slot,expected",
        [(5, 3, True), (5, 5, True), (0, 9, False), (3, 4, False)],
    )
    def test_on_time(self, deadline, slot, expected):
        from deadline_slots.types import Assignment

        assert Assignment(task=0, deadline=deadline, slot=slot).on_time is expected

    def test_frozen_dataclass(self):
        """Assignment cannot be mutated after creation."""
        from deadline_slots.types import Assignment

        a = Assignment(task=1, deadline=2, slot=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.slot = 0  # type: ignore[misc]

    def test_equality_and_hash(self):
        from deadline_slots.types import Assignment

        a = Assignment(task=1, deadline=2, slot=2)
        b = Assignment(task=1, deadline=2, slot=2)
        assert a == b
        assert len({a, b}) == 1


class TestInvalidDeadlineError:

    def test_attributes(self):
        from deadline_slots.types import InvalidDeadlineError

        err = InvalidDeadlineError(task=3, deadline=12, size=10)
        assert err.task == 3
        assert err.deadline == 12
        assert err.size == 10

    def test_message(self):
        from deadline_slots.types import InvalidDeadlineError

        err = InvalidDeadlineError(task=3, deadline=12, size=10)
        assert "task 3" in str(err)
        assert "12" in str(err)
        assert "[0, 10)" in str(err)

    def test_is_value_error(self):
        from deadline_slots.types import InvalidDeadlineError

        with pytest.raises(ValueError):
            raise InvalidDeadlineError(task=0, deadline=-1, size=1)
