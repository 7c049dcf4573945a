"""Input validation for task deadlines."""

from __future__ import annotations

from collections.abc import Sequence


def check_deadline(task: int, deadline: object, size: int) -> str | None:
    """Error message for one deadline, or None if it names a slot in [0, size)."""
    if isinstance(deadline, bool) or not isinstance(deadline, int):
        return f"Task {task}: deadline must be an integer, got {deadline!r}"
    if not 0 <= deadline < size:
        return f"Task {task}: deadline {deadline} out of range [0, {size})"
    return None


def validate_deadlines(
    deadlines: Sequence[object],
    size: int | None = None,
) -> list[str]:
    """Validate 0-indexed deadlines. Returns list of error messages (empty = valid).

    Checks:
    - At least one task
    - Every deadline is an int (bool is rejected)
    - Every deadline names a slot in [0, size); size defaults to the task count
    """
    if len(deadlines) == 0:
        return ["No tasks: at least one deadline is required"]

    if size is None:
        size = len(deadlines)

    errors: list[str] = []
    for task, deadline in enumerate(deadlines):
        error = check_deadline(task, deadline, size)
        if error is not None:
            errors.append(error)

    return errors
