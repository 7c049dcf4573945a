"""Task deadline sources: fixed defaults, random generation and JSON files."""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path

from deadline_slots.schema import validate_deadlines

logger = logging.getLogger(__name__)

# Ten tasks, 0-indexed deadlines, already in decreasing penalty order.
DEFAULT_DEADLINES: tuple[int, ...] = (0, 6, 1, 9, 2, 5, 3, 3, 6, 0)


def parse_task_count(text: str) -> int | None:
    """Parse a task count. Returns None unless text is a positive integer."""
    try:
        count = int(text.strip())
    except (ValueError, TypeError, AttributeError):
        return None
    if count < 1:
        return None
    return count


def random_deadlines(size: int, seed: int | None = None) -> list[int]:
    """`size` deadlines drawn uniformly from [0, size).

    Raises ValueError if size < 1.
    """
    if size < 1:
        raise ValueError(f"size must be at least 1, got {size}")
    rng = random.Random(seed)
    return [rng.randrange(size) for _ in range(size)]


def deadlines_for_count(text: str, seed: int | None = None) -> list[int]:
    """Random deadlines for a valid task count, else the default ten tasks."""
    count = parse_task_count(text)
    if count is None:
        logger.warning(
            "invalid task count %r, using the %d default tasks",
            text, len(DEFAULT_DEADLINES),
        )
        return list(DEFAULT_DEADLINES)
    return random_deadlines(count, seed)


def load_deadlines_json(path: str | Path) -> list[int]:
    """Load 0-indexed deadlines from a JSON task file.

    The JSON file must have the format:
    {
        "id": "...",
        "deadlines": [1, 7, 2, ...],
        "one_indexed": true
    }

    "one_indexed" defaults to false. 1-indexed deadlines are shifted down
    by one before validation.

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: expected a JSON object")

    raw = data.get("deadlines")
    if not isinstance(raw, list):
        raise ValueError(f"{path.name}: 'deadlines' must be a list")

    if data.get("one_indexed", False):
        deadlines = [
            d - 1 if isinstance(d, int) and not isinstance(d, bool) else d
            for d in raw
        ]
    else:
        deadlines = list(raw)

    errors = validate_deadlines(deadlines)
    if errors:
        raise ValueError(
            f"Validation errors in {path.name}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    logger.debug(
        "loaded %d deadlines from %s (id=%s)",
        len(deadlines), path, data.get("id", path.stem),
    )
    return deadlines
