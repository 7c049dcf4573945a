"""Shared test fixtures and data loading for deadline-slots.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Deadlines and slots are 0-indexed throughout, as in the library.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"
TASKS_DIR = FIXTURES_DIR / "tasks"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


def task_file(name: str) -> Path:
    """Path of a task file in data/fixtures/tasks/."""
    return TASKS_DIR / f"{name}.json"


# ---------------------------------------------------------------------------
# Reference model
# ---------------------------------------------------------------------------
def naive_schedule(deadlines: list[int]) -> list[int]:
    """Quadratic reference: latest free slot <= deadline, else latest free slot.

    Independent of the forest; used to cross-check it.
    """
    free = set(range(len(deadlines)))
    slots: list[int] = []
    for deadline in deadlines:
        candidates = [s for s in free if s <= deadline]
        slot = max(candidates) if candidates else max(free)
        free.remove(slot)
        slots.append(slot)
    return slots


# ---------------------------------------------------------------------------
# Forest factory
# ---------------------------------------------------------------------------
def make_forest(size: int, unites: list[list[int]] | None = None):
    """Build a SlotForest and apply the given unite pairs in order."""
    from deadline_slots.forest import SlotForest

    forest = SlotForest.from_size(size)
    for i, j in unites or []:
        forest.unite(i, j)
    return forest


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def default_deadlines() -> list[int]:
    from deadline_slots.tasks import DEFAULT_DEADLINES

    return list(DEFAULT_DEADLINES)


@pytest.fixture
def small_forest():
    """Five fresh singleton sets."""
    return make_forest(5)
