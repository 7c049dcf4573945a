"""Command-line entry point.

To run:
    deadline-slots --tasks 12 --seed 7
    python -m deadline_slots --file tasks.json --no-sets

Without --tasks or --file the task count is read from a prompt. An invalid
count falls back to the ten default tasks.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from deadline_slots.display import render_schedule
from deadline_slots.scheduler import iter_schedule
from deadline_slots.tasks import deadlines_for_count, load_deadlines_json

PROMPT = "Enter the number of task(s): "
LOG_LEVEL_ENV = "DEADLINE_SLOTS_LOG_LEVEL"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deadline-slots",
        description=(
            "Schedule unit-time tasks with deadlines, each into the latest "
            "free slot at or before its deadline."
        ),
    )
    parser.add_argument(
        "--tasks",
        metavar="COUNT",
        help="number of tasks with random deadlines (prompted when omitted)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="random seed for generated deadlines",
    )
    parser.add_argument(
        "--file", metavar="PATH", default=None,
        help="JSON task file with a 'deadlines' list; overrides --tasks",
    )
    parser.add_argument(
        "--no-sets", action="store_true",
        help="omit the set-membership table after each assignment",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


def _read_count() -> str:
    try:
        return input(PROMPT)
    except EOFError:
        return ""


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.file is not None:
        try:
            deadlines = load_deadlines_json(args.file)
        except (OSError, ValueError) as e:
            logger.error("cannot load task file %s", args.file)
            print(f"deadline-slots: {e}", file=sys.stderr)
            return 2
    else:
        text = args.tasks if args.tasks is not None else _read_count()
        deadlines = deadlines_for_count(text, args.seed)

    logger.info("scheduling %d task(s)", len(deadlines))
    report = render_schedule(
        iter_schedule(deadlines), deadlines, with_sets=not args.no_sets
    )
    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
