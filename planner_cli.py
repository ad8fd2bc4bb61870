"""
Command-line front end for the weekly planner.
State lives in a JSON key-value file (config.PLANNER_DATA_PATH).
"""
import argparse
import logging
import sys
from typing import List, Optional

import config
from models import TIME_SLOTS, WEEKDAYS, Mood
from planner import DEFAULT_DAY, PlannerController
from planner_storage import JsonFileStorage
from planner_view import TextView
from utils import setup_logging

logger = logging.getLogger(__name__)


def _slot(value: str):
    label, sep, text = value.partition("=")
    if not sep or label not in TIME_SLOTS:
        raise argparse.ArgumentTypeError(
            f"expected LABEL=TEXT with LABEL one of: {', '.join(TIME_SLOTS)}"
        )
    return label, text


def _mood(value: str) -> Optional[str]:
    if value == "none":
        return None
    try:
        return Mood(value).value
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected one of: none, {', '.join(m.value for m in Mood)}"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="planner", description="Weekly daily-planner")
    ap.add_argument("--data", default=config.PLANNER_DATA_PATH, help="Planner storage file")
    ap.add_argument("--day", default=DEFAULT_DAY, choices=WEEKDAYS, help="Weekday to work on")

    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("show", help="Print the day")

    p_set = sub.add_parser("set", help="Edit free-text fields")
    p_set.add_argument("--month-year")
    p_set.add_argument("--priorities")
    p_set.add_argument("--notes")
    p_set.add_argument("--slot", type=_slot, action="append", default=[], metavar="LABEL=TEXT")

    p_water = sub.add_parser("water", help="Click a water glass (0-7)")
    p_water.add_argument("index", type=int)

    p_mood = sub.add_parser("mood", help="Select a mood")
    p_mood.add_argument("mood", type=_mood)

    p_todo = sub.add_parser("todo", help="Manage the to-do list")
    todo_sub = p_todo.add_subparsers(dest="action", required=True)
    todo_sub.add_parser("add").add_argument("text")
    todo_sub.add_parser("toggle").add_argument("index", type=int)
    todo_sub.add_parser("delete").add_argument("index", type=int)

    return ap


def run(args: argparse.Namespace, view: TextView) -> None:
    controller = PlannerController(JsonFileStorage(args.data), view)
    controller.start()
    controller.switch_day(args.day)

    if args.command == "set":
        controller.on_input(
            month_year=args.month_year,
            schedule=dict(args.slot),
            priorities=args.priorities,
            notes=args.notes,
        )
    elif args.command == "water":
        controller.click_glass(args.index)
    elif args.command == "mood":
        controller.select_mood(args.mood)
    elif args.command == "todo":
        if args.action == "add":
            if not controller.add_todo(args.text):
                logger.warning("Ignoring empty to-do")
        elif args.action == "toggle":
            controller.toggle_todo(args.index)
        else:
            controller.delete_todo(args.index)

    view.render()


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_logging(config.LOG_LEVEL)
    try:
        run(args, TextView(sys.stdout))
    except (ValueError, IndexError) as exc:
        ap.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
