"""Command-line interface for previewing daily media selections."""

from __future__ import annotations

import argparse
import sys
from datetime import date

from .config import MediaConfig
from .planner import DailyMediaPlanner
from .types import MediaSelection
from .utils.calendar import parse_date
from .utils.files import dumps, write_json
from .utils.images import natural_size


def _date_arg(text: str) -> date:
    try:
        return parse_date(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _size_arg(text: str) -> tuple[int, int]:
    """Parse ``WIDTHxHEIGHT`` into a positive integer pair."""
    parts = text.lower().split("x")
    try:
        width, height = (int(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got {text!r}") from exc
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Viewport dimensions must be positive, got {text!r}")
    return width, height


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(description="Preview the deterministic photo or video of the day.")
    parser.add_argument("--trace", action="store_true", help="Print every selector step.")
    parser.add_argument("--runs-dir", help="Persist selection logs under this directory.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    today = subparsers.add_parser("today", help="Show the selection for a single date.")
    today.add_argument(
        "--date",
        type=_date_arg,
        default=None,
        help="Calendar date (YYYY-MM-DD); defaults to the local date.",
    )

    calendar = subparsers.add_parser("calendar", help="Show selections for consecutive days.")
    calendar.add_argument("--start", type=_date_arg, required=True, help="First date (YYYY-MM-DD).")
    calendar.add_argument("--days", type=int, default=7, help="Number of days to plan.")

    schedule = subparsers.add_parser("schedule", help="Show the video schedule of a year.")
    schedule.add_argument("year", type=int, help="Calendar year.")
    schedule.add_argument("--output", help="Write the schedule as JSON to this file.")

    animate = subparsers.add_parser("animate", help="Pick the Ken Burns animation for an image.")
    animate.add_argument("--image", required=True, help="Path to the image file.")
    animate.add_argument("--viewport", type=_size_arg, required=True, help="Viewport as WIDTHxHEIGHT.")
    animate.add_argument("--date", type=_date_arg, default=None, help="Calendar date (YYYY-MM-DD).")

    return parser.parse_args(argv)


def _format_selection(selection: MediaSelection) -> str:
    return (
        f"{selection.date.isoformat()} (day {selection.day_of_year:3d}) "
        f"{selection.media_type:<5} #{selection.index:<4d} {selection.src}"
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point used by ``daily-media`` and ``python run.py``."""
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        config = MediaConfig.from_env()
        if args.trace:
            config.trace = True
        if args.runs_dir:
            config.runs_dir = args.runs_dir
        planner = DailyMediaPlanner(config)

        if args.command == "today":
            selection = planner.plan(args.date or date.today())
            print(_format_selection(selection))
            print(f"Favicon: {selection.favicon_src}")
        elif args.command == "calendar":
            for selection in planner.calendar(args.start, args.days):
                print(_format_selection(selection))
        elif args.command == "schedule":
            summary = planner.schedule(args.year)
            if args.output:
                write_json(args.output, summary)
                print(f"Schedule for {args.year} written to {args.output}")
            else:
                print(dumps(summary))
        elif args.command == "animate":
            choice = planner.animate(args.date or date.today(), natural_size(args.image), args.viewport)
            print(choice.animation.css_class)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
