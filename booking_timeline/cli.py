"""
CLI entry point for laying out a day's bookings.

Usage:
    booking-timeline --bookings bookings.json --date 2026-10-18
    python -m booking_timeline.cli --bookings bookings.json --sort-by-start --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from booking_timeline.config import settings
from booking_timeline.logging_context import new_request_id
from booking_timeline.timeline.layout import build_layout
from booking_timeline.timeline.report import format_layout

logger = logging.getLogger(__name__)


def load_bookings_file(path: Path) -> list[dict[str, Any]]:
    """Read a JSON list of bookings, or an object with a ``bookings`` list."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("bookings", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of bookings in {path}")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lay out one day's bookings into slots, lanes and free ranges."
    )
    parser.add_argument(
        "--bookings",
        type=str,
        required=True,
        help="Path to a JSON file with the bookings.",
    )
    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="Only lay out bookings on this YYYY-MM-DD date.",
    )
    parser.add_argument(
        "--sort-by-start",
        action="store_true",
        help="Sort by start time before lane packing (fewest lanes).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the layout as JSON instead of the text view.",
    )
    parser.add_argument(
        "--report",
        type=str,
        default=None,
        help="Path to write the output (default: stdout).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging output.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    bookings_path = Path(args.bookings)
    if not bookings_path.exists():
        logger.error("Bookings file not found: %s", bookings_path)
        return 1

    try:
        records = load_bookings_file(bookings_path)
    except (OSError, ValueError) as e:
        logger.error("Could not read bookings from %s: %s", bookings_path, e)
        return 1

    request_id = new_request_id()
    logger.info("Loaded %d booking record(s) from %s [%s]", len(records), bookings_path, request_id)

    layout = build_layout(
        records, settings.grid, date=args.date, sort_by_start=args.sort_by_start
    )
    output = layout.model_dump_json(indent=2) if args.json else format_layout(layout)

    if args.report:
        report_path = Path(args.report)
        report_path.write_text(output, encoding="utf-8")
        logger.info("Layout written to %s", report_path)
    else:
        sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
