"""
Full timeline pipeline for one day.

    bookings -> grid -> lanes -> availability -> heights

Every call recomputes everything from its arguments; nothing is cached or
carried between calls, so identical input always yields identical output.

Usage:
    layout = build_layout(bookings, GridConfig(), date="2026-10-18")
    for r in layout.available_ranges:
        print(r.start_time, r.end_time)
"""

from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from booking_timeline.config import GridConfig, settings
from booking_timeline.logging_context import get_request_logger
from booking_timeline.schemas.booking_schema import Booking
from booking_timeline.schemas.timeline_schema import TimelineLayout
from booking_timeline.timeline.availability import compute_available_ranges
from booking_timeline.timeline.display import compute_slot_heights
from booking_timeline.timeline.grid import build_grid, filter_by_date, merge_adjacent_slots
from booking_timeline.timeline.lanes import assign_lanes, sort_by_start as sort_bookings

logger = get_request_logger(__name__)

BookingInput = Union[Booking, Mapping[str, Any]]


def coerce_bookings(records: Sequence[BookingInput]) -> tuple[list[Booking], int]:
    """Validate raw records into ``Booking`` models.

    Returns the bookings plus the number of records that could not be read
    at all (for example a missing id). Those are logged and skipped.
    """
    bookings: list[Booking] = []
    skipped = 0
    for position, record in enumerate(records):
        if isinstance(record, Booking):
            bookings.append(record)
            continue
        try:
            bookings.append(Booking.model_validate(record))
        except ValidationError as e:
            skipped += 1
            logger.warning(
                "Skipping unreadable booking record #%d: %s", position, e.errors()[0]["msg"]
            )
    return bookings, skipped


def build_layout(
    records: Sequence[BookingInput],
    grid: Optional[GridConfig] = None,
    *,
    date: Optional[str] = None,
    sort_by_start: bool = False,
) -> TimelineLayout:
    """Compute slots, lanes, availability and row heights for one day."""
    grid = grid or settings.grid
    bookings, skipped = coerce_bookings(records)
    bookings = filter_by_date(bookings, date)
    if sort_by_start:
        bookings = sort_bookings(bookings, grid)

    slots = build_grid(bookings, grid)
    assignment = assign_lanes(bookings, grid)
    ranges = compute_available_ranges(assignment.laned_bookings, grid)

    logger.info(
        "Layout for %s: %d booking(s) in %d lane(s), %d free range(s), %d unplaced",
        date or "all dates",
        len(assignment.laned_bookings),
        assignment.lane_count,
        len(ranges),
        len(assignment.unplaced),
    )

    return TimelineLayout(
        date=date,
        start_hour=grid.start_hour,
        end_hour=grid.end_hour,
        slot_interval_minutes=grid.slot_interval_minutes,
        slot_count=grid.slot_count,
        slots=slots,
        blocks=merge_adjacent_slots(slots),
        laned_bookings=assignment.laned_bookings,
        lane_count=assignment.lane_count,
        available_ranges=ranges,
        slot_heights=compute_slot_heights(slots, assignment.laned_bookings),
        unplaced=assignment.unplaced,
        skipped_records=skipped,
    )
