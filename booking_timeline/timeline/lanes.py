"""
Lane packing for concurrent bookings (greedy interval-graph colouring).

Bookings are placed in input order into the lowest-indexed lane that has
no overlapping booking. Input order decides the packing: first-fit in an
arbitrary order can open more lanes than strictly necessary. Callers that
want the minimum lane count should pass the bookings through
``sort_by_start`` first.
"""

from typing import Any, Sequence

from pydantic.alias_generators import to_camel

from booking_timeline.config import GridConfig
from booking_timeline.logging_context import get_request_logger
from booking_timeline.schemas.booking_schema import Booking
from booking_timeline.schemas.timeline_schema import (
    LaneAssignment,
    LanedBooking,
    UnplacedBooking,
)
from booking_timeline.timeline.slots import (
    INVALID_SLOT,
    booking_span,
    rejection_reason,
    time_to_slot_index,
)

logger = get_request_logger(__name__)

# Computed by assign_lanes; an incoming payload must not override them
_PLACEMENT_FIELDS = ("start_index", "end_index", "lane", "slots_span")
_PLACEMENT_KEYS = frozenset(_PLACEMENT_FIELDS) | {to_camel(f) for f in _PLACEMENT_FIELDS}


def _payload(booking: Booking) -> dict[str, Any]:
    """Booking fields without any placement keys carried in its payload."""
    return {k: v for k, v in booking.model_dump().items() if k not in _PLACEMENT_KEYS}


def overlaps(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    """Half-open interval overlap; touching ranges do not overlap."""
    return not (end_a <= start_b or start_a >= end_b)


def sort_by_start(bookings: Sequence[Booking], grid: GridConfig) -> list[Booking]:
    """Stable sort by start slot. Unplaceable bookings keep their order at the end."""

    def key(booking: Booking) -> tuple[bool, int]:
        index = time_to_slot_index(booking.time, grid)
        return index == INVALID_SLOT, index

    return sorted(bookings, key=key)


def assign_lanes(bookings: Sequence[Booking], grid: GridConfig) -> LaneAssignment:
    """Pack bookings into non-overlapping lanes, first-fit in input order."""
    lanes: list[list[tuple[int, int]]] = []
    laned: list[LanedBooking] = []
    unplaced: list[UnplacedBooking] = []

    for booking in bookings:
        span = booking_span(booking, grid)
        if span is None:
            reason = rejection_reason(booking.time, grid)
            logger.warning(
                "Booking %s excluded from timeline: %s (time=%r)",
                booking.id,
                reason.value,
                booking.time,
            )
            unplaced.append(UnplacedBooking(booking=booking, reason=reason))
            continue

        start_index, end_index = span
        lane = next(
            (
                i
                for i, occupied in enumerate(lanes)
                if not any(overlaps(start_index, end_index, s, e) for s, e in occupied)
            ),
            len(lanes),
        )
        if lane == len(lanes):
            lanes.append([])
        lanes[lane].append((start_index, end_index))
        logger.debug(
            "Booking %s slots [%d, %d) -> lane %d", booking.id, start_index, end_index, lane
        )

        laned.append(
            LanedBooking.model_validate(
                {
                    **_payload(booking),
                    "start_index": start_index,
                    "end_index": end_index,
                    "lane": lane,
                    "slots_span": end_index - start_index,
                }
            )
        )

    return LaneAssignment(laned_bookings=laned, lane_count=len(lanes), unplaced=unplaced)
