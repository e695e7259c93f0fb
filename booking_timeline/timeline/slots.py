"""
Time <-> slot index arithmetic for the business-day grid.

Out-of-hours and malformed times are expected input, not errors: they map
to ``INVALID_SLOT`` and callers exclude the booking.
"""

import math
from typing import Optional

from booking_timeline.config import MINUTES_PER_HOUR, GridConfig
from booking_timeline.schemas.booking_schema import Booking
from booking_timeline.schemas.timeline_schema import RejectionReason
from booking_timeline.utils import format_hhmm, parse_hhmm

INVALID_SLOT = -1


def time_to_slot_index(time: Optional[str], grid: GridConfig) -> int:
    """Map an ``HH:MM`` string to its slot index, or INVALID_SLOT."""
    parsed = parse_hhmm(time)
    if parsed is None:
        return INVALID_SLOT
    hours, minutes = parsed
    offset_minutes = (hours - grid.start_hour) * MINUTES_PER_HOUR + minutes
    index = offset_minutes // grid.slot_interval_minutes
    if 0 <= index < grid.slot_count:
        return index
    return INVALID_SLOT


def slot_index_to_time(index: int, grid: GridConfig) -> str:
    """Start time of slot ``index``. Defined for any integer, including slot_count."""
    return format_hhmm(grid.start_hour * MINUTES_PER_HOUR + index * grid.slot_interval_minutes)


def rejection_reason(time: Optional[str], grid: GridConfig) -> Optional[RejectionReason]:
    """Explain why a time has no slot, or None when it maps onto the grid."""
    if parse_hhmm(time) is None:
        return RejectionReason.INVALID_TIME
    if time_to_slot_index(time, grid) == INVALID_SLOT:
        return RejectionReason.OUTSIDE_BUSINESS_HOURS
    return None


def resolve_duration(booking: Booking, grid: GridConfig) -> int:
    """Booking duration in minutes, falling back to the grid default."""
    if booking.duration_minutes is None or booking.duration_minutes <= 0:
        return grid.default_duration_minutes
    return booking.duration_minutes


def slots_needed(duration_minutes: int, grid: GridConfig) -> int:
    return max(1, math.ceil(duration_minutes / grid.slot_interval_minutes))


def booking_span(booking: Booking, grid: GridConfig) -> Optional[tuple[int, int]]:
    """Unclamped half-open slot range ``(start_index, end_index)`` for a booking."""
    start_index = time_to_slot_index(booking.time, grid)
    if start_index == INVALID_SLOT:
        return None
    return start_index, start_index + slots_needed(resolve_duration(booking, grid), grid)
