"""Free-time ranges: run-length encoding of the unoccupied slots."""

from typing import Optional, Sequence

from booking_timeline.config import GridConfig
from booking_timeline.schemas.timeline_schema import AvailabilityRange, LanedBooking
from booking_timeline.timeline.slots import slot_index_to_time


def occupancy(laned_bookings: Sequence[LanedBooking], grid: GridConfig) -> list[bool]:
    """Per-slot occupied flags, clamped to the grid."""
    occupied = [False] * grid.slot_count
    for booking in laned_bookings:
        for i in range(max(booking.start_index, 0), min(booking.end_index, grid.slot_count)):
            occupied[i] = True
    return occupied


def _make_range(start: int, end: int, grid: GridConfig) -> AvailabilityRange:
    return AvailabilityRange(
        start_index=start,
        end_index=end,
        start_time=slot_index_to_time(start, grid),
        end_time=slot_index_to_time(end, grid),
    )


def compute_available_ranges(
    laned_bookings: Sequence[LanedBooking], grid: GridConfig
) -> list[AvailabilityRange]:
    """Maximal contiguous runs of unoccupied slots, in ascending order."""
    ranges: list[AvailabilityRange] = []
    range_start: Optional[int] = None

    for i, occupied in enumerate(occupancy(laned_bookings, grid)):
        if not occupied:
            if range_start is None:
                range_start = i
        elif range_start is not None:
            ranges.append(_make_range(range_start, i, grid))
            range_start = None

    if range_start is not None:
        ranges.append(_make_range(range_start, grid.slot_count, grid))
    return ranges
