from booking_timeline.timeline.availability import compute_available_ranges
from booking_timeline.timeline.display import compute_display_height, compute_slot_heights
from booking_timeline.timeline.grid import build_grid, filter_by_date, merge_adjacent_slots
from booking_timeline.timeline.lanes import assign_lanes, overlaps, sort_by_start
from booking_timeline.timeline.layout import build_layout
from booking_timeline.timeline.report import format_layout
from booking_timeline.timeline.slots import (
    INVALID_SLOT,
    slot_index_to_time,
    time_to_slot_index,
)

__all__ = [
    "INVALID_SLOT",
    "time_to_slot_index",
    "slot_index_to_time",
    "build_grid",
    "filter_by_date",
    "merge_adjacent_slots",
    "assign_lanes",
    "overlaps",
    "sort_by_start",
    "compute_available_ranges",
    "compute_display_height",
    "compute_slot_heights",
    "build_layout",
    "format_layout",
]
