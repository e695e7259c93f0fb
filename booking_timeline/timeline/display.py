"""Row height signal for slots, derived from the lane packing."""

from typing import Sequence

from booking_timeline.schemas.timeline_schema import LanedBooking, Slot, SlotHeight


def compute_display_height(
    slot: Slot, laned_bookings_starting_here: Sequence[LanedBooking]
) -> SlotHeight:
    """
    Expanded only when bookings start at this slot and all of them are
    single-slot bookings. Any multi-slot co-starter keeps the standard height.
    """
    starting = [b for b in laned_bookings_starting_here if b.start_index == slot.index]
    if starting and all(b.slots_span == 1 for b in starting):
        return SlotHeight.EXPANDED
    return SlotHeight.STANDARD


def compute_slot_heights(
    slots: Sequence[Slot], laned_bookings: Sequence[LanedBooking]
) -> list[SlotHeight]:
    by_start: dict[int, list[LanedBooking]] = {}
    for booking in laned_bookings:
        by_start.setdefault(booking.start_index, []).append(booking)
    return [compute_display_height(slot, by_start.get(slot.index, [])) for slot in slots]
