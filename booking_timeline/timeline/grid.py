"""
Slot grid construction and tagging.

Every grid position becomes a ``Slot``; bookings tag the slots they cover,
clamped to the grid. Overbooking is allowed here: several bookings may
tag the same slot and detection is left to the consumer.
"""

from typing import Optional, Sequence

from booking_timeline.config import GridConfig
from booking_timeline.logging_context import get_request_logger
from booking_timeline.schemas.booking_schema import Booking
from booking_timeline.schemas.timeline_schema import Slot, SlotStatus, TimelineBlock
from booking_timeline.timeline.slots import booking_span, slot_index_to_time

logger = get_request_logger(__name__)


def filter_by_date(bookings: Sequence[Booking], date: Optional[str]) -> list[Booking]:
    """Keep bookings on ``date``, in input order. A falsy date keeps everything."""
    if not date:
        return list(bookings)
    return [b for b in bookings if b.date == date]


def build_grid(bookings: Sequence[Booking], grid: GridConfig) -> list[Slot]:
    """Build the tagged slot sequence for one day's bookings."""
    refs: list[list[Booking]] = [[] for _ in range(grid.slot_count)]

    for booking in bookings:
        span = booking_span(booking, grid)
        if span is None:
            logger.debug("Booking %s at %r not placed on grid", booking.id, booking.time)
            continue
        start_index, end_index = span
        for i in range(start_index, min(end_index, grid.slot_count)):
            refs[i].append(booking)

    return [
        Slot(
            index=i,
            start_time=slot_index_to_time(i, grid),
            end_time=slot_index_to_time(i + 1, grid),
            status=SlotStatus.BOOKED if slot_refs else SlotStatus.AVAILABLE,
            booking_refs=slot_refs,
        )
        for i, slot_refs in enumerate(refs)
    ]


def _same_single_booking(a: Sequence[Booking], b: Sequence[Booking]) -> bool:
    return len(a) == 1 and len(b) == 1 and a[0].id == b[0].id


def merge_adjacent_slots(slots: Sequence[Slot]) -> list[TimelineBlock]:
    """
    Collapse consecutive slots into display blocks.

    Two neighbours merge when both are available, or when both are booked
    by exactly one booking and it is the same one. Shared or overbooked
    slots always start a new block.
    """
    blocks: list[dict] = []
    for slot in slots:
        last = blocks[-1] if blocks else None
        if last is not None and last["status"] == slot.status and (
            slot.status == SlotStatus.AVAILABLE
            or _same_single_booking(last["booking_refs"], slot.booking_refs)
        ):
            last["end_index"] = slot.index + 1
            last["end_time"] = slot.end_time
            continue
        blocks.append(
            {
                "start_index": slot.index,
                "end_index": slot.index + 1,
                "start_time": slot.start_time,
                "end_time": slot.end_time,
                "status": slot.status,
                "booking_refs": list(slot.booking_refs),
            }
        )
    return [TimelineBlock(**block) for block in blocks]
