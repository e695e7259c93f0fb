"""Plain-text rendering of a timeline layout for terminals and log files."""

from booking_timeline.schemas.timeline_schema import SlotHeight, SlotStatus, TimelineLayout


def _lane_cells(layout: TimelineLayout, index: int) -> list[str]:
    cells = ["."] * layout.lane_count
    for booking in layout.laned_bookings:
        if booking.start_index <= index < booking.end_index:
            cells[booking.lane] = "#" if booking.start_index == index else "|"
    return cells


def format_layout(layout: TimelineLayout) -> str:
    """Format a layout into a human-readable day view."""
    title = f"TIMELINE {layout.date}" if layout.date else "TIMELINE"
    lines = [
        title,
        f"  {layout.start_hour:02d}:00-{layout.end_hour:02d}:00, "
        f"{layout.slot_interval_minutes}-minute slots, {layout.lane_count} lane(s)",
        "",
    ]

    for slot, height in zip(layout.slots, layout.slot_heights):
        lanes = " ".join(_lane_cells(layout, slot.index))
        starting = [
            b for b in layout.laned_bookings if b.start_index == slot.index
        ]
        names = ", ".join(
            f"{b.customer_name or b.id} ({b.service_name or 'service'})" for b in starting
        )
        marker = "+" if height == SlotHeight.EXPANDED else " "
        status = "BOOKED" if slot.status == SlotStatus.BOOKED else "free"
        line = f" {marker}{slot.start_time}-{slot.end_time}  {status:<6}  {lanes}"
        if names:
            line += f"  {names}"
        lines.append(line.rstrip())

    lines.append("")
    lines.append("AVAILABLE:")
    if layout.available_ranges:
        for r in layout.available_ranges:
            lines.append(f"  {r.start_time}-{r.end_time} ({r.slot_length} slot(s))")
    else:
        lines.append("  none")

    overrunning = [b for b in layout.laned_bookings if b.end_index > layout.slot_count]
    if overrunning:
        lines.append("")
        lines.append("RUNS PAST CLOSING:")
        for b in overrunning:
            lines.append(f"  {b.id} at {b.time} ends after slot {layout.slot_count - 1}")

    if layout.unplaced:
        lines.append("")
        lines.append("UNPLACED:")
        for u in layout.unplaced:
            lines.append(f"  {u.booking.id} at {u.booking.time!r}: {u.reason.value}")

    if layout.skipped_records:
        lines.append("")
        lines.append(f"SKIPPED: {layout.skipped_records} unreadable record(s)")

    return "\n".join(lines)
