"""Derived timeline layout models. Recomputed on every layout request."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from booking_timeline.schemas.booking_schema import Booking


class SlotStatus(str, Enum):
    AVAILABLE = "available"
    BOOKED = "booked"


class SlotHeight(str, Enum):
    """Relative row height signal for the rendering layer."""
    STANDARD = "standard"
    EXPANDED = "expanded"


class RejectionReason(str, Enum):
    INVALID_TIME = "invalid_time"
    OUTSIDE_BUSINESS_HOURS = "outside_business_hours"


class Slot(BaseModel):
    """One fixed-width bucket of the business-day grid."""

    model_config = ConfigDict(frozen=True)

    index: int
    start_time: str
    end_time: str
    status: SlotStatus = SlotStatus.AVAILABLE
    booking_refs: list[Booking] = Field(default_factory=list)


class LanedBooking(Booking):
    """
    A booking placed on the timeline.

    ``end_index`` is not clamped to the grid: a booking that runs past
    closing time reports its true end.
    """

    start_index: int
    end_index: int
    lane: int = Field(ge=0)
    slots_span: int


class UnplacedBooking(BaseModel):
    """A booking that could not be mapped onto the grid."""

    model_config = ConfigDict(frozen=True)

    booking: Booking
    reason: RejectionReason


class LaneAssignment(BaseModel):
    model_config = ConfigDict(frozen=True)

    laned_bookings: list[LanedBooking] = Field(default_factory=list)
    lane_count: int = 0
    unplaced: list[UnplacedBooking] = Field(default_factory=list)


class AvailabilityRange(BaseModel):
    """A maximal run of free slots, half-open ``[start_index, end_index)``."""

    model_config = ConfigDict(frozen=True)

    start_index: int
    end_index: int
    start_time: str
    end_time: str

    @property
    def slot_length(self) -> int:
        return self.end_index - self.start_index


class TimelineBlock(BaseModel):
    """Consecutive slots collapsed for compact display."""

    model_config = ConfigDict(frozen=True)

    start_index: int
    end_index: int
    start_time: str
    end_time: str
    status: SlotStatus
    booking_refs: list[Booking] = Field(default_factory=list)


class TimelineLayout(BaseModel):
    """Complete layout for one day, ready for a renderer."""

    model_config = ConfigDict(frozen=True)

    date: Optional[str] = None
    start_hour: int
    end_hour: int
    slot_interval_minutes: int
    slot_count: int
    slots: list[Slot] = Field(default_factory=list)
    blocks: list[TimelineBlock] = Field(default_factory=list)
    laned_bookings: list[LanedBooking] = Field(default_factory=list)
    lane_count: int = 0
    available_ranges: list[AvailabilityRange] = Field(default_factory=list)
    slot_heights: list[SlotHeight] = Field(default_factory=list)
    unplaced: list[UnplacedBooking] = Field(default_factory=list)
    skipped_records: int = 0
