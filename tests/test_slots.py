"""Tests for time <-> slot index arithmetic."""

import pytest

from booking_timeline.config import GridConfig
from booking_timeline.schemas.timeline_schema import RejectionReason
from booking_timeline.timeline.slots import (
    INVALID_SLOT,
    booking_span,
    rejection_reason,
    resolve_duration,
    slot_index_to_time,
    slots_needed,
    time_to_slot_index,
)
from tests.conftest import make_booking


class TestTimeToSlotIndex:
    def test_opening_time_is_slot_zero(self, grid):
        assert time_to_slot_index("08:00", grid) == 0

    def test_one_minute_before_opening_is_invalid(self, grid):
        assert time_to_slot_index("07:59", grid) == INVALID_SLOT

    def test_mid_slot_time_floors(self, grid):
        assert time_to_slot_index("09:15", grid) == 2
        assert time_to_slot_index("09:29", grid) == 2
        assert time_to_slot_index("09:30", grid) == 3

    def test_last_slot(self, grid):
        assert time_to_slot_index("19:45", grid) == 23

    def test_closing_time_is_invalid(self, grid):
        assert time_to_slot_index("20:00", grid) == INVALID_SLOT

    def test_single_digit_hour_accepted(self, grid):
        assert time_to_slot_index("9:00", grid) == 2

    @pytest.mark.parametrize("value", ["", "9am", "09", "09:00:00", "ab:cd", "-1:30", None, 900])
    def test_unparseable_is_invalid(self, grid, value):
        assert time_to_slot_index(value, grid) == INVALID_SLOT

    def test_hourly_grid(self, hourly_grid):
        assert time_to_slot_index("09:59", hourly_grid) == 0
        assert time_to_slot_index("16:30", hourly_grid) == 7
        assert time_to_slot_index("08:30", hourly_grid) == INVALID_SLOT


class TestSlotIndexToTime:
    def test_zero_padded(self, grid):
        assert slot_index_to_time(0, grid) == "08:00"
        assert slot_index_to_time(3, grid) == "09:30"

    def test_end_boundary(self, grid):
        assert slot_index_to_time(grid.slot_count, grid) == "20:00"

    def test_round_trip_every_slot(self, grid):
        for i in range(grid.slot_count):
            assert time_to_slot_index(slot_index_to_time(i, grid), grid) == i

    def test_round_trip_fifteen_minute_grid(self):
        grid = GridConfig(start_hour=6, end_hour=22, slot_interval_minutes=15)
        for i in range(grid.slot_count):
            assert time_to_slot_index(slot_index_to_time(i, grid), grid) == i


class TestRejectionReason:
    def test_valid_time_has_no_reason(self, grid):
        assert rejection_reason("10:00", grid) is None

    def test_malformed(self, grid):
        assert rejection_reason("ten", grid) == RejectionReason.INVALID_TIME

    def test_outside_hours(self, grid):
        assert rejection_reason("21:00", grid) == RejectionReason.OUTSIDE_BUSINESS_HOURS


class TestDuration:
    def test_missing_duration_uses_default(self, grid):
        assert resolve_duration(make_booking(duration=None), grid) == 60

    def test_explicit_duration_kept(self, grid):
        assert resolve_duration(make_booking(duration=90), grid) == 90

    def test_slots_needed_rounds_up(self, grid):
        assert slots_needed(30, grid) == 1
        assert slots_needed(31, grid) == 2
        assert slots_needed(90, grid) == 3

    def test_slots_needed_minimum_one(self, grid):
        assert slots_needed(1, grid) == 1


class TestBookingSpan:
    def test_span_is_half_open(self, grid):
        assert booking_span(make_booking(time="09:00", duration=60), grid) == (2, 4)

    def test_span_not_clamped_past_closing(self, grid):
        assert booking_span(make_booking(time="19:45", duration=60), grid) == (23, 25)

    def test_invalid_time_has_no_span(self, grid):
        assert booking_span(make_booking(time="07:00"), grid) is None
