"""Shared test fixtures and helpers."""

from typing import Optional, Union

import pytest

from booking_timeline.config import GridConfig
from booking_timeline.schemas.booking_schema import Booking
from booking_timeline.tools import booking as booking_store


@pytest.fixture
def grid():
    """The standard 08:00-20:00 grid with 30-minute slots (24 slots)."""
    return GridConfig(
        start_hour=8, end_hour=20, slot_interval_minutes=30, default_duration_minutes=60
    )


@pytest.fixture
def hourly_grid():
    """A 09:00-17:00 grid with one-hour slots (8 slots)."""
    return GridConfig(
        start_hour=9, end_hour=17, slot_interval_minutes=60, default_duration_minutes=60
    )


@pytest.fixture(autouse=True)
def _reset_booking_store():
    booking_store.reset()
    yield
    booking_store.reset()


def make_booking(
    booking_id: Union[int, str] = 1,
    time: Optional[str] = "09:00",
    duration: Optional[int] = 60,
    date: str = "2026-10-18",
    customer_name: str = "",
    service_name: str = "Deep Tissue Massage",
    **extra,
) -> Booking:
    """Helper to create a Booking with sensible defaults."""
    return Booking(
        id=booking_id,
        time=time,
        duration_minutes=duration,
        date=date,
        customer_name=customer_name or f"Customer {booking_id}",
        service_name=service_name,
        **extra,
    )


def make_bookings(*pairs: tuple[str, Optional[int]]) -> list[Booking]:
    """Create bookings from (time, duration) pairs with ids 1..n."""
    return [make_booking(i + 1, time, duration) for i, (time, duration) in enumerate(pairs)]
