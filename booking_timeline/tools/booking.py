"""
In-memory booking store.

Stands in for the relational services/bookings tables: bookings are kept
per process and joined with the service catalog on read.
"""

import itertools
import logging
from datetime import datetime, timezone
from typing import Any, Optional, TypedDict

from pydantic import ValidationError

from booking_timeline.schemas.booking_schema import Booking, BookingRequest
from booking_timeline.tools.services import get_service

logger = logging.getLogger(__name__)


class BookingRecord(TypedDict):
    """Stored row, before joining with the service catalog."""

    id: int
    service_id: int
    date: str
    time: str
    customer_name: str
    customer_email: str
    customer_phone: str
    created_at: str


class BookingResult(TypedDict, total=False):
    """Result from create_booking."""

    success: bool
    message: str
    booking_id: int
    errors: list[dict[str, Any]]


_bookings: dict[int, BookingRecord] = {}
_ids = itertools.count(1)


def _to_booking(record: BookingRecord) -> Booking:
    service = get_service(record["service_id"])
    return Booking(
        id=record["id"],
        date=record["date"],
        time=record["time"],
        duration_minutes=service.duration if service else None,
        customer_name=record["customer_name"],
        customer_email=record["customer_email"],
        customer_phone=record["customer_phone"],
        service_name=service.name if service else "",
        price=service.price if service else None,
        created_at=record["created_at"],
    )


def create_booking(**fields: Any) -> BookingResult:
    """Validate and store a booking request.

    Accepts snake_case or camelCase field names, e.g. ``service_id`` or
    ``serviceId``.
    """
    try:
        request = BookingRequest.model_validate(fields)
    except ValidationError as e:
        errors = [
            {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        logger.info("Booking rejected: %d validation error(s)", len(errors))
        return {"success": False, "message": "Validation failed", "errors": errors}

    if get_service(request.service_id) is None:
        return {
            "success": False,
            "message": "Validation failed",
            "errors": [{"field": "service_id", "message": "Service does not exist"}],
        }

    booking_id = next(_ids)
    _bookings[booking_id] = {
        "id": booking_id,
        "service_id": request.service_id,
        "date": request.date,
        "time": request.time,
        "customer_name": request.customer_name,
        "customer_email": request.customer_email,
        "customer_phone": request.customer_phone,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    logger.info(
        "Booking created: %s for %s on %s at %s",
        booking_id,
        request.customer_name,
        request.date,
        request.time,
    )
    return {"success": True, "booking_id": booking_id, "message": "Booking created successfully"}


def list_bookings(date: Optional[str] = None) -> list[Booking]:
    """List bookings joined with their service.

    With a date: that day only, by time, then newest first. Without a
    date: every booking, newest first.
    """
    records = list(_bookings.values())
    # Newest first; id breaks ties between bookings created in the same instant
    records.sort(key=lambda r: (r["created_at"], r["id"]), reverse=True)
    if date:
        records = [r for r in records if r["date"] == date]
        records.sort(key=lambda r: r["time"])
    return [_to_booking(r) for r in records]


def get_booking(booking_id: int) -> Optional[Booking]:
    """Retrieve a booking by id."""
    record = _bookings.get(booking_id)
    return _to_booking(record) if record else None


def reset() -> None:
    """Clear all bookings. Used by test fixtures for isolation."""
    global _ids
    _bookings.clear()
    _ids = itertools.count(1)
