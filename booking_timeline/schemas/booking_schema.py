"""Service, booking and booking-request data models."""

import math
from datetime import date as date_type
from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from booking_timeline.validation import (
    is_future_or_today,
    is_valid_date,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
    is_valid_time,
    normalize_email,
)


class Service(BaseModel):
    """A bookable catalog entry."""
    id: int
    name: str
    duration: int
    price: float
    description: str = ""


class Booking(BaseModel):
    """
    A stored booking as returned by the booking store.

    Accepts both snake_case and the camelCase keys used by the HTTP layer.
    ``time`` and ``duration_minutes`` are read leniently: a malformed time
    is kept as-is for the timeline to reject, and an unusable duration
    becomes None so the grid default applies.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    id: Union[int, str]
    time: Optional[str] = None
    date: str = ""
    duration_minutes: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("duration_minutes", "durationMinutes", "duration"),
    )
    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str = ""
    service_name: str = ""
    price: Optional[float] = None
    created_at: Optional[str] = None

    @field_validator("time", mode="before")
    @classmethod
    def _keep_string_time(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def _lenient_duration(cls, value: Any) -> Optional[int]:
        if value is None or isinstance(value, bool):
            return None
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(number) or number <= 0:
            return None
        return math.ceil(number)


class BookingRequest(BaseModel):
    """Validated booking request data submitted by a customer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    service_id: int = Field(gt=0)
    date: str
    time: str
    customer_name: str
    customer_email: str
    customer_phone: str

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        if not is_valid_date(value):
            raise ValueError("Date must be in YYYY-MM-DD format")
        if not is_future_or_today(value, date_type.today()):
            raise ValueError("Booking date must be in the future")
        return value.strip()

    @field_validator("time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        if not is_valid_time(value):
            raise ValueError("Time must be in HH:MM format (24-hour)")
        return value.strip()

    @field_validator("customer_name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not is_valid_name(value):
            raise ValueError("Customer name must be between 2 and 100 characters")
        return value.strip()

    @field_validator("customer_email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not is_valid_email(value):
            raise ValueError("Invalid email format")
        return normalize_email(value)

    @field_validator("customer_phone")
    @classmethod
    def _check_phone(cls, value: str) -> str:
        if not is_valid_phone(value):
            raise ValueError("Phone number must be at least 10 characters")
        return value.strip()
