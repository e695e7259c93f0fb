"""
Field-level checks for booking requests.

These run before any data reaches the timeline engine. Each check is a
plain predicate so it can be reused by the pydantic request model and by
callers that only want a yes/no answer.
"""

import logging
import re
from datetime import date, datetime
from typing import Optional

logger = logging.getLogger(__name__)

# Validation thresholds
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
MIN_PHONE_LENGTH = 10

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_valid_date(value: str) -> bool:
    """Validate date is in YYYY-MM-DD format and is a real calendar day."""
    if not _DATE_PATTERN.match(value.strip()):
        return False
    try:
        datetime.strptime(value.strip(), "%Y-%m-%d")
        return True
    except ValueError:
        return False


def is_future_or_today(value: str, today: Optional[date] = None) -> bool:
    """Check that a valid YYYY-MM-DD date is not in the past."""
    booking_day = datetime.strptime(value.strip(), "%Y-%m-%d").date()
    return booking_day >= (today or date.today())


def is_valid_time(value: str) -> bool:
    """Validate time is strict 24-hour HH:MM."""
    return bool(_TIME_PATTERN.match(value.strip()))


def is_valid_name(value: str) -> bool:
    return MIN_NAME_LENGTH <= len(value.strip()) <= MAX_NAME_LENGTH


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_PATTERN.match(value.strip()))


def is_valid_phone(value: str) -> bool:
    return len(value.strip()) >= MIN_PHONE_LENGTH


def normalize_email(value: str) -> str:
    """Trim and lower-case an email address."""
    return value.strip().lower()
