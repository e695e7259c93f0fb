"""Shared utilities used across the booking timeline."""

import re
from typing import Optional

_DIGITS = re.compile(r"^\d+$")


def parse_hhmm(value: object) -> Optional[tuple[int, int]]:
    """Split a wall-clock ``HH:MM`` string into (hours, minutes).

    Returns None when the value is not a string of exactly two numeric
    components. Ranges are not checked here.

    Examples:
        >>> parse_hhmm("09:30")
        (9, 30)
        >>> parse_hhmm("9am") is None
        True
    """
    if not isinstance(value, str):
        return None
    parts = value.strip().split(":")
    if len(parts) != 2:
        return None
    hours, minutes = (p.strip() for p in parts)
    if not _DIGITS.match(hours) or not _DIGITS.match(minutes):
        return None
    return int(hours), int(minutes)


def format_hhmm(total_minutes: int) -> str:
    """Format minutes since midnight as zero-padded ``HH:MM``.

    Examples:
        >>> format_hhmm(8 * 60 + 5)
        '08:05'
        >>> format_hhmm(20 * 60)
        '20:00'
    """
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"
