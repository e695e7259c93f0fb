"""Tests for booking field validators."""

from datetime import date

from booking_timeline.validation import (
    is_future_or_today,
    is_valid_date,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
    is_valid_time,
    normalize_email,
)


class TestDateChecks:
    def test_valid_date(self):
        assert is_valid_date("2026-10-18") is True

    def test_wrong_format(self):
        assert is_valid_date("18/10/2026") is False

    def test_impossible_day(self):
        assert is_valid_date("2026-02-30") is False

    def test_today_is_allowed(self):
        assert is_future_or_today("2026-10-18", today=date(2026, 10, 18)) is True

    def test_past_rejected(self):
        assert is_future_or_today("2026-10-17", today=date(2026, 10, 18)) is False


class TestTimeChecks:
    def test_valid_times(self):
        assert is_valid_time("00:00") is True
        assert is_valid_time("23:59") is True

    def test_invalid_times(self):
        assert is_valid_time("24:00") is False
        assert is_valid_time("12:60") is False
        assert is_valid_time("7:30") is False


class TestCustomerChecks:
    def test_name_length(self):
        assert is_valid_name("Jo") is True
        assert is_valid_name(" J ") is False
        assert is_valid_name("x" * 101) is False

    def test_email(self):
        assert is_valid_email("ada@example.com") is True
        assert is_valid_email("ada@example") is False
        assert is_valid_email("ada example.com") is False

    def test_phone_length(self):
        assert is_valid_phone("0412345678") is True
        assert is_valid_phone(" 041234567 ") is False

    def test_normalize_email(self):
        assert normalize_email("  Ada@Example.COM ") == "ada@example.com"
