"""
Unit tests for the time normalizer.
"""

import pytest

from itinerary_advisor.shared.time_normalizer import normalize_time


class TestNormalizeTime:
    """Tests for normalize_time."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2:30 PM", "14:30"),
            ("12:00 AM", "00:00"),
            ("12:00 PM", "12:00"),
            ("12:15 am", "00:15"),
            ("9am", "09:00"),
            ("9 PM", "21:00"),
            ("11:45 P.M.", "23:45"),
            ("10:00 AM", "10:00"),
        ],
    )
    def test_twelve_hour_times_are_converted(self, text, expected):
        """12-hour times with an AM/PM marker become canonical HH:MM."""
        assert normalize_time(text) == expected

    def test_empty_input_returns_empty(self):
        assert normalize_time("") == ""
        assert normalize_time(None) == ""

    @pytest.mark.parametrize("text", ["00:00", "09:05", "14:30", "23:59"])
    def test_canonical_times_pass_through(self, text):
        """Already canonical times are returned as-is."""
        assert normalize_time(text) == text

    @pytest.mark.parametrize("text", ["00:00", "14:30", "2:30 PM", "12:00 AM", "9am"])
    def test_idempotent(self, text):
        once = normalize_time(text)
        assert normalize_time(once) == once

    def test_hours_past_twelve_are_kept(self):
        """A 24-hour time with a stray marker is not shifted again."""
        assert normalize_time("14:30 PM") == "14:30"

    def test_unparseable_text_is_returned_cleaned(self):
        """Garbage never raises; it comes back stripped and lower-cased."""
        assert normalize_time("Noon") == "noon"
        assert normalize_time("late pm") == "latepm"

    def test_missing_minutes_default_to_zero(self):
        assert normalize_time("7 pm") == "19:00"
        assert normalize_time("7:xx pm") == "19:00"
