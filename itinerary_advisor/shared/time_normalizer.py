"""
Canonical 24-hour time strings.

``normalize_time`` runs on untrusted model output, so it never raises:
anything it cannot convert is returned cleaned but otherwise unchanged.
"""

import re
from typing import Optional


_STRIP_PATTERN = re.compile(r"[^\w:]")
_PERIOD_PATTERN = re.compile(r"^(?P<clock>.*?)(?P<period>am|pm)")


def _parse_int(value: str) -> Optional[int]:
    value = value.strip()
    if not value.isdigit():
        return None
    return int(value)


def normalize_time(text: Optional[str]) -> str:
    """
    Convert a textual time into canonical ``HH:MM`` form.

    Examples:
        "2:30 PM"  -> "14:30"
        "12:00 AM" -> "00:00"
        "9am"      -> "09:00"
        "14:30"    -> "14:30" (passed through)
        ""         -> ""

    Args:
        text: Time as written by a user or the model

    Returns:
        Canonical time, or the cleaned input when it is not a 12-hour time
    """
    if not text:
        return ""

    cleaned = _STRIP_PATTERN.sub("", str(text)).lower()

    match = _PERIOD_PATTERN.search(cleaned)
    if match is None:
        return cleaned

    clock, period = match.group("clock"), match.group("period")
    hours_text, _, minutes_text = clock.partition(":")

    hours = _parse_int(hours_text)
    if hours is None:
        return cleaned

    minutes = _parse_int(minutes_text.split(":")[0])
    minutes_str = f"{minutes:02d}" if minutes is not None and minutes < 60 else "00"

    # Hours past 12 are already on the 24-hour clock
    if hours <= 12:
        if period == "pm" and hours != 12:
            hours += 12
        elif period == "am" and hours == 12:
            hours = 0

    return f"{hours:02d}:{minutes_str}"
