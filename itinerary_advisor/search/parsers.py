"""
Record-block parsers for search replies.

Search replies are blank-line separated blocks, one record per block,
one field per line, optionally bulleted with ``"- "``. Fields are taken
by position; a missing or empty line falls back to a placeholder.
"""

import re
from typing import List

from itinerary_advisor.search.schemas import (
    ActivityOption,
    ActivitySuggestion,
    FlightOption,
    HotelOption,
)


BLOCK_SEPARATOR = re.compile(r"\n\s*\n")
BULLET_PREFIX = re.compile(r"^- ")
NUMBER_PREFIX = re.compile(r"^\d+\.\s*")
LEADING_NUMBER = re.compile(r"^\s*(\d+(?:\.\d+)?)")

MAX_SUGGESTIONS = 3


def split_record_blocks(raw: str) -> List[List[str]]:
    """Split a reply into blocks of stripped field lines; empty blocks are skipped."""
    blocks = []
    for block in BLOCK_SEPARATOR.split(raw.strip()):
        if not block.strip():
            continue
        lines = [BULLET_PREFIX.sub("", line.strip()).strip() for line in block.splitlines()]
        blocks.append(lines)
    return blocks


def _field(lines: List[str], index: int) -> str:
    return lines[index] if index < len(lines) else ""


def _rate(text: str) -> int:
    # "$1,250" -> 1250, "$550.00" -> 550
    match = re.search(r"\d+", text.replace(",", ""))
    return int(match.group()) if match else 0


def _rating(text: str) -> float:
    match = LEADING_NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


def _with_defaults(model, values: dict):
    return model(**{key: value for key, value in values.items() if value})


def parse_flight_options(raw: str) -> List[FlightOption]:
    return [
        _with_defaults(
            FlightOption,
            {
                "id": f"flight-{index}",
                "airline": _field(lines, 0),
                "departure_time": _field(lines, 1),
                "arrival_time": _field(lines, 2),
                "price": _field(lines, 3),
                "duration": _field(lines, 4),
            },
        )
        for index, lines in enumerate(split_record_blocks(raw))
    ]


def parse_hotel_options(raw: str) -> List[HotelOption]:
    hotels = []
    for index, lines in enumerate(split_record_blocks(raw)):
        amenities = [a.strip() for a in _field(lines, 5).split(",") if a.strip()]
        hotels.append(
            _with_defaults(
                HotelOption,
                {
                    "id": f"hotel-{index}",
                    "name": _field(lines, 0),
                    "description": _field(lines, 1),
                    "location": _field(lines, 4),
                },
            ).model_copy(
                update={
                    "nightly_rate": _rate(_field(lines, 2)),
                    "rating": _rating(_field(lines, 3)),
                    "amenities": amenities,
                }
            )
        )
    return hotels


def parse_activity_options(raw: str) -> List[ActivityOption]:
    return [
        _with_defaults(
            ActivityOption,
            {
                "id": f"activity-{index}",
                "name": _field(lines, 0),
                "description": _field(lines, 1),
                "price": _field(lines, 2),
                "duration": _field(lines, 3),
                "location": _field(lines, 4),
                "category": _field(lines, 5),
            },
        )
        for index, lines in enumerate(split_record_blocks(raw))
    ]


def parse_suggestions(raw: str) -> List[ActivitySuggestion]:
    """First line of each block is the name (numbering stripped), the rest the description."""
    suggestions = []
    for block in BLOCK_SEPARATOR.split(raw.strip()):
        lines = block.strip().splitlines()
        if not lines:
            continue
        suggestions.append(
            ActivitySuggestion(
                name=NUMBER_PREFIX.sub("", lines[0].strip()),
                description="\n".join(lines[1:]).strip(),
            )
        )
    return suggestions[:MAX_SUGGESTIONS]
