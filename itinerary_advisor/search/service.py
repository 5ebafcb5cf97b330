"""
Search collaborators.

Flight, hotel and activity searches ask the model for realistic options
and parse the reply into option records. The converters at the bottom
turn a chosen option into a queue item for the board.
"""

import datetime
import logging
import math
from typing import List, Optional, Union

from openai import OpenAI

from itinerary_advisor.itinerary.schemas import (
    ActivityDetails,
    HotelDetails,
    ItemKind,
    QueueItem,
    TravelDetails,
)
from itinerary_advisor.search import prompts
from itinerary_advisor.search.parsers import (
    parse_activity_options,
    parse_flight_options,
    parse_hotel_options,
    parse_suggestions,
)
from itinerary_advisor.search.schemas import (
    ActivityOption,
    ActivitySuggestion,
    FlightOption,
    HotelOption,
)
from itinerary_advisor.shared.llm.client import GenerationOptions, generate


logger = logging.getLogger(__name__)

SEARCH_OPTIONS = GenerationOptions(
    temperature=0.7,
    max_output_tokens=500,
    presence_penalty=0.3,
    frequency_penalty=0.3,
)

DEFAULT_NIGHTLY_RATE = 200
TAX_RATE = 0.15
RESORT_FEE_PER_NIGHT = 25
SERVICE_FEE = 50
DEFAULT_ACTIVITY_PRICE = "$150"

DateLike = Union[datetime.date, datetime.datetime]


# ============================================================================
# Searches
# ============================================================================


def search_flights(
    departure_location: str,
    arrival_location: str,
    departure_date: datetime.date,
    return_date: datetime.date,
    client: Optional[OpenAI] = None,
) -> List[FlightOption]:
    """
    Ask the model for round-trip flight options.

    Raises:
        GenerationError: If the generation call fails.
    """
    values = {
        "departure_location": departure_location,
        "arrival_location": arrival_location,
        "departure_date": departure_date.isoformat(),
        "return_date": return_date.isoformat(),
    }
    raw = generate(
        prompts.FLIGHT_SYSTEM_PROMPT_TEMPLATE.format(**values),
        prompts.FLIGHT_USER_PROMPT_TEMPLATE.format(**values),
        options=SEARCH_OPTIONS,
        client=client,
    )
    flights = parse_flight_options(raw)
    logger.info(
        f"[search=flights] {departure_location} -> {arrival_location} | options={len(flights)}"
    )
    return flights


def search_hotels(location: str, client: Optional[OpenAI] = None) -> List[HotelOption]:
    raw = generate(
        prompts.HOTEL_SYSTEM_PROMPT_TEMPLATE.format(location=location),
        prompts.HOTEL_USER_PROMPT_TEMPLATE.format(location=location),
        options=SEARCH_OPTIONS,
        client=client,
    )
    hotels = parse_hotel_options(raw)
    logger.info(f"[search=hotels] {location} | options={len(hotels)}")
    return hotels


def search_activities(
    prompt: str,
    location: str,
    client: Optional[OpenAI] = None,
) -> List[ActivityOption]:
    raw = generate(
        prompts.ACTIVITY_SYSTEM_PROMPT_TEMPLATE.format(location=location, prompt=prompt),
        prompt,
        options=SEARCH_OPTIONS,
        client=client,
    )
    activities = parse_activity_options(raw)
    logger.info(f"[search=activities] {location} | options={len(activities)}")
    return activities


def suggest_activities(prompt: str, client: Optional[OpenAI] = None) -> List[ActivitySuggestion]:
    """Free-form suggestions; at most three are returned."""
    raw = generate(
        prompts.SUGGESTION_SYSTEM_PROMPT,
        prompt,
        options=SEARCH_OPTIONS,
        client=client,
    )
    return parse_suggestions(raw)


# ============================================================================
# Pricing
# ============================================================================


def calculate_total_price(
    nightly_rate: Optional[float],
    check_in: Optional[DateLike],
    check_out: Optional[DateLike],
) -> float:
    """
    Total stay price including tax and fees.

    Falls back to a 200 nightly rate when none is given and to a single
    night when the dates are missing or out of order.
    """
    rate = nightly_rate if nightly_rate and nightly_rate > 0 else DEFAULT_NIGHTLY_RATE

    nights = 1
    if check_in is not None and check_out is not None and check_in < check_out:
        days = (check_out - check_in).total_seconds() / 86400
        nights = max(1, math.ceil(days))

    subtotal = rate * nights
    return subtotal + subtotal * TAX_RATE + RESORT_FEE_PER_NIGHT * nights + SERVICE_FEE


def format_price(amount: float) -> str:
    return f"${amount:,.2f}"


# ============================================================================
# Queue conversion
# ============================================================================


def flight_to_queue_item(flight: FlightOption) -> QueueItem:
    title = f"{flight.airline} Flight" if flight.airline else "Flight"
    return QueueItem(
        kind=ItemKind.TRAVEL,
        title=title,
        details=TravelDetails(
            airline=flight.airline,
            departure_time=flight.departure_time,
            arrival_time=flight.arrival_time,
            duration=flight.duration,
            price=flight.price,
        ),
    )


def hotel_to_queue_item(
    name: str,
    check_in: datetime.date,
    check_out: datetime.date,
    nightly_rate: Optional[float] = None,
) -> QueueItem:
    rate = nightly_rate if nightly_rate and nightly_rate > 0 else DEFAULT_NIGHTLY_RATE
    return QueueItem(
        kind=ItemKind.HOTEL,
        title=name,
        details=HotelDetails(
            check_in=check_in.isoformat(),
            check_out=check_out.isoformat(),
            nightly_rate=rate,
            price=format_price(calculate_total_price(rate, check_in, check_out)),
        ),
    )


def activity_to_queue_item(
    name: str,
    date: datetime.date,
    description: str = "",
    price: Optional[Union[float, str]] = None,
) -> QueueItem:
    if isinstance(price, (int, float)):
        formatted = format_price(price)
    else:
        formatted = price or DEFAULT_ACTIVITY_PRICE
    return QueueItem(
        kind=ItemKind.ACTIVITY,
        title=name,
        description=description or None,
        details=ActivityDetails(date=date.isoformat(), price=formatted),
    )
