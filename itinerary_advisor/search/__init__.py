"""Flight, hotel and activity search backed by the generation client."""

from itinerary_advisor.search.service import (
    calculate_total_price,
    search_activities,
    search_flights,
    search_hotels,
    suggest_activities,
)

__all__ = [
    "calculate_total_price",
    "search_activities",
    "search_flights",
    "search_hotels",
    "suggest_activities",
]
