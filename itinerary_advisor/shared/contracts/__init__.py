"""Agent output contracts for handoffs between the pipeline and the board."""

from itinerary_advisor.shared.contracts.advice_output import (
    AdviceResult,
    AlternativeItinerary,
)

__all__ = ["AdviceResult", "AlternativeItinerary"]
