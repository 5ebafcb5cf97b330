"""
Advisor output contract.

Defines the structured result of one advisory round: the original
itinerary (flight-bracketed) plus the reconciled alternatives.
"""

from typing import List

from pydantic import BaseModel, Field

from itinerary_advisor.itinerary.schemas import ItineraryItem


class AlternativeItinerary(BaseModel):
    """One reconciled alternative itinerary."""

    items: List[ItineraryItem] = Field(default_factory=list)
    explanation: str = Field(description="Why this alternative differs from the original")


class AdviceResult(BaseModel):
    """
    Contract for advisor output (v1).

    ``original_itinerary`` is the submitted agenda with the flight
    bracketing applied; ``alternative_itineraries`` keeps the order in
    which the model proposed them.
    """

    original_itinerary: List[ItineraryItem] = Field(default_factory=list)
    alternative_itineraries: List[AlternativeItinerary] = Field(default_factory=list)

    class Config:
        """Pydantic model configuration."""

        json_schema_extra = {
            "example": {
                "original_itinerary": [
                    {
                        "id": "item-1",
                        "title": "Arrival Flight",
                        "kind": "travel",
                        "time": "10:00",
                        "description": "Air France Flight AF1234",
                        "pinned": True,
                        "details": {"kind": "travel", "airline": "Air France", "price": "$1,249"},
                    }
                ],
                "alternative_itineraries": [
                    {
                        "explanation": "Swaps museums for a food-focused afternoon.",
                        "items": [],
                    }
                ],
            }
        }
