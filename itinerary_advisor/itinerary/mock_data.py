"""
Sample agenda used to seed new boards.

A five-item Paris trip with pinned flights and hotel and two flexible
activities, enough to exercise the advisor end to end.
"""

from typing import List

from itinerary_advisor.itinerary.schemas import (
    ActivityDetails,
    HotelDetails,
    ItemKind,
    ItineraryItem,
    TravelDetails,
)


SAMPLE_TITLE = "10-Year Anniversary Trip: Paris"


def sample_agenda() -> List[ItineraryItem]:
    """Return a fresh copy of the sample agenda."""
    return [
        ItineraryItem(
            title="Arrival Flight SF > Paris",
            kind=ItemKind.TRAVEL,
            time="10:00",
            description="Air France Flight AF1234",
            pinned=True,
            details=TravelDetails(
                airline="Air France",
                departure_time="10:00 AM",
                arrival_time="11:30 PM",
                duration="8h 30m",
                price="$1,249",
            ),
        ),
        ItineraryItem(
            title="Le Grand Hotel Paris",
            kind=ItemKind.HOTEL,
            time="12:30",
            description="Check-in at the hotel",
            pinned=True,
            details=HotelDetails(
                check_in="March 1, 2024",
                check_out="March 7, 2024",
                nightly_rate=800.0,
                price="$4,800",
            ),
        ),
        ItineraryItem(
            title="Louvre Museum Tour",
            kind=ItemKind.ACTIVITY,
            time="14:00",
            description="Guided tour of the world's largest art museum",
            details=ActivityDetails(date="March 2, 2024", price="$79"),
        ),
        ItineraryItem(
            title="Seine River Cruise",
            kind=ItemKind.ACTIVITY,
            time="19:00",
            description="Romantic dinner cruise along the Seine",
            details=ActivityDetails(date="March 2, 2024", price="$189"),
        ),
        ItineraryItem(
            title="Departure Flight Paris > SF",
            kind=ItemKind.TRAVEL,
            time="15:00",
            description="Air France Flight AF1235",
            pinned=True,
            details=TravelDetails(
                airline="Air France",
                departure_time="3:00 PM",
                arrival_time="4:30 AM",
                duration="8h 30m",
                price="$1,149",
            ),
        ),
    ]
