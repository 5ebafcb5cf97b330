"""
Schemas for itinerary items.

Defines the closed set of item kinds, the kind-specific detail records
and the agenda/queue item models shared by the board, the advisor and
the search collaborators.
"""

import uuid
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator


PLACEHOLDER_PRICE = "TBD"


class ItemKind(str, Enum):
    """Closed tag set for itinerary items."""

    TRAVEL = "travel"
    HOTEL = "hotel"
    ACTIVITY = "activity"


def new_item_id() -> str:
    """Generate an identifier that is never reused across merges."""
    return f"item-{uuid.uuid4().hex}"


# =============================================================================
# Kind-specific details
# =============================================================================


class TravelDetails(BaseModel):
    """Flight metadata for travel items."""

    kind: Literal["travel"] = "travel"
    airline: str = Field(default="Unknown Airline")
    departure_time: str = Field(default="Unknown Time", alias="departureTime")
    arrival_time: str = Field(default="Unknown Time", alias="arrivalTime")
    duration: str = Field(default="Unknown Duration")
    price: str = Field(default=PLACEHOLDER_PRICE)

    model_config = {"populate_by_name": True}


class HotelDetails(BaseModel):
    """Stay dates and rate for hotel items."""

    kind: Literal["hotel"] = "hotel"
    check_in: str = Field(default=PLACEHOLDER_PRICE, alias="checkIn")
    check_out: str = Field(default=PLACEHOLDER_PRICE, alias="checkOut")
    nightly_rate: float = Field(default=0.0, ge=0, alias="nightlyRate")
    price: str = Field(default=PLACEHOLDER_PRICE)

    model_config = {"populate_by_name": True}


class ActivityDetails(BaseModel):
    """Date and price for activity items."""

    kind: Literal["activity"] = "activity"
    date: str = Field(default=PLACEHOLDER_PRICE)
    price: str = Field(default=PLACEHOLDER_PRICE)


ItemDetails = Union[TravelDetails, HotelDetails, ActivityDetails]

DETAILS_BY_KIND = {
    ItemKind.TRAVEL: TravelDetails,
    ItemKind.HOTEL: HotelDetails,
    ItemKind.ACTIVITY: ActivityDetails,
}


def default_details(kind: ItemKind, **values: Any) -> ItemDetails:
    """Build the details record for ``kind``, filling placeholders."""
    return DETAILS_BY_KIND[ItemKind(kind)](**values)


def _coerce_details(data: Any) -> Any:
    """Make sure ``details`` matches ``kind``, defaulting when absent."""
    if not isinstance(data, dict) or "kind" not in data:
        return data

    kind = ItemKind(data["kind"])
    details = data.get("details")
    model = DETAILS_BY_KIND[kind]

    if details is None:
        data = {**data, "details": model()}
    elif isinstance(details, dict):
        values = {k: v for k, v in details.items() if k != "kind"}
        data = {**data, "details": model.model_validate(values)}
    elif not isinstance(details, model):
        data = {**data, "details": model(price=getattr(details, "price", PLACEHOLDER_PRICE))}
    return data


# =============================================================================
# Items
# =============================================================================


class ItineraryItem(BaseModel):
    """A planned element of the trip."""

    id: str = Field(default_factory=new_item_id, description="Opaque unique identifier")
    title: str = Field(description="Display name, also a best-effort matching key")
    kind: ItemKind = Field(description="travel, hotel or activity")
    time: str = Field(default="00:00", description="Canonical 24-hour HH:MM time")
    description: str = Field(default="")
    pinned: bool = Field(default=False, description="Locked by the user")
    details: ItemDetails = Field(default=None, discriminator="kind")

    @model_validator(mode="before")
    @classmethod
    def _details_match_kind(cls, data: Any) -> Any:
        return _coerce_details(data)

    @property
    def price(self) -> str:
        return self.details.price


class QueueItem(BaseModel):
    """A search result waiting to be dropped onto the agenda."""

    id: str = Field(default_factory=lambda: f"queue-{uuid.uuid4().hex}")
    kind: ItemKind
    title: str
    description: Optional[str] = None
    time: Optional[str] = None
    details: ItemDetails = Field(default=None, discriminator="kind")

    @model_validator(mode="before")
    @classmethod
    def _details_match_kind(cls, data: Any) -> Any:
        return _coerce_details(data)


class CandidateItem(BaseModel):
    """One item line parsed from the model reply, before reconciliation."""

    title: str
    kind: ItemKind
    time: str
    description: str = ""
    price: str = ""


class CandidateItinerary(BaseModel):
    """One alternative proposed by the model, before reconciliation."""

    explanation: str
    items: List[CandidateItem] = Field(default_factory=list)


def dump_items(items: List[BaseModel]) -> List[Dict[str, Any]]:
    """Dump items for graph state and API payloads."""
    return [item.model_dump(mode="json") for item in items]
