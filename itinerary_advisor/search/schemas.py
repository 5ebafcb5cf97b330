"""
Schemas for the search collaborators.

Option models are what the model reply is parsed into; request models
are the HTTP payloads of the search endpoints.
"""

import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field


class FlightOption(BaseModel):
    id: str
    airline: str = "Unknown Airline"
    departure_time: str = Field(default="Unknown Time", alias="departureTime")
    arrival_time: str = Field(default="Unknown Time", alias="arrivalTime")
    price: str = "Unknown Price"
    duration: str = "Unknown Duration"

    model_config = {"populate_by_name": True}


class HotelOption(BaseModel):
    id: str
    name: str = "Unknown Hotel"
    description: str = "No description available"
    nightly_rate: int = Field(default=0, alias="nightlyRate")
    rating: float = 0.0
    location: str = "Unknown Location"
    amenities: List[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class ActivityOption(BaseModel):
    id: str
    name: str = "Unknown Activity"
    description: str = "No description available"
    price: str = "Price not available"
    duration: str = "Duration not specified"
    location: str = "Location not specified"
    category: str = "Uncategorized"


class ActivitySuggestion(BaseModel):
    name: str
    description: str = ""


# ============================================================================
# Request Models
# ============================================================================


class FlightSearchRequest(BaseModel):
    departure_location: str = Field(min_length=1)
    arrival_location: str = Field(min_length=1)
    departure_date: datetime.date
    return_date: datetime.date


class HotelSearchRequest(BaseModel):
    location: str = Field(min_length=1)


class ActivitySearchRequest(BaseModel):
    prompt: str = Field(min_length=1, description="What the traveller feels like doing")
    location: str = Field(default="Paris", min_length=1)


class SuggestionRequest(BaseModel):
    prompt: str = Field(min_length=1)


class FlightQueueRequest(BaseModel):
    flight: FlightOption


class HotelQueueRequest(BaseModel):
    name: str
    check_in: datetime.date
    check_out: datetime.date
    nightly_rate: Optional[float] = None


class ActivityQueueRequest(BaseModel):
    name: str
    date: datetime.date
    description: str = ""
    price: Optional[Union[float, str]] = None
