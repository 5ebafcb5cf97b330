"""
FastAPI endpoints for flight, hotel and activity search.

Search handlers are plain ``def`` functions; FastAPI runs them in its
threadpool because the generation call blocks.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from itinerary_advisor.itinerary.schemas import QueueItem
from itinerary_advisor.search import service
from itinerary_advisor.search.schemas import (
    ActivityOption,
    ActivityQueueRequest,
    ActivitySearchRequest,
    ActivitySuggestion,
    FlightOption,
    FlightQueueRequest,
    FlightSearchRequest,
    HotelOption,
    HotelQueueRequest,
    HotelSearchRequest,
    SuggestionRequest,
)
from itinerary_advisor.shared.errors import AdvisorError, ConfigurationError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/search", tags=["search"])


def _search_error(error: AdvisorError) -> HTTPException:
    code = (
        status.HTTP_503_SERVICE_UNAVAILABLE
        if isinstance(error, ConfigurationError)
        else status.HTTP_502_BAD_GATEWAY
    )
    return HTTPException(status_code=code, detail=error.to_failure().model_dump())


@router.post("/flights", response_model=List[FlightOption])
def flights(request: FlightSearchRequest) -> List[FlightOption]:
    try:
        return service.search_flights(
            request.departure_location,
            request.arrival_location,
            request.departure_date,
            request.return_date,
        )
    except AdvisorError as e:
        logger.error(f"[search=flights] Search failed | {e}")
        raise _search_error(e)


@router.post("/hotels", response_model=List[HotelOption])
def hotels(request: HotelSearchRequest) -> List[HotelOption]:
    try:
        return service.search_hotels(request.location)
    except AdvisorError as e:
        logger.error(f"[search=hotels] Search failed | {e}")
        raise _search_error(e)


@router.post("/activities", response_model=List[ActivityOption])
def activities(request: ActivitySearchRequest) -> List[ActivityOption]:
    try:
        return service.search_activities(request.prompt, request.location)
    except AdvisorError as e:
        logger.error(f"[search=activities] Search failed | {e}")
        raise _search_error(e)


@router.post("/suggestions", response_model=List[ActivitySuggestion])
def suggestions(request: SuggestionRequest) -> List[ActivitySuggestion]:
    try:
        return service.suggest_activities(request.prompt)
    except AdvisorError as e:
        logger.error(f"[search=suggestions] Search failed | {e}")
        raise _search_error(e)


# ============================================================================
# Queue conversion
# ============================================================================


@router.post("/travel/queue-item", response_model=QueueItem)
def flight_queue_item(request: FlightQueueRequest) -> QueueItem:
    return service.flight_to_queue_item(request.flight)


@router.post("/hotel/queue-item", response_model=QueueItem)
def hotel_queue_item(request: HotelQueueRequest) -> QueueItem:
    return service.hotel_to_queue_item(
        request.name, request.check_in, request.check_out, request.nightly_rate
    )


@router.post("/activity/queue-item", response_model=QueueItem)
def activity_queue_item(request: ActivityQueueRequest) -> QueueItem:
    return service.activity_to_queue_item(
        request.name, request.date, request.description, request.price
    )
