"""
Schemas for the itinerary advisor.

Defines the LangGraph state schema and the API request/response models.
"""

import operator
from typing import Annotated, Any, Dict, List, Optional, TypedDict

from pydantic import BaseModel, Field

from itinerary_advisor.itinerary.schemas import ItineraryItem
from itinerary_advisor.shared.contracts.advice_output import AdviceResult
from itinerary_advisor.shared.errors import AdviceFailure


# =============================================================================
# LangGraph State Schema
# =============================================================================


class AdvisorState(TypedDict):
    """
    State schema for the advisor graph.

    Items travel through the graph as plain dicts; they are validated
    into models inside each node and against AdviceResult at the end.
    """

    # Input
    agenda: List[dict]

    # Prompt stage
    instruction_text: Optional[str]
    data_text: Optional[str]

    # Generation stage
    raw_response: Optional[str]

    # Parsing stage
    alternatives: Optional[List[dict]]
    parse_warnings: Annotated[List[dict], operator.add]

    # Reconciliation stage
    advice_output: Optional[dict]

    # Messages for tracking pipeline progress
    messages: Annotated[List[dict], operator.add]

    # Debug/tracking
    session_id: Optional[str]


# =============================================================================
# API Models
# =============================================================================


class AdviceRequest(BaseModel):
    """Request a stateless advisory round for an agenda."""

    agenda: List[ItineraryItem] = Field(description="Current agenda")


class SelectRequest(BaseModel):
    """Highlight an itinerary: -1 for the original, 0..n-1 for alternatives."""

    index: int = Field(ge=-1)


class AdviceSessionResponse(BaseModel):
    """Snapshot of a board's advice session."""

    board_id: str
    status: str
    epoch: int
    result: Optional[AdviceResult] = None
    failure: Optional[AdviceFailure] = None
    selected_index: Optional[int] = None


class ApplyResponse(BaseModel):
    """The agenda after applying the highlighted itinerary."""

    board_id: str
    agenda: List[ItineraryItem]
    messages: List[Dict[str, Any]] = Field(default_factory=list)
