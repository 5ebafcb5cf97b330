"""
Itinerary data model and board operations.

This package contains:
- schemas: item kinds, detail records, agenda/queue/candidate items
- agenda: pure agenda and queue operations, including apply_selection
- board: in-memory board holding agenda, queue and advice session
- board_api: FastAPI routes for board editing
"""

from itinerary_advisor.itinerary.schemas import ItemKind, ItineraryItem, QueueItem
from itinerary_advisor.itinerary.agenda import apply_selection

__all__ = ["ItemKind", "ItineraryItem", "QueueItem", "apply_selection"]
