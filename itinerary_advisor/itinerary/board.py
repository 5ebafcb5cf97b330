"""
In-memory trip board.

A board bundles the agenda, the queue of search results and the advice
session. Nothing is persisted; boards live as long as the process.
"""

import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from itinerary_advisor.advisor.session import AdviceSession
from itinerary_advisor.itinerary.mock_data import SAMPLE_TITLE, sample_agenda
from itinerary_advisor.itinerary.schemas import ItineraryItem, QueueItem


@dataclass
class Board:
    """One user's planning board."""

    board_id: str
    title: str
    agenda: List[ItineraryItem] = field(default_factory=list)
    queue: List[QueueItem] = field(default_factory=list)
    advice: AdviceSession = field(default_factory=AdviceSession)

    def __post_init__(self):
        self.advice.session_id = self.board_id


def create_board(
    title: Optional[str] = None,
    agenda: Optional[List[ItineraryItem]] = None,
) -> Board:
    """Create a board, seeded with the sample agenda unless one is given."""
    return Board(
        board_id=str(uuid.uuid4()),
        title=title or SAMPLE_TITLE,
        agenda=list(agenda) if agenda is not None else sample_agenda(),
    )
