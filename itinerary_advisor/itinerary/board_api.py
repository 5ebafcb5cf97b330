"""
FastAPI endpoints for the trip board.

Provides REST API for creating boards and editing their agenda and queue.
"""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from itinerary_advisor.itinerary import agenda as ops
from itinerary_advisor.itinerary.board import Board, create_board
from itinerary_advisor.itinerary.schemas import ItemKind, ItineraryItem, QueueItem
from itinerary_advisor.shared.errors import ItemNotFoundError, PinnedItemError


logger = logging.getLogger(__name__)

# Create router for board routes
router = APIRouter(prefix="/api/board", tags=["board"])

# In-memory board storage (boards are not persisted)
_boards: Dict[str, Board] = {}


# ============================================================================
# Request/Response Models
# ============================================================================


class CreateBoardRequest(BaseModel):
    title: Optional[str] = None
    agenda: Optional[List[ItineraryItem]] = Field(
        default=None, description="Initial agenda; the sample trip when omitted"
    )


class AddCardRequest(BaseModel):
    kind: ItemKind


class ReorderRequest(BaseModel):
    from_index: int = Field(ge=0)
    to_index: int = Field(ge=0)


class MoveQueueItemRequest(BaseModel):
    index: Optional[int] = Field(default=None, ge=0, description="Agenda position")


class BoardResponse(BaseModel):
    board_id: str
    title: str
    agenda: List[ItineraryItem]
    queue: List[QueueItem]


def get_board(board_id: str) -> Board:
    """Look up a board or answer 404."""
    board = _boards.get(board_id)
    if board is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Board {board_id} not found",
        )
    return board


def _response(board: Board) -> BoardResponse:
    return BoardResponse(
        board_id=board.board_id,
        title=board.title,
        agenda=board.agenda,
        queue=board.queue,
    )


def _edit_error(error: Exception) -> HTTPException:
    if isinstance(error, ItemNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.args[0])
    if isinstance(error, PinnedItemError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


# ============================================================================
# Endpoints
# ============================================================================


@router.post("", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
async def create(request: CreateBoardRequest) -> BoardResponse:
    """Create a board, seeded with the sample trip unless an agenda is given."""
    board = create_board(title=request.title, agenda=request.agenda)
    _boards[board.board_id] = board
    logger.info(
        f"[board={board.board_id}] [api=create] Board created | items={len(board.agenda)}"
    )
    return _response(board)


@router.get("/{board_id}", response_model=BoardResponse)
async def read(board_id: str) -> BoardResponse:
    return _response(get_board(board_id))


@router.post("/{board_id}/items", response_model=BoardResponse)
async def add_item(board_id: str, request: AddCardRequest) -> BoardResponse:
    """Append a blank card of the requested kind."""
    board = get_board(board_id)
    board.agenda = ops.add_card(board.agenda, request.kind)
    return _response(board)


@router.delete("/{board_id}/items/{item_id}", response_model=BoardResponse)
async def delete_item(board_id: str, item_id: str) -> BoardResponse:
    board = get_board(board_id)
    try:
        board.agenda = ops.remove_item(board.agenda, item_id)
    except (ItemNotFoundError, PinnedItemError) as e:
        raise _edit_error(e)
    return _response(board)


@router.post("/{board_id}/items/{item_id}/pin", response_model=BoardResponse)
async def pin_item(board_id: str, item_id: str) -> BoardResponse:
    """Toggle the pinned flag of an agenda item."""
    board = get_board(board_id)
    try:
        board.agenda = ops.toggle_pin(board.agenda, item_id)
    except ItemNotFoundError as e:
        raise _edit_error(e)
    return _response(board)


@router.post("/{board_id}/items/reorder", response_model=BoardResponse)
async def reorder(board_id: str, request: ReorderRequest) -> BoardResponse:
    board = get_board(board_id)
    try:
        board.agenda = ops.reorder_item(board.agenda, request.from_index, request.to_index)
    except (IndexError, PinnedItemError) as e:
        raise _edit_error(e)
    return _response(board)


@router.post("/{board_id}/queue", response_model=BoardResponse)
async def queue_item(board_id: str, item: QueueItem) -> BoardResponse:
    """Add a search result to the queue."""
    board = get_board(board_id)
    board.queue = ops.add_to_queue(board.queue, item)
    return _response(board)


@router.delete("/{board_id}/queue/{item_id}", response_model=BoardResponse)
async def unqueue_item(board_id: str, item_id: str) -> BoardResponse:
    board = get_board(board_id)
    try:
        board.queue = ops.remove_from_queue(board.queue, item_id)
    except ItemNotFoundError as e:
        raise _edit_error(e)
    return _response(board)


@router.post("/{board_id}/queue/{item_id}/move", response_model=BoardResponse)
async def move_queue_item(
    board_id: str,
    item_id: str,
    request: MoveQueueItemRequest,
) -> BoardResponse:
    """Drop a queued item onto the agenda."""
    board = get_board(board_id)
    try:
        board.queue, board.agenda = ops.move_queue_item_to_agenda(
            board.queue, board.agenda, item_id, request.index
        )
    except ItemNotFoundError as e:
        raise _edit_error(e)
    return _response(board)
