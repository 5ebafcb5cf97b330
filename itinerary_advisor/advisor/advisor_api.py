"""
FastAPI endpoints for the itinerary advisor.

Provides a stateless advice endpoint plus per-board session endpoints
that mirror the advisory view: open, retry, close, select and apply.
"""

import logging

from fastapi import APIRouter, BackgroundTasks, HTTPException, status

from itinerary_advisor.advisor.schemas import (
    AdviceRequest,
    AdviceSessionResponse,
    ApplyResponse,
    SelectRequest,
)
from itinerary_advisor.advisor.service import arequest_advice
from itinerary_advisor.itinerary.agenda import apply_selection
from itinerary_advisor.itinerary.board import Board
from itinerary_advisor.itinerary.board_api import get_board
from itinerary_advisor.shared.contracts.advice_output import AdviceResult
from itinerary_advisor.shared.errors import AdvisorError, SessionBusyError
from itinerary_advisor.shared.logging.debug_logger import remove_logger


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/advisor", tags=["advisor"])


_FAILURE_STATUS = {
    "configuration": status.HTTP_503_SERVICE_UNAVAILABLE,
    "generation": status.HTTP_502_BAD_GATEWAY,
    "parse": status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def _session_response(board: Board) -> AdviceSessionResponse:
    state = board.advice.state
    return AdviceSessionResponse(
        board_id=board.board_id,
        status=state.status,
        epoch=state.epoch,
        result=state.result,
        failure=state.failure,
        selected_index=state.selected_index,
    )


async def _run_round(board: Board, epoch: int) -> None:
    """Background task: run the round on a snapshot of the agenda."""
    agenda = list(board.agenda)

    async def runner(items):
        return await arequest_advice(items, session_id=board.board_id)

    applied = await board.advice.run_round(epoch, agenda, runner)
    logger.info(
        f"[board={board.board_id}] [graph=advisor] [api=round] Round finished | "
        f"epoch={epoch}, applied={applied}, status={board.advice.state.status}"
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/advice", response_model=AdviceResult)
async def advice(request: AdviceRequest) -> AdviceResult:
    """Run one advisory round for the given agenda and return the result."""
    try:
        return await arequest_advice(request.agenda)
    except AdvisorError as e:
        failure = e.to_failure()
        logger.error(f"[graph=advisor] [api=advice] Round failed | {failure.message}")
        raise HTTPException(
            status_code=_FAILURE_STATUS[failure.kind],
            detail=failure.model_dump(),
        )


@router.get("/{board_id}/state", response_model=AdviceSessionResponse)
async def read_state(board_id: str) -> AdviceSessionResponse:
    return _session_response(get_board(board_id))


@router.post("/{board_id}/open", response_model=AdviceSessionResponse)
async def open_view(board_id: str, background_tasks: BackgroundTasks) -> AdviceSessionResponse:
    """Open the advisory view; starts a round unless a result or error is shown."""
    board = get_board(board_id)
    epoch = board.advice.open()
    if epoch is not None:
        background_tasks.add_task(_run_round, board, epoch)
    return _session_response(board)


@router.post("/{board_id}/retry", response_model=AdviceSessionResponse)
async def retry(board_id: str, background_tasks: BackgroundTasks) -> AdviceSessionResponse:
    """Re-run the whole pipeline from the prompt stage."""
    board = get_board(board_id)
    try:
        epoch = board.advice.begin_round()
    except SessionBusyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    background_tasks.add_task(_run_round, board, epoch)
    return _session_response(board)


@router.post("/{board_id}/close", response_model=AdviceSessionResponse)
async def close_view(board_id: str) -> AdviceSessionResponse:
    board = get_board(board_id)
    board.advice.close()
    remove_logger(board_id)
    return _session_response(board)


@router.post("/{board_id}/select", response_model=AdviceSessionResponse)
async def select(board_id: str, request: SelectRequest) -> AdviceSessionResponse:
    """Highlight the original (-1) or an alternative itinerary."""
    board = get_board(board_id)
    try:
        board.advice.select(request.index)
    except SessionBusyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except IndexError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _session_response(board)


@router.post("/{board_id}/apply", response_model=ApplyResponse)
async def apply(board_id: str) -> ApplyResponse:
    """Replace the agenda with the highlighted itinerary and close the view."""
    board = get_board(board_id)
    chosen = board.advice.selected_items()
    if chosen is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Select an itinerary before applying it",
        )

    board.agenda = apply_selection(chosen)
    board.advice.close()

    return ApplyResponse(
        board_id=board.board_id,
        agenda=board.agenda,
        messages=[
            {
                "role": "system",
                "agent": "advisor",
                "content": f"Agenda replaced with {len(board.agenda)} items",
            }
        ],
    )
