"""
Advice session state machine.

One session per board: ``idle -> loading -> ready | failed``. Every
transition replaces an immutable AdviceSessionState snapshot. Rounds are
tagged with the epoch current when they started; ``close()`` bumps the
epoch, so a reply that arrives after the view was closed is discarded
instead of leaking into the next session.
"""

import logging
from typing import Awaitable, Callable, List, Literal, Optional, Sequence

from pydantic import BaseModel, Field

from itinerary_advisor.itinerary.schemas import ItineraryItem
from itinerary_advisor.shared.contracts.advice_output import AdviceResult
from itinerary_advisor.shared.errors import (
    AdviceFailure,
    AdvisorError,
    GenerationError,
    SessionBusyError,
)
from itinerary_advisor.shared.logging.config import log_state_transition


logger = logging.getLogger(__name__)


SessionStatus = Literal["idle", "loading", "ready", "failed"]
AdviceRunner = Callable[[Sequence[ItineraryItem]], Awaitable[AdviceResult]]

ORIGINAL_INDEX = -1


class AdviceSessionState(BaseModel):
    """Immutable snapshot of an advice session."""

    status: SessionStatus = "idle"
    epoch: int = 0
    result: Optional[AdviceResult] = None
    failure: Optional[AdviceFailure] = None
    selected_index: Optional[int] = Field(
        default=None, description="-1 for the original, 0..n-1 for alternatives"
    )

    model_config = {"frozen": True}


class AdviceSession:
    """Tracks one board's advisory rounds and the highlighted itinerary."""

    def __init__(self, session_id: str = "unknown"):
        self.session_id = session_id
        self._state = AdviceSessionState()

    @property
    def state(self) -> AdviceSessionState:
        return self._state

    def _transition(self, event: str, **changes) -> None:
        self._state = self._state.model_copy(update=changes)
        log_state_transition(
            event,
            self._state.model_dump(mode="json"),
            self.session_id,
        )

    def open(self) -> Optional[int]:
        """
        Open the advisory view.

        Starts a round only when nothing is cached and no error is shown.

        Returns:
            Epoch token of the started round, or None if none was started
        """
        state = self._state
        if state.status == "idle" and state.result is None and state.failure is None:
            return self.begin_round()
        return None

    def begin_round(self) -> int:
        """
        Move to loading for a new round (first open or user retry).

        Returns:
            Epoch token the round's outcome must present

        Raises:
            SessionBusyError: If a round is already loading
        """
        if self._state.status == "loading":
            raise SessionBusyError("An advisory round is already in progress")
        self._transition(
            "round_started",
            status="loading",
            result=None,
            failure=None,
            selected_index=None,
        )
        return self._state.epoch

    def _is_current(self, epoch: int) -> bool:
        if epoch != self._state.epoch or self._state.status != "loading":
            logger.info(
                f"[session={self.session_id}] Discarding stale round outcome | "
                f"round_epoch={epoch}, current_epoch={self._state.epoch}, "
                f"status={self._state.status}"
            )
            return False
        return True

    def resolve(self, epoch: int, result: AdviceResult) -> bool:
        """Store a round's result. Returns False if the round is stale."""
        if not self._is_current(epoch):
            return False
        self._transition("round_resolved", status="ready", result=result)
        return True

    def reject(self, epoch: int, error: AdvisorError) -> bool:
        """Store a round's failure. Returns False if the round is stale."""
        if not self._is_current(epoch):
            return False
        self._transition("round_failed", status="failed", failure=error.to_failure())
        return True

    def close(self) -> None:
        """Reset to idle, discarding any result and any in-flight round."""
        self._transition(
            "session_closed",
            status="idle",
            epoch=self._state.epoch + 1,
            result=None,
            failure=None,
            selected_index=None,
        )

    def select(self, index: int) -> List[ItineraryItem]:
        """
        Highlight an itinerary.

        Args:
            index: -1 for the original itinerary, 0..n-1 for an alternative

        Returns:
            Items of the highlighted itinerary

        Raises:
            SessionBusyError: If no result is available
            IndexError: If the index does not name an itinerary
        """
        result = self._state.result
        if self._state.status != "ready" or result is None:
            raise SessionBusyError("No advice is available to select from")

        items = self._items_at(result, index)
        self._transition("itinerary_selected", selected_index=index)
        return items

    def selected_items(self) -> Optional[List[ItineraryItem]]:
        """Items of the highlighted itinerary, or None when nothing is highlighted."""
        state = self._state
        if state.result is None or state.selected_index is None:
            return None
        return self._items_at(state.result, state.selected_index)

    @staticmethod
    def _items_at(result: AdviceResult, index: int) -> List[ItineraryItem]:
        if index == ORIGINAL_INDEX:
            return list(result.original_itinerary)
        if not 0 <= index < len(result.alternative_itineraries):
            raise IndexError(f"No itinerary at index {index}")
        return list(result.alternative_itineraries[index].items)

    async def run_round(
        self,
        epoch: int,
        agenda: Sequence[ItineraryItem],
        runner: AdviceRunner,
    ) -> bool:
        """
        Run a started round and apply its outcome if still current.

        Args:
            epoch: Token returned by ``open`` or ``begin_round``
            agenda: Agenda to advise on
            runner: Coroutine function producing the AdviceResult

        Returns:
            True if the outcome was applied, False if it was stale
        """
        try:
            result = await runner(agenda)
        except AdvisorError as e:
            return self.reject(epoch, e)
        except Exception as e:
            logger.exception(f"[session={self.session_id}] Advisory round crashed")
            return self.reject(epoch, GenerationError("internal", f"{type(e).__name__}: {e}"))
        return self.resolve(epoch, result)
