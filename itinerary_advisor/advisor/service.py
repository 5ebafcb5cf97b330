"""
Presentation boundary for the itinerary advisor.

``request_advice`` / ``arequest_advice`` run one advisory round over an
agenda and return the reconciled AdviceResult, or raise an AdvisorError.
"""

import logging
import uuid
from typing import Any, Dict, Optional, Sequence

from langchain_core.runnables import RunnableConfig

from itinerary_advisor.advisor.graph.build import create_advisor_graph
from itinerary_advisor.advisor.graph.config import AdvisorGraphConfig, DEFAULT_CONFIG
from itinerary_advisor.advisor.schemas import AdvisorState
from itinerary_advisor.itinerary.schemas import ItineraryItem, dump_items
from itinerary_advisor.shared.contracts.advice_output import AdviceResult


logger = logging.getLogger(__name__)

# Compiled graph instance (shared across rounds)
_graph = None


def get_graph():
    """Get or create the shared graph instance."""
    global _graph
    if _graph is None:
        _graph = create_advisor_graph()
    return _graph


def create_initial_state(
    agenda: Sequence[ItineraryItem],
    session_id: Optional[str] = None,
) -> AdvisorState:
    """Create the initial graph state for an agenda."""
    return {
        "agenda": dump_items(list(agenda)),
        "instruction_text": None,
        "data_text": None,
        "raw_response": None,
        "alternatives": None,
        "parse_warnings": [],
        "advice_output": None,
        "messages": [
            {
                "role": "system",
                "agent": "advisor",
                "content": f"Advisory round started for {len(agenda)} items",
            }
        ],
        "session_id": session_id or str(uuid.uuid4()),
    }


def _run_config(
    config: Optional[AdvisorGraphConfig],
    client: Optional[Any],
) -> RunnableConfig:
    settings = config or DEFAULT_CONFIG
    configurable: Dict[str, Any] = {"advisor_config": settings}
    if client is not None:
        configurable["llm_client"] = client
    return {"configurable": configurable, "recursion_limit": settings.recursion_limit}


def _to_result(final_state: Dict[str, Any]) -> AdviceResult:
    result = AdviceResult.model_validate(final_state["advice_output"])
    logger.info(
        f"[session={final_state.get('session_id')}] [graph=advisor] [api=request_advice] "
        f"Round finished | alternatives={len(result.alternative_itineraries)}, "
        f"dropped={len(final_state.get('parse_warnings', []))}"
    )
    return result


def request_advice(
    agenda: Sequence[ItineraryItem],
    client: Optional[Any] = None,
    config: Optional[AdvisorGraphConfig] = None,
    session_id: Optional[str] = None,
) -> AdviceResult:
    """
    Run one advisory round synchronously.

    Args:
        agenda: Current agenda
        client: Optional OpenAI client. If not provided, uses cached client.
        config: Optional advisor configuration
        session_id: Optional id used in logs and debug log file names

    Returns:
        AdviceResult with the bracketed original and reconciled alternatives

    Raises:
        ConfigurationError: If no credential is configured
        GenerationError: If the backend call failed
        ParseError: If the reply held no usable alternative
    """
    initial_state = create_initial_state(agenda, session_id)
    final_state = get_graph().invoke(initial_state, _run_config(config, client))
    return _to_result(final_state)


async def arequest_advice(
    agenda: Sequence[ItineraryItem],
    client: Optional[Any] = None,
    config: Optional[AdvisorGraphConfig] = None,
    session_id: Optional[str] = None,
) -> AdviceResult:
    """Async variant of ``request_advice``; the generation call is the only wait."""
    initial_state = create_initial_state(agenda, session_id)
    final_state = await get_graph().ainvoke(initial_state, _run_config(config, client))
    return _to_result(final_state)
