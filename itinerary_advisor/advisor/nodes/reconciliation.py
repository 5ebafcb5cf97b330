"""
Reconciliation node for the advisor graph.

Reconciles every parsed alternative against the submitted agenda and
assembles the AdviceResult contract.
"""

import logging
from typing import Any, Dict

from itinerary_advisor.advisor.nodes.context import log_prefix
from itinerary_advisor.advisor.reconciler import bracket_flights, reconcile
from itinerary_advisor.advisor.schemas import AdvisorState
from itinerary_advisor.itinerary.schemas import CandidateItinerary, ItineraryItem
from itinerary_advisor.shared.contracts.advice_output import (
    AdviceResult,
    AlternativeItinerary,
)


logger = logging.getLogger(__name__)


def reconciliation_node(state: AdvisorState) -> Dict[str, Any]:
    """
    Build the advice result.

    Args:
        state: Current advisor state with agenda and parsed alternatives

    Returns:
        Dictionary with advice_output
    """
    _log = log_prefix(state, "reconciliation")

    agenda = [ItineraryItem.model_validate(item) for item in state["agenda"]]
    candidates = [CandidateItinerary.model_validate(alt) for alt in state["alternatives"] or []]

    alternatives = [
        AlternativeItinerary(
            items=reconcile(candidate.items, agenda),
            explanation=candidate.explanation,
        )
        for candidate in candidates
    ]

    # Validate against contract
    result = AdviceResult(
        original_itinerary=bracket_flights(agenda),
        alternative_itineraries=alternatives,
    )

    logger.info(
        f"{_log}Reconciliation complete | alternatives={len(alternatives)}, "
        f"items={[len(alt.items) for alt in alternatives]}"
    )

    return {
        "advice_output": result.model_dump(mode="json"),
        "messages": [
            {
                "role": "system",
                "agent": "advisor",
                "content": f"Advice ready with {len(alternatives)} alternatives",
            }
        ],
    }
