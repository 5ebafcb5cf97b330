"""
Parsing node for the advisor graph.

Turns the raw reply into candidate itineraries. Dropped lines are kept
in state as warnings; only a reply without any usable alternative fails.
"""

import logging
from typing import Any, Dict

from langchain_core.runnables import RunnableConfig

from itinerary_advisor.advisor.nodes.context import advisor_config, log_prefix
from itinerary_advisor.advisor.response_parser import parse_advice_response
from itinerary_advisor.advisor.schemas import AdvisorState
from itinerary_advisor.shared.errors import ParseError
from itinerary_advisor.shared.logging.debug_logger import get_or_create_logger


logger = logging.getLogger(__name__)


def parsing_node(state: AdvisorState, config: RunnableConfig) -> Dict[str, Any]:
    """
    Parse the model reply.

    Args:
        state: Current advisor state with raw_response
        config: LangGraph run config

    Returns:
        Dictionary with alternatives and parse_warnings

    Raises:
        ParseError: If no alternative could be salvaged
    """
    _log = log_prefix(state, "parsing")
    settings = advisor_config(config)

    try:
        parsed = parse_advice_response(state["raw_response"])
    except ParseError as e:
        logger.error(f"{_log}Parse error: {e}")
        raise

    warnings = [warning.model_dump() for warning in parsed.warnings]
    logger.info(
        f"{_log}Node finished | alternatives={len(parsed.alternatives)}, "
        f"dropped={len(warnings)}"
    )

    session_id = state.get("session_id")
    if settings.enable_debug_log and session_id:
        get_or_create_logger(session_id, settings.logs_dir).log_parse_warnings(warnings)

    return {
        "alternatives": [alt.model_dump(mode="json") for alt in parsed.alternatives],
        "parse_warnings": warnings,
        "messages": [
            {
                "role": "system",
                "agent": "advisor",
                "content": (
                    f"Parsed {len(parsed.alternatives)} alternatives, "
                    f"dropped {len(warnings)} malformed lines or blocks"
                ),
            }
        ],
    }
