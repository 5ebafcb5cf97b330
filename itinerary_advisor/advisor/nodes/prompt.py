"""
Prompt node for the advisor graph.

Renders the submitted agenda into instruction and data text.
"""

import logging
from typing import Any, Dict

from langchain_core.runnables import RunnableConfig

from itinerary_advisor.advisor.nodes.context import advisor_config, log_prefix
from itinerary_advisor.advisor.prompts.builders import build_advice_prompts
from itinerary_advisor.advisor.schemas import AdvisorState
from itinerary_advisor.itinerary.schemas import ItineraryItem


logger = logging.getLogger(__name__)


def prompt_node(state: AdvisorState, config: RunnableConfig) -> Dict[str, Any]:
    """
    Build the prompts for the advice request.

    Args:
        state: Current advisor state with the agenda
        config: LangGraph run config

    Returns:
        Dictionary with instruction_text and data_text
    """
    _log = log_prefix(state, "prompt")
    settings = advisor_config(config)

    agenda = [ItineraryItem.model_validate(item) for item in state["agenda"]]
    pinned = sum(1 for item in agenda if item.pinned)
    logger.info(f"{_log}Entering node | items={len(agenda)}, pinned={pinned}")

    instruction_text, data_text = build_advice_prompts(agenda, settings.prompt_config())

    return {
        "instruction_text": instruction_text,
        "data_text": data_text,
        "messages": [
            {
                "role": "system",
                "agent": "advisor",
                "content": f"Prompt built for {len(agenda)} items ({pinned} pinned)",
            }
        ],
    }
