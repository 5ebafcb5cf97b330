"""
Generation node for the advisor graph.

Sends the prompts to the chat completion backend and stores the raw reply.
"""

import logging
import time
from typing import Any, Dict

from langchain_core.runnables import RunnableConfig

from itinerary_advisor.advisor.nodes.context import advisor_config, llm_client, log_prefix
from itinerary_advisor.advisor.schemas import AdvisorState
from itinerary_advisor.shared.errors import GenerationError
from itinerary_advisor.shared.llm.client import generate_with_usage
from itinerary_advisor.shared.logging.debug_logger import get_or_create_logger


logger = logging.getLogger(__name__)


def generation_node(state: AdvisorState, config: RunnableConfig) -> Dict[str, Any]:
    """
    Call the LLM for alternative itineraries.

    Args:
        state: Current advisor state with the prompts
        config: LangGraph run config

    Returns:
        Dictionary with raw_response

    Raises:
        GenerationError: If the backend call fails or returns no text
    """
    _log = log_prefix(state, "generation")
    settings = advisor_config(config)

    logger.info(
        f"{_log}Calling LLM | model={settings.model}, "
        f"temperature={settings.generation.temperature}, "
        f"max_tokens={settings.generation.max_output_tokens}"
    )

    start_time = time.perf_counter()
    try:
        raw_response, usage = generate_with_usage(
            state["instruction_text"],
            state["data_text"],
            options=settings.generation,
            model=settings.model,
            client=llm_client(config),
            timeout=settings.llm_timeout,
        )
    except GenerationError as e:
        logger.error(f"{_log}Generation failed | reason={e.reason}, detail={e.detail}")
        raise
    duration_ms = (time.perf_counter() - start_time) * 1000

    logger.info(
        f"{_log}LLM responded | duration={duration_ms:.0f}ms, "
        f"tokens_in={usage['input_tokens']}, tokens_out={usage['output_tokens']}"
    )

    session_id = state.get("session_id")
    if settings.enable_debug_log and session_id:
        trace = get_or_create_logger(session_id, settings.logs_dir)
        trace.log_llm_call(
            instruction_text=state["instruction_text"],
            data_text=state["data_text"],
            response=raw_response,
            duration_ms=duration_ms,
            input_tokens=usage["input_tokens"],
            output_tokens=usage["output_tokens"],
            model=settings.model,
        )
        logger.debug(f"{_log}Board spend so far | {trace.totals()}")

    return {
        "raw_response": raw_response,
        "messages": [
            {
                "role": "system",
                "agent": "advisor",
                "content": f"Model replied in {duration_ms:.0f}ms",
            }
        ],
    }
