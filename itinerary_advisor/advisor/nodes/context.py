"""
Run-config helpers shared by the advisor nodes.

The advisor configuration and an optional LLM client travel in the
LangGraph run config under ``configurable`` rather than in the state.
"""

from typing import Any, Optional

from langchain_core.runnables import RunnableConfig

from itinerary_advisor.advisor.graph.config import AdvisorGraphConfig, DEFAULT_CONFIG


def advisor_config(config: Optional[RunnableConfig]) -> AdvisorGraphConfig:
    configurable = (config or {}).get("configurable", {})
    return configurable.get("advisor_config") or DEFAULT_CONFIG


def llm_client(config: Optional[RunnableConfig]) -> Optional[Any]:
    configurable = (config or {}).get("configurable", {})
    return configurable.get("llm_client")


def log_prefix(state: dict, node: str) -> str:
    session_id = state.get("session_id") or "unknown"
    return f"[session={session_id}] [graph=advisor] [node={node}] "
