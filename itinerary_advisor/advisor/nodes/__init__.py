"""LangGraph nodes for the itinerary advisor."""

from itinerary_advisor.advisor.nodes.prompt import prompt_node
from itinerary_advisor.advisor.nodes.generation import generation_node
from itinerary_advisor.advisor.nodes.parsing import parsing_node
from itinerary_advisor.advisor.nodes.reconciliation import reconciliation_node

__all__ = ["prompt_node", "generation_node", "parsing_node", "reconciliation_node"]
