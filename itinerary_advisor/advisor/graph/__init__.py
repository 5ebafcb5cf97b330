"""Graph construction and configuration for the itinerary advisor."""

from itinerary_advisor.advisor.graph.build import create_advisor_graph
from itinerary_advisor.advisor.graph.config import AdvisorGraphConfig, DEFAULT_CONFIG, get_config

__all__ = ["create_advisor_graph", "AdvisorGraphConfig", "DEFAULT_CONFIG", "get_config"]
