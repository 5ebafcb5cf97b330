"""
Itinerary advisor.

Serializes the agenda into a prompt, asks the model for alternative
itineraries, parses and reconciles the reply against the pinned items
and hands the result to the board, where a chosen alternative replaces
the agenda.
"""

from itinerary_advisor.advisor.graph.build import create_advisor_graph
from itinerary_advisor.advisor.service import arequest_advice, request_advice

__all__ = ["create_advisor_graph", "arequest_advice", "request_advice"]
