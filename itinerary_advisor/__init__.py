"""
Itinerary advisor application.

This package contains:
- shared/: Common infrastructure (LLM client, logging, contracts, errors, time normalizer)
- itinerary/: Item schemas, agenda/queue operations and the in-memory trip board
- advisor/: Advice pipeline (prompt -> generation -> parsing -> reconciliation) and session
- search/: Flight, hotel and activity search collaborators
"""

from itinerary_advisor.advisor.graph.build import create_advisor_graph
from itinerary_advisor.advisor.service import request_advice

__all__ = ["create_advisor_graph", "request_advice"]
