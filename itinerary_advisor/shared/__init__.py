"""
Shared infrastructure for the advisor, the board and the search collaborators.

Modules:
- llm: OpenAI client with retry logic
- logging: Structured JSON logging and per-session debug logs
- contracts: Advisor output contract
- errors: Round-level error taxonomy
- time_normalizer: Canonical 24-hour times
"""

from itinerary_advisor.shared.llm.client import get_cached_client, generate
from itinerary_advisor.shared.logging.config import setup_logging, log_state_transition

__all__ = [
    "get_cached_client",
    "generate",
    "setup_logging",
    "log_state_transition",
]
