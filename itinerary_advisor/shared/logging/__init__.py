"""Logging configuration and utilities."""

from itinerary_advisor.shared.logging.config import (
    setup_logging,
    log_state_transition,
    summarize_snapshot,
    SessionEventFormatter,
)
from itinerary_advisor.shared.logging.debug_logger import (
    DebugLogger,
    get_or_create_logger,
    remove_logger,
    calculate_cost,
)

__all__ = [
    "setup_logging",
    "log_state_transition",
    "summarize_snapshot",
    "SessionEventFormatter",
    "DebugLogger",
    "get_or_create_logger",
    "remove_logger",
    "calculate_cost",
]
