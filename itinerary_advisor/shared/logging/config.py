"""
Structured logging for advice session events.

Session transitions go to the ``itinerary_advisor.sessions`` logger as
a single record whose ``session_event`` attribute carries a compact
summary of the new snapshot. ``SessionEventFormatter`` renders such
records as one JSON object per line; plain records pass through with
just the envelope fields.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional


SESSION_LOGGER = "itinerary_advisor.sessions"


class SessionEventFormatter(logging.Formatter):
    """JSON formatter: envelope fields plus ``event`` when present."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        session_event = getattr(record, "session_event", None)
        if session_event is not None:
            payload["event"] = session_event
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    logger_name: str = SESSION_LOGGER,
) -> logging.Logger:
    """
    Route session events through SessionEventFormatter.

    Replaces any handlers already attached to the logger and stops
    propagation, so events are not printed twice by the root handler.
    """
    session_logger = logging.getLogger(logger_name)
    session_logger.setLevel(level)
    session_logger.propagate = False

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = SessionEventFormatter()
    session_logger.handlers = []
    for handler in handlers:
        handler.setFormatter(formatter)
        session_logger.addHandler(handler)
    return session_logger


def summarize_snapshot(snapshot: Dict[str, Any]) -> Dict[str, Any]:
    """Pick the fields worth logging out of a dumped AdviceSessionState."""
    result = snapshot.get("result") or {}
    failure = snapshot.get("failure") or {}
    return {
        "status": snapshot.get("status"),
        "epoch": snapshot.get("epoch"),
        "selected_index": snapshot.get("selected_index"),
        "alternatives": len(result.get("alternative_itineraries", [])),
        "failure_reason": failure.get("reason"),
    }


def log_state_transition(
    event: str,
    snapshot: Dict[str, Any],
    session_id: str,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Log one advice session transition.

    Args:
        event: Transition name ("round_started", "round_resolved", ...)
        snapshot: The new session snapshot, dumped to a dict
        session_id: Board the session belongs to
        logger: Defaults to the session events logger
    """
    if logger is None:
        logger = logging.getLogger(SESSION_LOGGER)

    summary = summarize_snapshot(snapshot)
    logger.info(
        f"[session={session_id}] {event} -> {summary['status']}",
        extra={
            "session_event": {
                "name": event,
                "session_id": session_id,
                **summary,
            }
        },
    )
