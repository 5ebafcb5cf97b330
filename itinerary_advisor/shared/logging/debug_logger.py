"""
Per-board trace of advisory rounds.

When ``enable_debug_log`` is set, every model call and every batch of
dropped reply lines is appended to ``<logs_dir>/<session_id>.jsonl``.
Each record is one JSON object with a ``type`` of ``llm_call`` or
``parse_warnings``.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Tuple


# USD per 1M tokens as (input, output)
MODEL_COSTS: Dict[str, Tuple[float, float]] = {
    "gpt-4.1-mini": (0.40, 1.60),
    "gpt-4o-mini": (0.15, 0.60),
    "gpt-3.5-turbo-1106": (1.00, 2.00),
}

_loggers: Dict[str, "DebugLogger"] = {}


def get_or_create_logger(session_id: str, logs_dir: str = "logs") -> "DebugLogger":
    """Return the board's trace, creating it on first use."""
    trace = _loggers.get(session_id)
    if trace is None:
        trace = _loggers[session_id] = DebugLogger(session_id, logs_dir)
    return trace


def remove_logger(session_id: str) -> None:
    """Forget the board's trace. The file on disk is kept."""
    _loggers.pop(session_id, None)


def calculate_cost(model: str, input_tokens: int, output_tokens: int) -> float:
    """Estimated USD cost of one call; models without a price cost nothing."""
    input_price, output_price = MODEL_COSTS.get(model, (0.0, 0.0))
    return (input_tokens * input_price + output_tokens * output_price) / 1_000_000


class DebugLogger:
    """
    Appends one board's advisory trace to a JSON Lines file.

    Running totals (calls, tokens, cost) are kept in memory so a caller
    can report what a board has spent so far without re-reading the file.
    """

    def __init__(self, session_id: str, logs_dir: str = "logs"):
        self.session_id = session_id
        self.log_file = Path(logs_dir) / f"{session_id}.jsonl"
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

        self.llm_calls = 0
        self.input_tokens = 0
        self.output_tokens = 0
        self.cost_usd = 0.0
        self.dropped_lines = 0

    def _write(self, record_type: str, **fields: Any) -> None:
        record = {
            "type": record_type,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "session_id": self.session_id,
            **fields,
        }
        with self.log_file.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")

    def log_llm_call(
        self,
        instruction_text: str,
        data_text: str,
        response: str,
        duration_ms: float,
        input_tokens: int,
        output_tokens: int,
        model: str,
    ) -> None:
        """Record the prompts, raw reply, latency and token spend of one call."""
        cost = calculate_cost(model, input_tokens, output_tokens)
        self.llm_calls += 1
        self.input_tokens += input_tokens
        self.output_tokens += output_tokens
        self.cost_usd += cost

        self._write(
            "llm_call",
            model=model,
            instruction_text=instruction_text,
            data_text=data_text,
            response=response,
            duration_ms=round(duration_ms, 2),
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            cost_usd=round(cost, 6),
        )

    def log_parse_warnings(self, warnings: List[Dict[str, Any]]) -> None:
        """Record the lines and blocks the parser dropped. No-op when empty."""
        if not warnings:
            return
        self.dropped_lines += len(warnings)
        self._write("parse_warnings", count=len(warnings), warnings=warnings)

    def totals(self) -> Dict[str, Any]:
        return {
            "llm_calls": self.llm_calls,
            "input_tokens": self.input_tokens,
            "output_tokens": self.output_tokens,
            "cost_usd": round(self.cost_usd, 6),
            "dropped_lines": self.dropped_lines,
        }
