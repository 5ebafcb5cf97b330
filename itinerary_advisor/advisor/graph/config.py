"""
Graph configuration for the itinerary advisor.

Centralizes all configuration options for the advice LangGraph workflow,
making it easy to tune behavior without modifying the graph wiring.
"""

from dataclasses import dataclass, field
from typing import Optional

from itinerary_advisor.advisor.prompts.templates import AdvisorPromptConfig
from itinerary_advisor.shared.llm.client import DEFAULT_MODEL, GenerationOptions


def _advisor_generation_options() -> GenerationOptions:
    return GenerationOptions(
        temperature=0.8,
        max_output_tokens=1000,
        presence_penalty=0.4,
        frequency_penalty=0.4,
    )


@dataclass
class AdvisorGraphConfig:
    """
    Configuration for the advisor graph.

    Attributes:
        recursion_limit: Maximum number of graph steps
        model: LLM model to use
        llm_timeout: Per-request timeout in seconds
        generation: Sampling options for the advice request
        alternatives_count: Alternatives the model is asked for
        departure_buffer_hours: Minimum gap before any departure flight
        enable_debug_log: Write per-session JSON Lines debug logs
        logs_dir: Directory for debug logs
    """

    # Graph execution limits
    recursion_limit: int = 10

    # LLM configuration
    model: str = DEFAULT_MODEL
    llm_timeout: int = 60  # seconds
    generation: GenerationOptions = field(default_factory=_advisor_generation_options)

    # Business rules rendered into the prompt
    alternatives_count: int = 2
    departure_buffer_hours: int = 2

    # Debugging
    enable_debug_log: bool = False
    logs_dir: str = "logs"

    def prompt_config(self) -> AdvisorPromptConfig:
        return AdvisorPromptConfig(
            alternatives_count=self.alternatives_count,
            departure_buffer_hours=self.departure_buffer_hours,
        )


# Default configuration instance
DEFAULT_CONFIG = AdvisorGraphConfig()


def get_config(
    model: Optional[str] = None,
    llm_timeout: Optional[int] = None,
    generation: Optional[GenerationOptions] = None,
    alternatives_count: Optional[int] = None,
    departure_buffer_hours: Optional[int] = None,
    enable_debug_log: Optional[bool] = None,
    logs_dir: Optional[str] = None,
) -> AdvisorGraphConfig:
    """
    Create a configuration with optional overrides.

    Args:
        model: Override for LLM model
        llm_timeout: Override for request timeout
        generation: Override for sampling options
        alternatives_count: Override for number of alternatives
        departure_buffer_hours: Override for departure buffer
        enable_debug_log: Override for debug logging flag
        logs_dir: Override for debug log directory

    Returns:
        AdvisorGraphConfig with specified overrides applied
    """
    return AdvisorGraphConfig(
        model=model or DEFAULT_CONFIG.model,
        llm_timeout=llm_timeout or DEFAULT_CONFIG.llm_timeout,
        generation=generation or _advisor_generation_options(),
        alternatives_count=alternatives_count or DEFAULT_CONFIG.alternatives_count,
        departure_buffer_hours=departure_buffer_hours
        if departure_buffer_hours is not None
        else DEFAULT_CONFIG.departure_buffer_hours,
        enable_debug_log=enable_debug_log
        if enable_debug_log is not None
        else DEFAULT_CONFIG.enable_debug_log,
        logs_dir=logs_dir or DEFAULT_CONFIG.logs_dir,
    )
