"""Prompt templates and builders for the itinerary advisor."""

from itinerary_advisor.advisor.prompts.templates import (
    AdvisorPromptConfig,
    ITEM_LINE_FORMAT,
)
from itinerary_advisor.advisor.prompts.builders import (
    build_advice_prompts,
    build_data_text,
    build_instruction_text,
    split_pinned,
)

__all__ = [
    "AdvisorPromptConfig",
    "ITEM_LINE_FORMAT",
    "build_advice_prompts",
    "build_data_text",
    "build_instruction_text",
    "split_pinned",
]
