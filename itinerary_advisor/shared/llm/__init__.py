"""LLM client utilities."""

from itinerary_advisor.shared.llm.client import (
    GenerationOptions,
    generate,
    generate_with_usage,
    get_cached_client,
)

__all__ = ["GenerationOptions", "generate", "generate_with_usage", "get_cached_client"]
