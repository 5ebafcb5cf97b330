"""
Prompt builders for the itinerary advisor.

These functions render the current agenda into the instruction text
(system prompt) and data text (user prompt) sent to the model. They are
pure: identical input ordering always yields identical text.
"""

from typing import List, Optional, Sequence, Tuple

from itinerary_advisor.advisor.prompts.templates import (
    ADVISOR_USER_PROMPT_TEMPLATE,
    ITEM_BLOCK_TEMPLATE,
    AdvisorPromptConfig,
)
from itinerary_advisor.itinerary.schemas import PLACEHOLDER_PRICE, ItineraryItem


def split_pinned(
    items: Sequence[ItineraryItem],
) -> Tuple[List[ItineraryItem], List[ItineraryItem]]:
    """Split items into (pinned, unpinned), keeping their relative order."""
    pinned = [item for item in items if item.pinned]
    unpinned = [item for item in items if not item.pinned]
    return pinned, unpinned


def format_item_block(item: ItineraryItem) -> str:
    """Render one item as ``title (kind) at time`` + description + price."""
    return ITEM_BLOCK_TEMPLATE.format(
        title=item.title,
        kind=item.kind.value,
        time=item.time,
        description=item.description,
        price=item.details.price or PLACEHOLDER_PRICE,
    )


def format_item_blocks(items: Sequence[ItineraryItem]) -> str:
    if not items:
        return "(none)"
    return "\n\n".join(format_item_block(item) for item in items)


def build_instruction_text(config: Optional[AdvisorPromptConfig] = None) -> str:
    """
    Build the system prompt with the rules the model must follow.

    Args:
        config: Business rule settings. Uses AdvisorPromptConfig() if not provided.

    Returns:
        Complete system prompt string
    """
    if config is None:
        config = AdvisorPromptConfig()
    return config.format_system_prompt()


def build_data_text(
    pinned_items: Sequence[ItineraryItem],
    unpinned_items: Sequence[ItineraryItem],
    config: Optional[AdvisorPromptConfig] = None,
) -> str:
    """
    Build the user prompt listing fixed items and items not to reuse.

    Args:
        pinned_items: Items the model must reproduce verbatim
        unpinned_items: Items the model must not repeat
        config: Business rule settings. Uses AdvisorPromptConfig() if not provided.

    Returns:
        Complete user prompt string
    """
    if config is None:
        config = AdvisorPromptConfig()
    return ADVISOR_USER_PROMPT_TEMPLATE.format(
        pinned_items=format_item_blocks(pinned_items),
        flexible_items=format_item_blocks(unpinned_items),
        alternatives_word=config.alternatives_word,
    )


def build_advice_prompts(
    agenda: Sequence[ItineraryItem],
    config: Optional[AdvisorPromptConfig] = None,
) -> Tuple[str, str]:
    """
    Build (instruction_text, data_text) for an agenda.

    Args:
        agenda: Current agenda, pinned and flexible items mixed
        config: Business rule settings

    Returns:
        Tuple of (instruction text, data text)
    """
    pinned, unpinned = split_pinned(agenda)
    return build_instruction_text(config), build_data_text(pinned, unpinned, config)
