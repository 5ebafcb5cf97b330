"""
Unit tests for the advisor prompt builders.
"""

from itinerary_advisor.advisor.prompts.builders import (
    build_advice_prompts,
    build_data_text,
    format_item_block,
    split_pinned,
)
from itinerary_advisor.advisor.prompts.templates import ITEM_LINE_FORMAT, AdvisorPromptConfig
from itinerary_advisor.itinerary.mock_data import sample_agenda
from itinerary_advisor.itinerary.schemas import ItemKind, ItineraryItem


class TestSplitPinned:
    """Tests for split_pinned."""

    def test_keeps_relative_order(self):
        pinned, unpinned = split_pinned(sample_agenda())

        assert [i.title for i in pinned] == [
            "Arrival Flight SF > Paris",
            "Le Grand Hotel Paris",
            "Departure Flight Paris > SF",
        ]
        assert [i.title for i in unpinned] == ["Louvre Museum Tour", "Seine River Cruise"]


class TestFormatItemBlock:
    """Tests for format_item_block."""

    def test_renders_title_kind_time_description_price(self):
        item = sample_agenda()[2]

        assert format_item_block(item) == (
            "Louvre Museum Tour (activity) at 14:00\n"
            "Guided tour of the world's largest art museum\n"
            "Price: $79"
        )

    def test_missing_price_is_tbd(self):
        item = ItineraryItem(title="Picnic", kind=ItemKind.ACTIVITY, time="15:00")
        assert format_item_block(item).endswith("Price: TBD")


class TestBuildAdvicePrompts:
    """Tests for build_advice_prompts."""

    def test_deterministic(self):
        agenda = sample_agenda()
        assert build_advice_prompts(agenda) == build_advice_prompts(agenda)

    def test_instruction_text_carries_the_rules(self):
        instruction, _ = build_advice_prompts(sample_agenda())

        assert "two DISTINCTLY DIFFERENT alternative itineraries" in instruction
        assert "at least 2 hours before any departure flight" in instruction
        assert ITEM_LINE_FORMAT in instruction
        assert "ALTERNATIVE 1:" in instruction
        assert "ALTERNATIVE 2:" in instruction
        assert "ALTERNATIVE 3:" not in instruction

    def test_data_text_sections(self):
        _, data = build_advice_prompts(sample_agenda())

        pinned_section, flexible_section = data.split("FLEXIBLE ITEMS")
        assert "Arrival Flight SF > Paris (travel) at 10:00" in pinned_section
        assert "Louvre Museum Tour" not in pinned_section
        assert "Louvre Museum Tour (activity) at 14:00" in flexible_section
        assert "Seine River Cruise (activity) at 19:00" in flexible_section

    def test_empty_sections(self):
        data = build_data_text([], [])
        assert data.count("(none)") == 2

    def test_alternatives_count_is_configurable(self):
        instruction, data = build_advice_prompts(
            sample_agenda(), AdvisorPromptConfig(alternatives_count=3, departure_buffer_hours=3)
        )

        assert "three DISTINCTLY DIFFERENT" in instruction
        assert "ALTERNATIVE 3:" in instruction
        assert "at least 3 hours before any departure flight" in instruction
        assert "Please provide three alternative itineraries" in data
