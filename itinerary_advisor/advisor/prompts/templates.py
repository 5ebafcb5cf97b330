"""
Typed prompt templates for the itinerary advisor.

Prompts are structured as Pydantic models for validation, testability,
and easier version management.
"""

from pydantic import BaseModel, Field


ITEM_LINE_FORMAT = "Title | Type | Time | Description | Price"


ADVISOR_SYSTEM_PROMPT_TEMPLATE = """You are a travel expert advisor. You will be shown an itinerary with some items marked as "pinned" (fixed) and others as flexible.

Your task is to generate {alternatives_word} DISTINCTLY DIFFERENT alternative itineraries that work around the fixed points. Your alternatives should aim to maximize the travel experience by suggesting additional activities that complement the existing ones.

Important rules for flight handling:
1. Each itinerary MUST start with the arrival flight and end with the departure flight
2. NO activities or hotels can be scheduled before the arrival flight or after the departure flight
3. The last activity of each day must end at least {departure_buffer_hours} hours before any departure flight
4. For the departure day, only suggest morning activities if there are at least {departure_day_hours} hours before the flight

General rules:
1. Keep all pinned items exactly as they are (same title, time, description, etc)
2. You may modify, remove, or add to the flexible items
3. Each alternative must be significantly different from both the original and each other
4. Ensure realistic travel times between activities (typically 30-45 mins for travel between locations)
5. Every activity must include a realistic price in USD
6. Activities should be available at the suggested times
7. Fill empty time slots with interesting activities
8. Aim to suggest 2-3 activities between major fixed points when time allows
9. Include a mix of cultural, dining, and experiential activities
10. DO NOT suggest any activities that are identical or very similar to the unpinned activities in the original itinerary
11. Each alternative should explore different aspects of the destination
12. Use 24-hour HH:MM times and only the types travel, hotel or activity

Format your response exactly as follows:

{alternative_sections}
Example format for items:
Arrival Flight | travel | 10:00 | Flight details | $1,249
Morning Museum Tour | activity | 14:00 | Guided tour description | $79
Evening Activity | activity | 17:30 | Activity description | $65
Departure Flight | travel | 15:00 | Flight details | $1,149

Remember to maintain a good balance - the schedule should be full but not rushed, allowing time to enjoy each activity."""


ALTERNATIVE_SECTION_TEMPLATE = """ALTERNATIVE {number}:
[One sentence explaining how this itinerary differs from original and why it might be appealing]
[Full itinerary with each item on new line in format: {item_line_format}]
"""


ADVISOR_USER_PROMPT_TEMPLATE = """Here's my current itinerary:

PINNED (FIXED) ITEMS:
{pinned_items}

FLEXIBLE ITEMS (DO NOT REUSE THESE - SUGGEST DIFFERENT ACTIVITIES):
{flexible_items}

Please provide {alternatives_word} alternative itineraries that work around the pinned items. Make them distinctly different from each other and from the original flexible items. Ensure all activities occur between the arrival and departure flights, and respect the time constraints."""


ITEM_BLOCK_TEMPLATE = """{title} ({kind}) at {time}
{description}
Price: {price}"""


_NUMBER_WORDS = {1: "one", 2: "two", 3: "three", 4: "four", 5: "five"}


class AdvisorPromptConfig(BaseModel):
    """
    Business rules rendered into the advisor system prompt.

    Attributes:
        alternatives_count: Number of alternatives the model must return
        departure_buffer_hours: Minimum gap before any departure flight
        departure_day_hours: Minimum gap for morning plans on departure day
    """

    alternatives_count: int = Field(default=2, ge=1, le=5)
    departure_buffer_hours: int = Field(default=2, ge=0)
    departure_day_hours: int = Field(default=4, ge=0)

    @property
    def alternatives_word(self) -> str:
        return _NUMBER_WORDS[self.alternatives_count]

    def format_system_prompt(self) -> str:
        """Fill the system prompt template with this config's values."""
        sections = "\n".join(
            ALTERNATIVE_SECTION_TEMPLATE.format(
                number=number,
                item_line_format=ITEM_LINE_FORMAT,
            )
            for number in range(1, self.alternatives_count + 1)
        )
        return ADVISOR_SYSTEM_PROMPT_TEMPLATE.format(
            alternatives_word=self.alternatives_word,
            departure_buffer_hours=self.departure_buffer_hours,
            departure_day_hours=self.departure_day_hours,
            alternative_sections=sections,
        )
