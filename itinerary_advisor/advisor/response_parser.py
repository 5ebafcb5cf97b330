"""
Response parser for the itinerary advisor.

Turns the model's semi-structured reply into candidate itineraries.
Parsing is tolerant at two levels: a malformed item line is dropped with
a warning while the rest of its block survives, and a block without any
valid item is dropped while the other blocks survive. Only a reply with
no usable block at all is an error.
"""

import logging
import re
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from itinerary_advisor.itinerary.schemas import (
    CandidateItem,
    CandidateItinerary,
    ItemKind,
)
from itinerary_advisor.shared.errors import ParseError
from itinerary_advisor.shared.time_normalizer import normalize_time


logger = logging.getLogger(__name__)


# Markdown emphasis or heading marks around the header are part of it
ALTERNATIVE_HEADER_PATTERN = re.compile(
    r"[#*_ \t]*ALTERNATIVE\s*\d+[*_]*\s*:[*_]*", re.IGNORECASE
)
# Bullets and numbering the model sometimes puts in front of item lines
_LINE_PREFIX_PATTERN = re.compile(r"^\s*(?:[-*•]+|\d+[.)])\s+")

MIN_ITEM_FIELDS = 4
_VALID_KINDS = {kind.value for kind in ItemKind}


class ParseWarning(BaseModel):
    """A line or block that was dropped while parsing."""

    block: int = Field(description="1-based index of the block in the reply")
    line: Optional[int] = Field(default=None, description="1-based line within the block")
    text: str = Field(default="", description="Offending text")
    message: str


class ParsedAdvice(BaseModel):
    """All usable alternatives of a reply plus what was dropped on the way."""

    alternatives: List[CandidateItinerary] = Field(default_factory=list)
    warnings: List[ParseWarning] = Field(default_factory=list)


def split_alternative_blocks(raw_text: str) -> List[str]:
    """Split on ``ALTERNATIVE <n>:`` headers, discarding empty blocks."""
    blocks = ALTERNATIVE_HEADER_PATTERN.split(raw_text or "")
    return [block.strip() for block in blocks if block.strip()]


def parse_item_line(
    line: str,
    block: int = 1,
    line_number: Optional[int] = None,
) -> Union[CandidateItem, ParseWarning]:
    """
    Parse one ``Title | Type | Time | Description | Price`` line.

    Args:
        line: Raw item line
        block: Block index, for the warning
        line_number: Line index within the block, for the warning

    Returns:
        CandidateItem on success, ParseWarning describing the failure otherwise
    """
    cleaned = _LINE_PREFIX_PATTERN.sub("", line.strip())
    parts = [part.strip() for part in cleaned.split("|")]

    def warning(message: str) -> ParseWarning:
        return ParseWarning(block=block, line=line_number, text=line, message=message)

    if len(parts) < MIN_ITEM_FIELDS:
        return warning(f"Expected at least {MIN_ITEM_FIELDS} '|' separated fields, got {len(parts)}")

    title, kind, time, description = parts[:4]
    price = parts[4] if len(parts) > 4 else ""

    if not title:
        return warning("Missing title")

    kind = kind.lower()
    if kind not in _VALID_KINDS:
        return warning(f"Unknown item type '{kind}'")

    return CandidateItem(
        title=title,
        kind=ItemKind(kind),
        time=normalize_time(time),
        description=description,
        price=price,
    )


def parse_alternative_block(
    block_text: str,
    block: int = 1,
) -> Tuple[Optional[CandidateItinerary], List[ParseWarning]]:
    """
    Parse one alternative block.

    The first non-empty line is the explanation, every other non-empty
    line is an item line.

    Args:
        block_text: Text between two alternative headers
        block: Block index, for warnings

    Returns:
        Tuple of (itinerary or None when no item survived, warnings)
    """
    lines = [line for line in block_text.splitlines() if line.strip()]
    if not lines:
        return None, [ParseWarning(block=block, message="Empty block")]

    explanation, item_lines = lines[0].strip(), lines[1:]

    items: List[CandidateItem] = []
    warnings: List[ParseWarning] = []
    for line_number, line in enumerate(item_lines, start=2):
        parsed = parse_item_line(line, block=block, line_number=line_number)
        if isinstance(parsed, ParseWarning):
            logger.warning(
                f"Dropped item line | block={block}, line={line_number}, "
                f"reason={parsed.message}, text={line.strip()!r}"
            )
            warnings.append(parsed)
        else:
            items.append(parsed)

    if not items:
        logger.warning(f"Dropped block without valid items | block={block}")
        warnings.append(
            ParseWarning(block=block, text=explanation, message="Block has no valid item lines")
        )
        return None, warnings

    return CandidateItinerary(explanation=explanation, items=items), warnings


def parse_advice_response(raw_text: str) -> ParsedAdvice:
    """
    Parse a full advisor reply into candidate itineraries.

    Args:
        raw_text: Raw model reply

    Returns:
        ParsedAdvice with every usable alternative, in reply order

    Raises:
        ParseError: If no alternative survives parsing
    """
    alternatives: List[CandidateItinerary] = []
    warnings: List[ParseWarning] = []

    for index, block_text in enumerate(split_alternative_blocks(raw_text), start=1):
        itinerary, block_warnings = parse_alternative_block(block_text, block=index)
        warnings.extend(block_warnings)
        if itinerary is not None:
            alternatives.append(itinerary)

    if not alternatives:
        raise ParseError(
            "no_alternatives",
            f"No usable alternative in model reply ({len(warnings)} lines or blocks dropped)",
        )

    logger.debug(
        f"Parsed reply | alternatives={len(alternatives)}, "
        f"items={sum(len(a.items) for a in alternatives)}, dropped={len(warnings)}"
    )
    return ParsedAdvice(alternatives=alternatives, warnings=warnings)
