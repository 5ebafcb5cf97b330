"""
Itinerary reconciliation.

Maps candidate items parsed from the model back onto the agenda they were
generated from: recovers details the model is not expected to reproduce,
recomputes the pinned flag, restores pinned items the model left out and
puts the arrival and departure flights at the ends of the itinerary.

Every function here is a pure function of its inputs and never raises.
"""

import logging
from typing import List, Optional, Sequence

from itinerary_advisor.itinerary.schemas import (
    PLACEHOLDER_PRICE,
    CandidateItem,
    ItemKind,
    ItineraryItem,
    default_details,
    new_item_id,
)
from itinerary_advisor.shared.time_normalizer import normalize_time


logger = logging.getLogger(__name__)


ARRIVAL_KEYWORDS = ("arrival", "inbound")
DEPARTURE_KEYWORDS = ("departure", "outbound")


def _mentions(item: ItineraryItem, keywords: Sequence[str]) -> bool:
    title = item.title.lower()
    return any(keyword in title for keyword in keywords)


def _find_flight(
    items: Sequence[ItineraryItem],
    keywords: Sequence[str],
) -> Optional[ItineraryItem]:
    for item in items:
        if item.kind == ItemKind.TRAVEL and _mentions(item, keywords):
            return item
    return None


def bracket_flights(items: Sequence[ItineraryItem]) -> List[ItineraryItem]:
    """
    Order an itinerary as [arrival flight, ...rest, departure flight].

    The rest keeps its relative order. When either flight cannot be
    identified (or both rules pick the same item) the itinerary is
    returned unchanged.

    Args:
        items: Itinerary items in any order

    Returns:
        New list with the flights at the ends
    """
    arrival = _find_flight(items, ARRIVAL_KEYWORDS)
    departure = _find_flight(items, DEPARTURE_KEYWORDS)

    if arrival is None or departure is None or arrival is departure:
        logger.info(
            f"Flight bracketing skipped | arrival={arrival is not None}, "
            f"departure={departure is not None}"
        )
        return list(items)

    middle = [item for item in items if item is not arrival and item is not departure]
    return [arrival, *middle, departure]


def is_same_item(candidate: CandidateItem, source: ItineraryItem) -> bool:
    """
    Best-effort identity between a candidate and a source item.

    Titles match, or kind and normalized time match. Two unrelated items
    sharing a kind and time slot will also match.
    """
    if candidate.title == source.title:
        return True
    return candidate.kind == source.kind and normalize_time(candidate.time) == normalize_time(
        source.time
    )


def find_source_match(
    candidate: CandidateItem,
    sources: Sequence[ItineraryItem],
) -> Optional[ItineraryItem]:
    """
    Source item a candidate was derived from, if any.

    Title matches win over kind and time matches. Within each rule pinned
    sources are tried before unpinned ones, so a pinned item never picks
    up details from an unrelated item in the same slot.
    """
    ordered = [s for s in sources if s.pinned] + [s for s in sources if not s.pinned]
    for source in ordered:
        if source.title == candidate.title:
            return source
    for source in ordered:
        if is_same_item(candidate, source):
            return source
    return None


def is_pinned_match(candidate: CandidateItem, sources: Sequence[ItineraryItem]) -> bool:
    """Pinned iff some pinned source has the same title and normalized time."""
    time = normalize_time(candidate.time)
    return any(
        source.pinned and source.title == candidate.title and normalize_time(source.time) == time
        for source in sources
    )


def reconcile_item(
    candidate: CandidateItem,
    sources: Sequence[ItineraryItem],
) -> ItineraryItem:
    """
    Build a full itinerary item from one candidate.

    On a source match of the same kind, the candidate inherits the source
    details (flight metadata, stay dates and rate, activity date). Price
    comes from the candidate, else the source, else ``"TBD"``.
    """
    source = find_source_match(candidate, sources)
    source_price = source.details.price if source is not None else None
    price = candidate.price or source_price or PLACEHOLDER_PRICE

    if source is not None and source.kind == candidate.kind:
        details = source.details.model_copy(update={"price": price}, deep=True)
    else:
        details = default_details(candidate.kind, price=price)

    return ItineraryItem(
        title=candidate.title,
        kind=candidate.kind,
        time=normalize_time(candidate.time),
        description=candidate.description,
        pinned=is_pinned_match(candidate, sources),
        details=details,
    )


def _restore_pinned(
    items: List[ItineraryItem],
    sources: Sequence[ItineraryItem],
) -> List[ItineraryItem]:
    """
    Make every pinned source appear in the itinerary.

    Unpinned items reusing a pinned title (a pinned item the model moved)
    are dropped; pinned items the model left out are appended as copies.
    Times carry no date, so sharing a pinned time alone is not a conflict.
    """
    pinned_sources = [source for source in sources if source.pinned]
    if not pinned_sources:
        return items

    pinned_titles = {source.title for source in pinned_sources}
    kept = [item for item in items if item.pinned or item.title not in pinned_titles]

    for source in pinned_sources:
        time = normalize_time(source.time)
        present = any(
            item.pinned and item.title == source.title and normalize_time(item.time) == time
            for item in kept
        )
        if not present:
            logger.info(f"Restoring pinned item left out by the model | title={source.title!r}")
            kept.append(
                source.model_copy(update={"id": new_item_id(), "time": time}, deep=True)
            )

    return kept


def reconcile(
    candidate_items: Sequence[CandidateItem],
    source_items: Sequence[ItineraryItem],
) -> List[ItineraryItem]:
    """
    Reconcile one candidate itinerary against the submitted agenda.

    Args:
        candidate_items: Items parsed from one alternative
        source_items: The agenda the alternative was generated from

    Returns:
        Flight-bracketed itinerary items
    """
    items = [reconcile_item(candidate, source_items) for candidate in candidate_items]
    items = _restore_pinned(items, source_items)
    return bracket_flights(items)
