"""
Agenda and queue operations.

All functions are pure: they take the current lists and return new ones,
leaving their inputs untouched. Selecting an advisor alternative is a
full swap of the agenda (``apply_selection``), never a field-level merge.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from itinerary_advisor.itinerary.schemas import (
    ItemKind,
    ItineraryItem,
    QueueItem,
    new_item_id,
)
from itinerary_advisor.shared.errors import ItemNotFoundError, PinnedItemError


logger = logging.getLogger(__name__)


DEFAULT_DESCRIPTION = "Add description here"
DEFAULT_TIME = "00:00"


def _index_of(items: Sequence, item_id: str) -> int:
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    raise ItemNotFoundError(f"No item with id '{item_id}'")


def apply_selection(chosen_items: Sequence[ItineraryItem]) -> List[ItineraryItem]:
    """
    Build a new agenda from a chosen itinerary.

    Every item receives a freshly generated identifier, so applying the
    same itinerary twice yields disjoint id sets. The caller replaces its
    agenda wholesale with the returned list.

    Args:
        chosen_items: Items of the original or an alternative itinerary

    Returns:
        The new agenda
    """
    new_agenda = [
        item.model_copy(update={"id": new_item_id()}, deep=True)
        for item in chosen_items
    ]
    logger.info(f"Applied selection | items={len(new_agenda)}")
    return new_agenda


def add_card(agenda: Sequence[ItineraryItem], kind: ItemKind) -> List[ItineraryItem]:
    """Append a blank, unpinned card of the given kind."""
    kind = ItemKind(kind)
    new_item = ItineraryItem(
        title=f"New {kind.value} item",
        kind=kind,
        description=DEFAULT_DESCRIPTION,
        time=DEFAULT_TIME,
    )
    return [*agenda, new_item]


def remove_item(agenda: Sequence[ItineraryItem], item_id: str) -> List[ItineraryItem]:
    """Remove an unpinned item. Pinned items must be unpinned first."""
    index = _index_of(agenda, item_id)
    if agenda[index].pinned:
        raise PinnedItemError(f"Item '{item_id}' is pinned and cannot be removed")
    return [item for item in agenda if item.id != item_id]


def toggle_pin(agenda: Sequence[ItineraryItem], item_id: str) -> List[ItineraryItem]:
    """Flip the pinned flag of one item."""
    _index_of(agenda, item_id)
    return [
        item.model_copy(update={"pinned": not item.pinned}) if item.id == item_id else item
        for item in agenda
    ]


def reorder_item(
    agenda: Sequence[ItineraryItem],
    from_index: int,
    to_index: int,
) -> List[ItineraryItem]:
    """Move an item within the agenda. Pinned items stay where they are."""
    items = list(agenda)
    if not 0 <= from_index < len(items):
        raise IndexError(f"from_index {from_index} out of range")
    if items[from_index].pinned:
        raise PinnedItemError(f"Item '{items[from_index].id}' is pinned and cannot be moved")

    moved = items.pop(from_index)
    items.insert(max(0, min(to_index, len(items))), moved)
    return items


def add_to_queue(queue: Sequence[QueueItem], item: QueueItem) -> List[QueueItem]:
    return [*queue, item]


def remove_from_queue(queue: Sequence[QueueItem], item_id: str) -> List[QueueItem]:
    _index_of(queue, item_id)
    return [item for item in queue if item.id != item_id]


def move_queue_item_to_agenda(
    queue: Sequence[QueueItem],
    agenda: Sequence[ItineraryItem],
    item_id: str,
    index: Optional[int] = None,
) -> Tuple[List[QueueItem], List[ItineraryItem]]:
    """
    Drop a queued item onto the agenda.

    Args:
        queue: Current queue
        agenda: Current agenda
        item_id: Id of the queue item to move
        index: Agenda position to insert at (appends when omitted)

    Returns:
        Tuple of (new queue, new agenda)
    """
    queued = queue[_index_of(queue, item_id)]

    agenda_item = ItineraryItem(
        id=queued.id,
        title=queued.title,
        kind=queued.kind,
        description=queued.description or DEFAULT_DESCRIPTION,
        time=queued.time or DEFAULT_TIME,
        pinned=False,
        details=queued.details.model_copy(deep=True),
    )

    new_agenda = list(agenda)
    position = len(new_agenda) if index is None else max(0, min(index, len(new_agenda)))
    new_agenda.insert(position, agenda_item)

    new_queue = [item for item in queue if item.id != item_id]
    return new_queue, new_agenda
