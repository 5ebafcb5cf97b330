"""
Unit tests for agenda and queue operations.
"""

import pytest

from itinerary_advisor.itinerary.agenda import (
    DEFAULT_DESCRIPTION,
    add_card,
    add_to_queue,
    apply_selection,
    move_queue_item_to_agenda,
    remove_from_queue,
    remove_item,
    reorder_item,
    toggle_pin,
)
from itinerary_advisor.itinerary.mock_data import sample_agenda
from itinerary_advisor.itinerary.schemas import (
    ActivityDetails,
    ItemKind,
    ItineraryItem,
    QueueItem,
    TravelDetails,
)
from itinerary_advisor.shared.errors import ItemNotFoundError, PinnedItemError


def _make_queue_item(**overrides):
    values = {
        "kind": ItemKind.ACTIVITY,
        "title": "Wine Tasting",
        "details": ActivityDetails(date="2024-03-03", price="$65"),
    }
    values.update(overrides)
    return QueueItem(**values)


class TestApplySelection:
    """Tests for apply_selection."""

    def test_ids_are_fresh(self):
        chosen = sample_agenda()

        applied = apply_selection(chosen)

        assert {item.id for item in applied}.isdisjoint(item.id for item in chosen)

    def test_applying_twice_gives_disjoint_ids(self):
        chosen = sample_agenda()

        first = apply_selection(chosen)
        second = apply_selection(chosen)

        assert {item.id for item in first}.isdisjoint(item.id for item in second)

    def test_content_is_preserved(self):
        chosen = sample_agenda()

        applied = apply_selection(chosen)

        assert [i.title for i in applied] == [i.title for i in chosen]
        assert [i.pinned for i in applied] == [i.pinned for i in chosen]
        assert applied[0].details == chosen[0].details

    def test_chosen_items_are_not_mutated(self):
        chosen = sample_agenda()
        ids = [item.id for item in chosen]

        apply_selection(chosen)

        assert [item.id for item in chosen] == ids


class TestAgendaEdits:
    """Tests for add, remove, pin and reorder."""

    def test_add_card(self):
        agenda = add_card([], ItemKind.HOTEL)

        assert len(agenda) == 1
        assert agenda[0].title == "New hotel item"
        assert agenda[0].description == DEFAULT_DESCRIPTION
        assert agenda[0].time == "00:00"
        assert agenda[0].pinned is False

    def test_remove_unpinned(self):
        agenda = sample_agenda()
        louvre = agenda[2]

        result = remove_item(agenda, louvre.id)

        assert louvre not in result
        assert len(agenda) == 5

    def test_remove_pinned_raises(self):
        agenda = sample_agenda()
        with pytest.raises(PinnedItemError):
            remove_item(agenda, agenda[0].id)

    def test_remove_unknown_raises(self):
        with pytest.raises(ItemNotFoundError):
            remove_item(sample_agenda(), "item-missing")

    def test_toggle_pin(self):
        agenda = sample_agenda()

        unpinned = toggle_pin(agenda, agenda[0].id)

        assert unpinned[0].pinned is False
        assert agenda[0].pinned is True
        assert toggle_pin(unpinned, agenda[0].id)[0].pinned is True

    def test_reorder(self):
        agenda = sample_agenda()

        result = reorder_item(agenda, 3, 2)

        assert [i.title for i in result[2:4]] == ["Seine River Cruise", "Louvre Museum Tour"]

    def test_reorder_pinned_raises(self):
        with pytest.raises(PinnedItemError):
            reorder_item(sample_agenda(), 0, 3)

    def test_reorder_out_of_range(self):
        with pytest.raises(IndexError):
            reorder_item(sample_agenda(), 9, 0)


class TestQueue:
    """Tests for the queue and moving queue items onto the agenda."""

    def test_add_and_remove(self):
        item = _make_queue_item()

        queue = add_to_queue([], item)
        assert queue == [item]
        assert remove_from_queue(queue, item.id) == []

    def test_remove_unknown_raises(self):
        with pytest.raises(ItemNotFoundError):
            remove_from_queue([_make_queue_item()], "queue-missing")

    def test_move_fills_defaults(self):
        item = _make_queue_item()

        queue, agenda = move_queue_item_to_agenda([item], sample_agenda(), item.id, index=1)

        assert queue == []
        moved = agenda[1]
        assert isinstance(moved, ItineraryItem)
        assert moved.title == "Wine Tasting"
        assert moved.description == DEFAULT_DESCRIPTION
        assert moved.time == "00:00"
        assert moved.pinned is False
        assert moved.price == "$65"

    def test_move_keeps_given_fields_and_appends(self):
        item = _make_queue_item(
            kind=ItemKind.TRAVEL,
            title="Delta Flight",
            description="Window seats",
            time="07:15",
            details=TravelDetails(airline="Delta", price="$425"),
        )

        _, agenda = move_queue_item_to_agenda([item], sample_agenda(), item.id)

        assert agenda[-1].title == "Delta Flight"
        assert agenda[-1].description == "Window seats"
        assert agenda[-1].time == "07:15"
        assert agenda[-1].details.airline == "Delta"
