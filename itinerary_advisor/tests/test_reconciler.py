"""
Unit tests for itinerary reconciliation.

Tests flight bracketing, pin fidelity and detail inheritance.
"""

from itinerary_advisor.advisor.reconciler import (
    bracket_flights,
    is_same_item,
    reconcile,
    reconcile_item,
)
from itinerary_advisor.itinerary.mock_data import sample_agenda
from itinerary_advisor.itinerary.schemas import (
    ActivityDetails,
    CandidateItem,
    HotelDetails,
    ItemKind,
    ItineraryItem,
    TravelDetails,
)


# ============================================================================
# Test Fixtures
# ============================================================================


def _make_item(title, kind, time, pinned=False, **details):
    return ItineraryItem(title=title, kind=kind, time=time, pinned=pinned, details=details or None)


def _make_candidate(title, kind, time, price="", description=""):
    return CandidateItem(title=title, kind=kind, time=time, description=description, price=price)


def _titles(items):
    return [item.title for item in items]


# ============================================================================
# TestBracketFlights
# ============================================================================


class TestBracketFlights:
    """Tests for bracket_flights."""

    def test_flights_move_to_the_ends(self):
        activity = _make_item("Louvre Museum Tour", ItemKind.ACTIVITY, "14:00")
        arrival = _make_item("Arrival Flight", ItemKind.TRAVEL, "10:00")
        hotel = _make_item("Le Grand Hotel", ItemKind.HOTEL, "12:30")
        departure = _make_item("Departure Flight", ItemKind.TRAVEL, "15:00")

        result = bracket_flights([activity, arrival, hotel, departure])

        assert result == [arrival, activity, hotel, departure]

    def test_no_identifiable_flights_is_unchanged(self):
        items = [
            _make_item("Louvre Museum Tour", ItemKind.ACTIVITY, "14:00"),
            _make_item("Train to Versailles", ItemKind.TRAVEL, "09:00"),
        ]
        assert bracket_flights(items) == items

    def test_only_arrival_is_unchanged(self):
        items = [
            _make_item("Louvre Museum Tour", ItemKind.ACTIVITY, "14:00"),
            _make_item("Arrival Flight", ItemKind.TRAVEL, "10:00"),
        ]
        assert bracket_flights(items) == items

    def test_keywords_only_count_on_travel_items(self):
        """An activity mentioning departure is not a flight."""
        items = [
            _make_item("Departure Lounge Tasting", ItemKind.ACTIVITY, "08:00"),
            _make_item("Inbound Flight", ItemKind.TRAVEL, "10:00"),
            _make_item("Outbound Flight", ItemKind.TRAVEL, "18:00"),
        ]

        result = bracket_flights(items)

        assert _titles(result) == ["Inbound Flight", "Departure Lounge Tasting", "Outbound Flight"]

    def test_other_travel_stays_in_the_middle(self):
        items = [
            _make_item("Departure Flight", ItemKind.TRAVEL, "15:00"),
            _make_item("Train to Versailles", ItemKind.TRAVEL, "09:00"),
            _make_item("Arrival Flight", ItemKind.TRAVEL, "10:00"),
        ]

        result = bracket_flights(items)

        assert _titles(result) == ["Arrival Flight", "Train to Versailles", "Departure Flight"]

    def test_input_is_not_mutated(self):
        items = sample_agenda()
        shuffled = [items[2], items[0], items[4], items[1]]
        snapshot = list(shuffled)

        bracket_flights(shuffled)

        assert shuffled == snapshot


# ============================================================================
# TestReconcileItem
# ============================================================================


class TestReconcileItem:
    """Tests for reconcile_item and matching."""

    def test_same_title_matches(self):
        source = _make_item("Louvre Museum Tour", ItemKind.ACTIVITY, "14:00")
        candidate = _make_candidate("Louvre Museum Tour", ItemKind.ACTIVITY, "16:00")
        assert is_same_item(candidate, source)

    def test_same_kind_and_time_matches(self):
        """Known ambiguity: unrelated items sharing a slot also match."""
        source = _make_item("Louvre Museum Tour", ItemKind.ACTIVITY, "14:00")
        candidate = _make_candidate("Picnic", ItemKind.ACTIVITY, "2:00 PM")
        assert is_same_item(candidate, source)

    def test_travel_details_are_inherited(self):
        agenda = sample_agenda()
        candidate = _make_candidate("Arrival Flight SF > Paris", ItemKind.TRAVEL, "10:00 AM")

        item = reconcile_item(candidate, agenda)

        assert isinstance(item.details, TravelDetails)
        assert item.details.airline == "Air France"
        assert item.details.duration == "8h 30m"
        assert item.price == "$1,249"

    def test_hotel_details_are_inherited_with_new_price(self):
        agenda = sample_agenda()
        candidate = _make_candidate("Le Grand Hotel Paris", ItemKind.HOTEL, "12:30 PM", price="$5,000")

        item = reconcile_item(candidate, agenda)

        assert isinstance(item.details, HotelDetails)
        assert item.details.nightly_rate == 800.0
        assert item.details.check_in == "March 1, 2024"
        assert item.price == "$5,000"

    def test_new_item_gets_default_details(self):
        candidate = _make_candidate("Catacombs Tour", ItemKind.ACTIVITY, "11:00 PM", price="$29")

        item = reconcile_item(candidate, sample_agenda())

        assert isinstance(item.details, ActivityDetails)
        assert item.price == "$29"
        assert item.time == "23:00"
        assert item.pinned is False

    def test_missing_price_becomes_tbd(self):
        candidate = _make_candidate("Catacombs Tour", ItemKind.ACTIVITY, "11:00 PM")
        item = reconcile_item(candidate, sample_agenda())
        assert item.price == "TBD"

    def test_kind_mismatch_does_not_inherit_details(self):
        source = _make_item("Louvre", ItemKind.ACTIVITY, "14:00", date="March 2", price="$79")
        candidate = _make_candidate("Louvre", ItemKind.TRAVEL, "14:00")

        item = reconcile_item(candidate, [source])

        assert isinstance(item.details, TravelDetails)
        assert item.price == "$79"

    def test_pinned_needs_title_and_time(self):
        agenda = sample_agenda()
        same_slot = _make_candidate("Arrival Flight SF > Paris", ItemKind.TRAVEL, "10:00 AM")
        moved = _make_candidate("Arrival Flight SF > Paris", ItemKind.TRAVEL, "11:00 AM")

        assert reconcile_item(same_slot, agenda).pinned is True
        assert reconcile_item(moved, agenda).pinned is False

    def test_title_match_beats_earlier_slot_match(self):
        cruise = _make_item("Seine Cruise", ItemKind.ACTIVITY, "19:00", date="2024-06-02", price="$50")
        opera = _make_item(
            "Opera Night", ItemKind.ACTIVITY, "19:00", pinned=True, date="2024-06-01", price="$120"
        )
        candidate = _make_candidate("Opera Night", ItemKind.ACTIVITY, "7:00 PM")

        item = reconcile_item(candidate, [cruise, opera])

        assert item.pinned is True
        assert item.details.date == "2024-06-01"
        assert item.price == "$120"

    def test_pinned_source_wins_a_slot_match(self):
        walk = _make_item("Food Walk", ItemKind.ACTIVITY, "18:00", date="2024-06-02")
        show = _make_item("Moulin Rouge", ItemKind.ACTIVITY, "18:00", pinned=True, date="2024-06-03")
        candidate = _make_candidate("Evening Show", ItemKind.ACTIVITY, "6:00 PM")

        item = reconcile_item(candidate, [walk, show])

        assert item.details.date == "2024-06-03"


# ============================================================================
# TestReconcile
# ============================================================================


class TestReconcile:
    """Tests for reconcile on whole itineraries."""

    def test_pin_fidelity_when_model_drops_pinned_items(self):
        """Every pinned source appears pinned even if the model left it out."""
        agenda = sample_agenda()
        candidates = [
            _make_candidate("Picnic", ItemKind.ACTIVITY, "3:00 PM", price="$40"),
            _make_candidate("Jazz Club", ItemKind.ACTIVITY, "9:00 PM", price="$30"),
        ]

        result = reconcile(candidates, agenda)

        for source in (item for item in agenda if item.pinned):
            assert any(
                item.pinned and item.title == source.title and item.time == source.time
                for item in result
            )
        assert result[0].title == "Arrival Flight SF > Paris"
        assert result[-1].title == "Departure Flight Paris > SF"

    def test_moved_pinned_item_is_put_back(self):
        """A pinned item the model rescheduled is replaced by the original."""
        agenda = sample_agenda()
        candidates = [
            _make_candidate("Arrival Flight SF > Paris", ItemKind.TRAVEL, "10:00 AM"),
            _make_candidate("Le Grand Hotel Paris", ItemKind.HOTEL, "4:00 PM"),
            _make_candidate("Picnic", ItemKind.ACTIVITY, "5:00 PM"),
        ]

        result = reconcile(candidates, agenda)

        hotels = [item for item in result if item.title == "Le Grand Hotel Paris"]
        assert len(hotels) == 1
        assert hotels[0].time == "12:30"
        assert hotels[0].pinned is True

    def test_sharing_a_pinned_time_is_not_a_conflict(self):
        """Departure is at 15:00 on another day; a 3 PM activity stays."""
        agenda = sample_agenda()
        candidates = [_make_candidate("Picnic", ItemKind.ACTIVITY, "3:00 PM", price="$40")]

        result = reconcile(candidates, agenda)

        assert "Picnic" in _titles(result)

    def test_restored_items_get_fresh_ids(self):
        agenda = sample_agenda()
        result = reconcile([_make_candidate("Picnic", ItemKind.ACTIVITY, "3:00 PM")], agenda)

        source_ids = {item.id for item in agenda}
        assert not source_ids & {item.id for item in result}

    def test_no_pinned_sources(self):
        agenda = [_make_item("Louvre", ItemKind.ACTIVITY, "14:00")]
        candidates = [_make_candidate("Picnic", ItemKind.ACTIVITY, "3:00 PM")]

        result = reconcile(candidates, agenda)

        assert _titles(result) == ["Picnic"]

    def test_candidate_pinned_flag_is_ignored(self):
        """Pinned state comes from the source, never from the model text."""
        agenda = [_make_item("Louvre", ItemKind.ACTIVITY, "14:00")]
        candidates = [_make_candidate("Louvre", ItemKind.ACTIVITY, "2:00 PM", description="pinned")]

        result = reconcile(candidates, agenda)

        assert result[0].pinned is False
