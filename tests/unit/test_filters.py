"""Tests for the filter predicates and apply_filters().

Each predicate is checked on its own (boundary values, empty input,
no mutation), then apply_filters() is checked for skipping unset
criteria, order independence and the missing-location error.
"""

import itertools

import pytest

from spur_search.core.exceptions import InvalidCriteriaError
from spur_search.core.types import GeoPoint, SearchCriteria
from spur_search.search.filters import (
    apply_filters,
    filter_categories,
    filter_cost,
    filter_distance,
    filter_party_size,
)
from tests.helpers import make_event

COLUMBUS = GeoPoint(39.96, -83.0)


def _ids(events):
    return [e.event_id for e in events]


# -----------------------------------------------------------------------
# Party size
# -----------------------------------------------------------------------


class TestFilterPartySize:
    def test_keeps_events_with_enough_seats(self, sample_events):
        assert _ids(filter_party_size(sample_events, 2)) == ["picnic", "trivia"]

    def test_exact_capacity_passes(self):
        event = make_event(party_size=4, attendee_count=2)
        assert filter_party_size([event], 2) == [event]

    def test_one_over_capacity_fails(self):
        event = make_event(party_size=4, attendee_count=2)
        assert filter_party_size([event], 3) == []

    def test_full_event_excluded_for_any_positive_party(self):
        event = make_event(party_size=2, attendee_count=2)
        assert filter_party_size([event], 1) == []

    def test_overbooked_event_excluded_even_for_zero(self):
        """Negative capacity fails a request for zero seats."""
        event = make_event(party_size=2, attendee_count=3)
        assert filter_party_size([event], 0) == []

    @pytest.mark.parametrize("party_size", range(0, 7))
    @pytest.mark.parametrize("attendees", range(0, 5))
    def test_survives_iff_capacity_suffices(self, party_size, attendees):
        event = make_event(party_size=4, attendee_count=attendees)
        survived = bool(filter_party_size([event], party_size))
        assert survived == (party_size <= 4 - attendees)


# -----------------------------------------------------------------------
# Cost
# -----------------------------------------------------------------------


class TestFilterCost:
    def test_keeps_cheap_events(self, sample_events):
        assert _ids(filter_cost(sample_events, 30)) == ["picnic", "trivia", "gala"]

    def test_boundary_is_inclusive(self):
        event = make_event(cost=20.0)
        assert filter_cost([event], 20) == [event]

    def test_zero_means_free_only(self, sample_events):
        """A max cost of 0 is a real filter, not 'unset'."""
        assert _ids(filter_cost(sample_events, 0)) == ["picnic"]


# -----------------------------------------------------------------------
# Categories
# -----------------------------------------------------------------------


class TestFilterCategories:
    def test_any_match_passes(self, sample_events):
        assert _ids(filter_categories(sample_events, {"music", "games"})) == [
            "concert",
            "trivia",
            "gala",
        ]

    def test_single_category(self, sample_events):
        assert _ids(filter_categories(sample_events, {"food"})) == ["picnic", "trivia"]

    def test_no_overlap(self, sample_events):
        assert filter_categories(sample_events, {"sports"}) == []

    def test_empty_request_matches_nothing(self, sample_events):
        """The empty set is a real filter value, unlike None."""
        assert filter_categories(sample_events, set()) == []

    def test_accepts_any_iterable(self, sample_events):
        assert _ids(filter_categories(sample_events, ["outdoors"])) == ["picnic"]


# -----------------------------------------------------------------------
# Distance
# -----------------------------------------------------------------------


class TestFilterDistance:
    def test_keeps_nearby_events(self, sample_events):
        assert _ids(filter_distance(sample_events, 20, COLUMBUS)) == [
            "concert",
            "picnic",
            "gala",
        ]

    def test_zero_keeps_only_same_spot(self, sample_events):
        assert _ids(filter_distance(sample_events, 0, COLUMBUS)) == ["gala"]

    def test_large_radius_keeps_all(self, sample_events):
        assert filter_distance(sample_events, 20000, COLUMBUS) == sample_events


# -----------------------------------------------------------------------
# Shared predicate behaviour
# -----------------------------------------------------------------------


class TestPredicateContracts:
    PREDICATES = [
        lambda events: filter_party_size(events, 2),
        lambda events: filter_cost(events, 10),
        lambda events: filter_categories(events, {"food"}),
        lambda events: filter_distance(events, 20, COLUMBUS),
    ]

    @pytest.mark.parametrize("predicate", PREDICATES)
    def test_does_not_mutate_input(self, predicate, sample_events):
        before = list(sample_events)
        predicate(sample_events)
        assert sample_events == before

    @pytest.mark.parametrize("predicate", PREDICATES)
    def test_returns_new_list(self, predicate, sample_events):
        assert predicate(sample_events) is not sample_events

    @pytest.mark.parametrize("predicate", PREDICATES)
    def test_empty_input(self, predicate):
        assert predicate([]) == []

    def test_filters_commute(self, sample_events):
        """Any order of the four predicates yields the same set."""
        expected = None
        for order in itertools.permutations(self.PREDICATES):
            events = sample_events
            for predicate in order:
                events = predicate(events)
            result = set(_ids(events))
            if expected is None:
                expected = result
            assert result == expected


# -----------------------------------------------------------------------
# apply_filters()
# -----------------------------------------------------------------------


class TestApplyFilters:
    def test_all_unset_returns_everything(self, sample_events):
        result = apply_filters(sample_events, SearchCriteria())
        assert result == sample_events
        assert result is not sample_events

    def test_combined_criteria(self, sample_events):
        criteria = SearchCriteria(
            party_size=1,
            cost=40,
            categories=frozenset({"food", "music"}),
            distance=50,
            user_location=COLUMBUS,
        )
        assert _ids(apply_filters(sample_events, criteria)) == ["picnic"]

    def test_only_set_criteria_apply(self, sample_events):
        criteria = SearchCriteria(cost=5)
        assert _ids(apply_filters(sample_events, criteria)) == ["picnic", "trivia"]

    def test_location_without_distance_does_not_filter(self, sample_events):
        criteria = SearchCriteria(user_location=GeoPoint(-33.87, 151.21))
        assert apply_filters(sample_events, criteria) == sample_events

    def test_distance_without_location_raises(self, sample_events):
        with pytest.raises(InvalidCriteriaError, match="user location"):
            apply_filters(sample_events, SearchCriteria(distance=10))

    def test_empty_result_is_not_an_error(self, sample_events):
        assert apply_filters(sample_events, SearchCriteria(party_size=100)) == []

    def test_does_not_mutate_input(self, sample_events):
        before = list(sample_events)
        apply_filters(sample_events, SearchCriteria(party_size=2, cost=1))
        assert sample_events == before
