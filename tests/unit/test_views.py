"""Tests for API views."""

import pytest

from app.container import container
from web.api import coalition, election
from web.api.errors import NotFoundError, ValidationError


@pytest.fixture(scope="module", autouse=True)
def init_container():
    container.reset()
    container.init()


class TestElectionViews:
    def test_seat_allocation(self):
        resp = election.get_seat_allocation()
        assert resp.total_seats == 150
        assert sum(i.seats for i in resp.items) == 150
        assert resp.items[0].party == "GL-PvdA"
        assert resp.gallagher > 0

    def test_custom_seats(self):
        assert sum(i.seats for i in election.get_seat_allocation(75).items) == 75

    @pytest.mark.parametrize("seats", [0, 1001])
    def test_invalid_seats(self, seats):
        with pytest.raises(ValidationError):
            election.get_seat_allocation(seats)

    def test_certification(self):
        resp = election.get_certification()
        assert not resp.is_valid
        assert resp.computed_total == resp.expected_total == 150
        assert len(resp.mismatches) == 9


class TestCoalitionViews:
    def test_coalitions(self):
        resp = coalition.get_coalitions()
        assert resp.majority_threshold == 76
        assert all(c.seats >= 76 for c in resp.viable)
        assert resp.most_compatible == resp.viable[0]

    @pytest.mark.parametrize(("low", "high"), [(3, 2), (1, 2), (2, 7)])
    def test_invalid_range(self, low, high):
        with pytest.raises(ValidationError):
            coalition.get_coalitions(min_size=low, max_size=high)

    def test_invalid_min_compatibility(self):
        with pytest.raises(ValidationError):
            coalition.get_coalitions(min_compatibility=2.0)

    def test_scenarios(self):
        resp = coalition.get_scenarios()
        assert len(resp.items) == 7

    def test_scenario(self):
        item = coalition.get_scenario("Grand Coalition")
        assert item.classification == "blocked"
        assert "PVV excludes GL-PvdA" in item.coalition.violated_exclusions

    def test_unknown_scenario(self):
        with pytest.raises(NotFoundError):
            coalition.get_scenario("Nope")

    def test_compatibility(self):
        resp = coalition.get_compatibility(["VVD", "D66"])
        assert resp.historical == 0.8
        assert resp.violated_exclusions == []
