"""Tests for D'Hondt tabulation."""

import pytest

from app.errors import InvalidInputError
from app.services.election import ElectionTabulator

tabulator = ElectionTabulator()


class TestAllocate:
    def test_dutch_2023(self, dutch_votes, dutch_dhondt):
        assert tabulator.allocate(dutch_votes, 150) == dutch_dhondt

    def test_textbook_example(self):
        votes = {"A": 100_000, "B": 80_000, "C": 30_000, "D": 20_000}
        assert tabulator.allocate(votes, 8) == {"A": 4, "B": 3, "C": 1, "D": 0}

    @pytest.mark.parametrize("seats", [1, 7, 75, 150, 151, 300])
    def test_sum_equals_total(self, dutch_votes, seats):
        assert sum(tabulator.allocate(dutch_votes, seats).values()) == seats

    def test_every_party_listed(self, dutch_votes):
        assert set(tabulator.allocate(dutch_votes, 10)) == set(dutch_votes)

    def test_monotonic_in_votes(self, dutch_votes):
        before = tabulator.allocate(dutch_votes, 150)["CDA"]
        for extra in (10_000, 100_000, 500_000):
            votes = {**dutch_votes, "CDA": dutch_votes["CDA"] + extra}
            after = tabulator.allocate(votes, 150)["CDA"]
            assert after >= before
            before = after

    def test_idempotent(self, dutch_votes):
        assert tabulator.allocate(dutch_votes, 150) == tabulator.allocate(dutch_votes, 150)

    def test_no_threshold(self):
        result = tabulator.allocate({"A": 1_000_000, "B": 9_000}, 150)
        assert result["B"] == 1


class TestInvalidInput:
    def test_empty(self):
        with pytest.raises(InvalidInputError):
            tabulator.allocate({}, 150)

    @pytest.mark.parametrize("seats", [0, -1])
    def test_non_positive_seats(self, seats):
        with pytest.raises(InvalidInputError):
            tabulator.allocate({"A": 10}, seats)

    def test_negative_votes(self):
        with pytest.raises(InvalidInputError):
            tabulator.allocate({"A": 10, "B": -1}, 5)

    @pytest.mark.parametrize("count", [1.5, True, "10"])
    def test_non_integer_votes(self, count):
        with pytest.raises(InvalidInputError):
            tabulator.allocate({"A": 10, "B": count}, 5)

    def test_all_zero(self):
        with pytest.raises(InvalidInputError):
            tabulator.allocate({"A": 0, "B": 0}, 5)


class TestTabulate:
    def test_result(self, dutch_votes):
        result = tabulator.tabulate(dutch_votes, 150)
        assert result.total_seats == 150
        assert result.total_votes == sum(dutch_votes.values())
        assert result.ordered()[:3] == ["GL-PvdA", "PVV", "VVD"]

    def test_shares(self):
        result = tabulator.tabulate({"A": 75, "B": 25}, 4)
        assert result.vote_share("A") == 75.0
        assert result.seat_share("A") == 75.0
        assert result.gallagher == 0.0
