"""Tests for coalition enumeration."""

from collections.abc import Iterator

import pytest

from app.errors import InvalidInputError, InvalidRangeError
from app.models.party import Party
from app.services.coalition import CoalitionEnumerator

enumerator = CoalitionEnumerator()


def party(pid: str, seats: int) -> Party:
    return Party(id=pid, name=pid, ideology=(0.0,), seats=seats)


class TestEnumerate:
    def test_dutch_candidate_count(self, dutch_seated):
        assert len(list(enumerator.enumerate(dutch_seated.parties, 2, 4))) == 1925

    def test_count_matches(self, dutch_seated):
        assert enumerator.count(len(dutch_seated), 2, 4) == 1925

    def test_lazy(self, dutch_seated):
        result = enumerator.enumerate(dutch_seated.parties, 2, 4)
        assert isinstance(result, Iterator)
        assert next(result).members == ("GL-PvdA", "PVV")

    def test_strongest_first(self, dutch_seated):
        for c in enumerator.enumerate(dutch_seated.parties, 2, 3):
            seats = [p.seats for p in c.parties]
            assert seats == sorted(seats, reverse=True)

    def test_total_seats(self):
        parties = [party("A", 10), party("B", 20), party("C", 5)]
        result = {c.members: c.total_seats for c in enumerator.enumerate(parties, 2, 3)}
        assert result == {("B", "A"): 30, ("B", "C"): 25, ("A", "C"): 15, ("B", "A", "C"): 35}

    def test_min_seats(self):
        parties = [party("A", 10), party("B", 20), party("C", 5)]
        result = [c.members for c in enumerator.enumerate(parties, 2, 3, min_seats=26)]
        assert result == [("B", "A"), ("B", "A", "C")]

    def test_size_above_party_count(self):
        parties = [party("A", 10), party("B", 20)]
        assert len(list(enumerator.enumerate(parties, 2, 6))) == 1

    def test_distinct(self, dutch_seated):
        seen = [c.members for c in enumerator.enumerate(dutch_seated.parties, 2, 3)]
        assert len(seen) == len(set(seen))
        assert all(len(set(m)) == len(m) for m in seen)


class TestRange:
    @pytest.mark.parametrize(("low", "high"), [(3, 2), (1, 3), (0, 2), (2, 7)])
    def test_invalid_range_raised_eagerly(self, low, high):
        with pytest.raises(InvalidRangeError):
            enumerator.enumerate([party("A", 1), party("B", 1)], low, high)

    def test_count_checks_range(self):
        with pytest.raises(InvalidRangeError):
            enumerator.count(15, 4, 2)

    def test_custom_cap(self):
        with pytest.raises(InvalidRangeError):
            CoalitionEnumerator(max_cap=3).enumerate([party("A", 1), party("B", 1)], 2, 4)

    def test_duplicate_ids(self):
        with pytest.raises(InvalidInputError):
            enumerator.enumerate([party("A", 1), party("A", 2)], 2, 2)
