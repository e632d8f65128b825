"""Candidate coalition generation."""

from collections.abc import Iterator, Sequence
from itertools import combinations

from loguru import logger

from app.errors import InvalidInputError, InvalidRangeError
from app.models.coalition import Coalition
from app.models.party import Party
from helpers import formulas
from settings import DEFAULT_MAX_SIZE, MAX_COALITION_SIZE, MIN_COALITION_SIZE


def strongest_first(parties: Sequence[Party]) -> list[Party]:
    """Seats descending, then id."""
    return sorted(parties, key=lambda p: (-p.seats, p.id))


class CoalitionEnumerator:
    """Lazily yields every party subset within a size range."""

    def __init__(self, max_cap: int = MAX_COALITION_SIZE):
        self._max_cap = max_cap
        logger.debug("CoalitionEnumerator initialized")

    def enumerate(
        self,
        parties: Sequence[Party],
        min_size: int = MIN_COALITION_SIZE,
        max_size: int = DEFAULT_MAX_SIZE,
        min_seats: int | None = None,
    ) -> Iterator[Coalition]:
        """Coalitions by size, then in strongest-first combination order.

        Arguments are checked when called; nothing is generated until iterated.
        Coalitions below `min_seats` are skipped.
        """
        self._check_range(min_size, max_size)
        ordered = strongest_first(parties)

        ids = [p.id for p in ordered]
        if len(set(ids)) != len(ids):
            raise InvalidInputError("Duplicate party ids in enumeration input")

        logger.debug(
            "Enumerating sizes {}-{} over {} parties ({} candidates)",
            min_size,
            max_size,
            len(ordered),
            formulas.combination_count(len(ordered), min_size, max_size),
        )
        return self._generate(ordered, min_size, max_size, min_seats)

    def count(self, n_parties: int, min_size: int = MIN_COALITION_SIZE, max_size: int = DEFAULT_MAX_SIZE) -> int:
        """How many candidates `enumerate` yields without seat pruning."""
        self._check_range(min_size, max_size)
        return formulas.combination_count(n_parties, min_size, max_size)

    @staticmethod
    def _generate(ordered: list[Party], min_size: int, max_size: int, min_seats: int | None) -> Iterator[Coalition]:
        for size in range(min_size, max_size + 1):
            for group in combinations(ordered, size):
                seats = sum(p.seats for p in group)
                if min_seats is not None and seats < min_seats:
                    continue
                yield Coalition(parties=group, total_seats=seats)

    def _check_range(self, min_size: int, max_size: int) -> None:
        if min_size < MIN_COALITION_SIZE:
            raise InvalidRangeError(f"Minimum coalition size is {MIN_COALITION_SIZE}, got {min_size}")
        if min_size > max_size:
            raise InvalidRangeError(f"min_size {min_size} exceeds max_size {max_size}")
        if max_size > self._max_cap:
            raise InvalidRangeError(f"max_size {max_size} exceeds the cap of {self._max_cap}")
