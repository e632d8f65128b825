"""Election tabulation - D'Hondt seat allocation."""

from collections.abc import Mapping

from loguru import logger

from app.errors import InvalidInputError
from app.models.election import ElectionResult
from helpers import formulas
from settings import TOTAL_SEATS


class ElectionTabulator:
    """Turns a vote tally into a seat allocation.

    Ties on equal quotients go to the party with more raw votes, then to the
    lexicographically smaller id. No electoral threshold is applied.
    """

    def __init__(self):
        logger.debug("ElectionTabulator initialized")

    def allocate(self, votes: Mapping[str, int], total_seats: int = TOTAL_SEATS) -> dict[str, int]:
        """Seats per party; every party in `votes` appears, zero seats included."""
        self._validate(votes, total_seats)
        seats = formulas.highest_averages(dict(votes), total_seats)
        logger.info("Allocated {} seats among {} parties", total_seats, sum(1 for s in seats.values() if s))
        return seats

    def tabulate(self, votes: Mapping[str, int], total_seats: int = TOTAL_SEATS) -> ElectionResult:
        """Allocation with the vote tally it was derived from."""
        seats = self.allocate(votes, total_seats)
        return ElectionResult(seats=seats, votes=dict(votes), total_seats=total_seats)

    @staticmethod
    def _validate(votes: Mapping[str, int], total_seats: int) -> None:
        if not votes:
            raise InvalidInputError("Vote tally is empty")
        if isinstance(total_seats, bool) or not isinstance(total_seats, int) or total_seats <= 0:
            raise InvalidInputError(f"Total seats must be a positive integer, got {total_seats!r}")

        for party, count in votes.items():
            if isinstance(count, bool) or not isinstance(count, int):
                raise InvalidInputError(f"{party}: vote count must be an integer, got {count!r}")
            if count < 0:
                raise InvalidInputError(f"{party}: negative vote count {count}")

        if not any(votes.values()):
            raise InvalidInputError("Every vote count is zero; no seat can be awarded")
