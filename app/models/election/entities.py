"""Election domain entities - tabulated seat allocations."""

from dataclasses import dataclass

from app.models.common import BaseEntity
from helpers import formulas


@dataclass(frozen=True)
class ElectionResult(BaseEntity):
    """Seat allocation derived from a vote tally. Never mutated."""

    seats: dict[str, int]
    votes: dict[str, int]
    total_seats: int

    @property
    def total_votes(self) -> int:
        return sum(self.votes.values())

    def vote_share(self, party_id: str) -> float:
        """Vote percentage (0-100)."""
        total = self.total_votes
        return self.votes.get(party_id, 0) / total * 100 if total else 0.0

    def seat_share(self, party_id: str) -> float:
        """Seat percentage (0-100)."""
        return self.seats.get(party_id, 0) / self.total_seats * 100

    @property
    def gallagher(self) -> float:
        return formulas.gallagher(self.votes, self.seats)

    @property
    def loosemore_hanby(self) -> float:
        return formulas.loosemore_hanby(self.votes, self.seats)

    def ordered(self) -> list[str]:
        """Party ids by seats, then votes, descending."""
        return sorted(self.seats, key=lambda p: (-self.seats[p], -self.votes.get(p, 0), p))
