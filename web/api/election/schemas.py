"""Election API response schemas."""

from pydantic import BaseModel


class SeatItem(BaseModel):
    """Seats won by a party."""

    party: str
    votes: int
    votes_pct: float
    seats: int
    seats_pct: float


class SeatAllocationResponse(BaseModel):
    """Seat allocation response."""

    total_seats: int
    total_votes: int
    items: list[SeatItem]
    gallagher: float
    loosemore_hanby: float


class MismatchItem(BaseModel):
    """Seat disagreement for a party."""

    party: str
    expected: int | None
    actual: int | None


class CertificationResponse(BaseModel):
    """Allocation compared with the published result."""

    is_valid: bool
    computed_total: int
    expected_total: int
    mismatches: list[MismatchItem]
    issues: list[str]
