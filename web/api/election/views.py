"""Election API views - thin layer over services."""

from app.container import container
from web.api.errors import validate_total_seats

from .schemas import CertificationResponse, MismatchItem, SeatAllocationResponse, SeatItem


def get_seat_allocation(total_seats: int | None = None) -> SeatAllocationResponse:
    """Get D'Hondt seats for the reference tally."""
    seats = total_seats if total_seats is not None else container.reference.total_seats
    validate_total_seats(seats)
    election = container.tabulator.tabulate(container.reference.votes(), seats)

    items = [
        SeatItem(
            party=p,
            votes=election.votes[p],
            votes_pct=round(election.vote_share(p), 2),
            seats=election.seats[p],
            seats_pct=round(election.seat_share(p), 2),
        )
        for p in election.ordered()
    ]

    return SeatAllocationResponse(
        total_seats=seats,
        total_votes=election.total_votes,
        items=items,
        gallagher=round(election.gallagher * 100, 2),
        loosemore_hanby=round(election.loosemore_hanby * 100, 2),
    )


def get_certification() -> CertificationResponse:
    """Compare computed seats with the published seats."""
    election = container.tabulator.tabulate(container.reference.votes(), container.reference.total_seats)
    report = container.analysis.certify(election)

    return CertificationResponse(
        is_valid=report.is_valid,
        computed_total=report.computed_total,
        expected_total=report.expected_total,
        mismatches=[MismatchItem(party=m.party, expected=m.expected, actual=m.actual) for m in report.mismatches],
        issues=report.issues,
    )
