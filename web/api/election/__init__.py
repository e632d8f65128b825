"""Election API."""

from web.api.election.views import get_certification, get_seat_allocation

__all__ = [
    "get_seat_allocation",
    "get_certification",
]
