"""Election domain models."""

from app.models.election.entities import ElectionResult

__all__ = [
    "ElectionResult",
]
