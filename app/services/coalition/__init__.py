"""Coalition services - scoring, enumeration and ranking."""

from app.services.coalition.compatibility import CompatibilityScorer
from app.services.coalition.enumerator import CoalitionEnumerator, strongest_first
from app.services.coalition.ranker import CoalitionRanker

__all__ = [
    "CompatibilityScorer",
    "CoalitionEnumerator",
    "CoalitionRanker",
    "strongest_first",
]
