"""Services package - service class exports."""

from app.services.analysis.service import CoalitionAnalysisService
from app.services.coalition import CoalitionEnumerator, CoalitionRanker, CompatibilityScorer
from app.services.election import ElectionTabulator
from app.services.validation import HistoricalValidator

__all__ = [
    "CoalitionAnalysisService",
    "CoalitionEnumerator",
    "CoalitionRanker",
    "CompatibilityScorer",
    "ElectionTabulator",
    "HistoricalValidator",
]
