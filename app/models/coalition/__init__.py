"""Coalition domain models - candidates, scores, weights and history."""

from app.models.coalition.entities import (
    Classification,
    Coalition,
    CoalitionAnalysis,
    CompatibilityBreakdown,
    Exclusion,
    Orientation,
    SizeClass,
)
from app.models.coalition.history import HistoricalTable
from app.models.coalition.weights import CompatibilityWeights, StabilityWeights

__all__ = [
    "Classification",
    "Coalition",
    "CoalitionAnalysis",
    "CompatibilityBreakdown",
    "Exclusion",
    "Orientation",
    "SizeClass",
    "HistoricalTable",
    "CompatibilityWeights",
    "StabilityWeights",
]
