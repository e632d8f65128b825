"""Models package - entities and schemas for all domains."""

from app.models.analysis import AnalysisRun, ScenarioResult
from app.models.coalition import (
    Classification,
    Coalition,
    CoalitionAnalysis,
    CompatibilityBreakdown,
    CompatibilityWeights,
    Exclusion,
    HistoricalTable,
    Orientation,
    SizeClass,
    StabilityWeights,
)
from app.models.common import BaseEntity
from app.models.election import ElectionResult
from app.models.party import CatalogSchema, Party, PartyCatalog, PartySchema
from app.models.validation import (
    CatalogReport,
    HistoricalCase,
    PredictionOutcome,
    PredictionReport,
    SeatMismatch,
    ValidationReport,
)

__all__ = [
    # Common
    "BaseEntity",
    # Party
    "Party",
    "PartyCatalog",
    "PartySchema",
    "CatalogSchema",
    # Election
    "ElectionResult",
    # Coalition
    "Classification",
    "Coalition",
    "CoalitionAnalysis",
    "CompatibilityBreakdown",
    "CompatibilityWeights",
    "StabilityWeights",
    "Exclusion",
    "HistoricalTable",
    "Orientation",
    "SizeClass",
    # Analysis
    "AnalysisRun",
    "ScenarioResult",
    # Validation
    "SeatMismatch",
    "ValidationReport",
    "HistoricalCase",
    "PredictionOutcome",
    "PredictionReport",
    "CatalogReport",
]
