"""Analysis domain models."""

from app.models.analysis.entities import AnalysisRun, ScenarioResult

__all__ = [
    "AnalysisRun",
    "ScenarioResult",
]
