"""Analysis services."""

from app.services.analysis.service import CoalitionAnalysisService

__all__ = ["CoalitionAnalysisService"]
