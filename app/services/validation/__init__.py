"""Validation services."""

from app.services.validation.historical import HistoricalValidator

__all__ = ["HistoricalValidator"]
