"""Validation domain models."""

from app.models.validation.entities import (
    CatalogReport,
    HistoricalCase,
    PredictionOutcome,
    PredictionReport,
    SeatMismatch,
    ValidationReport,
)

__all__ = [
    "SeatMismatch",
    "ValidationReport",
    "HistoricalCase",
    "PredictionOutcome",
    "PredictionReport",
    "CatalogReport",
]
