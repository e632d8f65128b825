"""Repositories package - read-only access to reference data."""

from app.repositories.base import BaseRepository
from app.repositories.reference import DUTCH_2023, ReferenceRepository, parse_dataset

__all__ = [
    # Base
    "BaseRepository",
    # Reference
    "DUTCH_2023",
    "ReferenceRepository",
    "parse_dataset",
]
