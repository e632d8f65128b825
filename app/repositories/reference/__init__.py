"""Reference datasets."""

from app.repositories.reference.dutch_2023 import DUTCH_2023
from app.repositories.reference.repository import ReferenceRepository, parse_dataset

__all__ = [
    "DUTCH_2023",
    "ReferenceRepository",
    "parse_dataset",
]
