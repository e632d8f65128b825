"""Scoring weights - tunable constants, not algorithmic law."""

from dataclasses import dataclass

from app.errors import InvalidInputError
from app.models.common import BaseEntity
from settings import (
    EXCLUSION_WEIGHT,
    EXPERIENCE_WEIGHT,
    FLEXIBILITY_WEIGHT,
    HISTORICAL_WEIGHT,
    IDEOLOGY_WEIGHT,
    SIZE_PENALTY_PER_PARTY,
    SIZE_WEIGHT,
)


def _check_non_negative(weights: BaseEntity) -> None:
    negative = [k for k, v in weights.to_dict().items() if v < 0]
    if negative:
        raise InvalidInputError(f"Weights must be non-negative: {', '.join(negative)}")


@dataclass(frozen=True)
class CompatibilityWeights(BaseEntity):
    """final = ideology*ideological + historical*historical - exclusion*penalty"""

    ideology: float = IDEOLOGY_WEIGHT
    historical: float = HISTORICAL_WEIGHT
    exclusion: float = EXCLUSION_WEIGHT

    def __post_init__(self):
        _check_non_negative(self)


@dataclass(frozen=True)
class StabilityWeights(BaseEntity):
    """Blend of member flexibility, coalition size and member experience."""

    flexibility: float = FLEXIBILITY_WEIGHT
    size: float = SIZE_WEIGHT
    experience: float = EXPERIENCE_WEIGHT
    size_penalty: float = SIZE_PENALTY_PER_PARTY

    def __post_init__(self):
        _check_non_negative(self)
