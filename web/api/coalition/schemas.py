"""Coalition API response schemas."""

from pydantic import BaseModel


class CoalitionItem(BaseModel):
    """A scored coalition."""

    parties: list[str]
    seats: int
    compatibility: float
    ideological: float
    historical: float
    exclusion_penalty: float
    stability: float
    size_class: str
    orientation: str
    violated_exclusions: list[str] = []


class CoalitionsResponse(BaseModel):
    """Ranked coalitions response."""

    majority_threshold: int
    total_analyzed: int
    viable: list[CoalitionItem]
    minority: list[CoalitionItem]
    blocked_count: int
    incompatible_count: int
    most_compatible: CoalitionItem | None = None
    most_stable: CoalitionItem | None = None
    historically_likely: CoalitionItem | None = None


class ScenarioItem(BaseModel):
    """A named coalition and where it lands."""

    name: str
    classification: str
    coalition: CoalitionItem


class ScenariosResponse(BaseModel):
    """Named scenarios response."""

    majority_threshold: int
    items: list[ScenarioItem]


class CompatibilityResponse(BaseModel):
    """Compatibility of an explicit party group."""

    parties: list[str]
    ideological: float
    historical: float
    exclusion_penalty: float
    final: float
    violated_exclusions: list[str]
