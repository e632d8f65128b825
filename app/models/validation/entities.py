"""Validation domain entities - reports against reference data."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass(frozen=True)
class SeatMismatch(BaseEntity):
    """Seat count disagreement for one party. None means the key is missing."""

    party: str
    expected: int | None
    actual: int | None

    def __str__(self) -> str:
        return f"{self.party}: expected {self.expected}, got {self.actual}"


@dataclass
class ValidationReport(BaseEntity):
    """Computed allocation compared with a reference allocation."""

    is_valid: bool
    computed_total: int
    expected_total: int
    mismatches: list[SeatMismatch] = field(default_factory=list)
    issues: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class HistoricalCase(BaseEntity):
    """A past coalition attempt and whether it succeeded."""

    parties: tuple[str, ...]
    succeeded: bool
    label: str = ""


@dataclass(frozen=True)
class PredictionOutcome(BaseEntity):
    case: HistoricalCase
    predicted: bool
    correct: bool
    score: float | None = None


@dataclass
class PredictionReport(BaseEntity):
    """How well a ranked analysis agrees with historical outcomes."""

    correct: int
    total: int
    outcomes: list[PredictionOutcome] = field(default_factory=list)

    @property
    def accuracy(self) -> float:
        """Percentage of cases predicted correctly (0-100)."""
        return self.correct / self.total * 100 if self.total else 0.0


@dataclass
class CatalogReport(BaseEntity):
    """Data-integrity check of a catalogue against a vote tally."""

    valid: bool
    stats: dict[str, int] = field(default_factory=dict)
    issues: list[str] = field(default_factory=list)
