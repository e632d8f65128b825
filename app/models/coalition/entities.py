"""Coalition domain entities - candidates, scores and analysis results."""

from dataclasses import dataclass, field
from enum import StrEnum

from app.models.common import BaseEntity
from app.models.party import Party

# Average economic/social position beyond which a coalition leans left or right
ORIENTATION_CUTOFF = 3.0


class SizeClass(StrEnum):
    TWO_PARTY = "two_party"
    THREE_PARTY = "three_party"
    FOUR_PARTY = "four_party"
    GRAND = "grand"


class Orientation(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    CENTRE = "centre"


class Classification(StrEnum):
    """Ranker buckets. A coalition lands in exactly one."""

    VIABLE = "viable"
    MINORITY = "minority"
    BLOCKED = "blocked"
    INCOMPATIBLE = "incompatible"
    DISCARDED = "discarded"


@dataclass(frozen=True)
class Exclusion(BaseEntity):
    """`party` has ruled out governing with `excludes`."""

    party: str
    excludes: str

    def __str__(self) -> str:
        return f"{self.party} excludes {self.excludes}"


@dataclass(frozen=True)
class CompatibilityBreakdown(BaseEntity):
    """Compatibility components and the weighted, clamped final score."""

    ideological: float
    historical: float
    exclusion_penalty: float
    final: float


@dataclass(frozen=True)
class Coalition(BaseEntity):
    """A set of parties proposed to govern together.

    Parties are ordered strongest first. Scores are None until ranked.
    """

    parties: tuple[Party, ...]
    total_seats: int
    compatibility: CompatibilityBreakdown | None = None
    stability: float | None = None
    violated_exclusions: tuple[Exclusion, ...] = ()

    @property
    def members(self) -> tuple[str, ...]:
        return tuple(p.id for p in self.parties)

    @property
    def size(self) -> int:
        return len(self.parties)

    @property
    def is_blocked(self) -> bool:
        return bool(self.violated_exclusions)

    @property
    def size_class(self) -> SizeClass:
        if self.size <= 2:
            return SizeClass.TWO_PARTY
        if self.size == 3:
            return SizeClass.THREE_PARTY
        if self.size == 4:
            return SizeClass.FOUR_PARTY
        return SizeClass.GRAND

    @property
    def orientation(self) -> Orientation:
        """Lean from the average of the first two axes (economic, social)."""
        if not self.parties or self.parties[0].dimensions < 2:
            return Orientation.CENTRE

        economic = sum(p.ideology[0] for p in self.parties) / self.size
        social = sum(p.ideology[1] for p in self.parties) / self.size

        if economic < -ORIENTATION_CUTOFF and social > ORIENTATION_CUTOFF:
            return Orientation.LEFT
        if economic > ORIENTATION_CUTOFF and social < -ORIENTATION_CUTOFF:
            return Orientation.RIGHT
        return Orientation.CENTRE

    def __str__(self) -> str:
        score = f", {self.compatibility.final:.2f} compatibility" if self.compatibility else ""
        return f"{'-'.join(self.members)} ({self.total_seats} seats{score})"


@dataclass
class CoalitionAnalysis(BaseEntity):
    """Ranked outcome of one analysis call."""

    majority_threshold: int
    viable: list[Coalition] = field(default_factory=list)
    minority: list[Coalition] = field(default_factory=list)
    blocked: list[Coalition] = field(default_factory=list)
    incompatible: list[Coalition] = field(default_factory=list)
    most_compatible: Coalition | None = None
    most_stable: Coalition | None = None
    historically_likely: Coalition | None = None
    total_analyzed: int = 0

    def classify(self, coalition: Coalition) -> Classification:
        """Bucket a coalition belongs to in this analysis."""
        for bucket, items in (
            (Classification.VIABLE, self.viable),
            (Classification.MINORITY, self.minority),
            (Classification.BLOCKED, self.blocked),
            (Classification.INCOMPATIBLE, self.incompatible),
        ):
            if any(c.members == coalition.members for c in items):
                return bucket
        return Classification.DISCARDED
