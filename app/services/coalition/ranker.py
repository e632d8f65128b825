"""Coalition ranking - classification, scoring and highlights."""

from collections.abc import Iterable, Sequence
from dataclasses import replace

from loguru import logger

from app.errors import InvalidInputError
from app.models.coalition import Classification, Coalition, CoalitionAnalysis, StabilityWeights
from app.models.party import Party
from app.services.coalition.compatibility import CompatibilityScorer
from app.services.coalition.enumerator import strongest_first
from helpers import formulas
from settings import MINORITY_FLOOR


def _ranking_key(c: Coalition) -> tuple:
    return (-c.compatibility.final, -c.stability, c.members)


class CoalitionRanker:
    """Sorts candidates into viable, minority, blocked and incompatible.

    A coalition crossing any red line is blocked whatever its size.
    """

    def __init__(
        self,
        scorer: CompatibilityScorer,
        weights: StabilityWeights | None = None,
        minority_floor: int = MINORITY_FLOOR,
    ):
        self._scorer = scorer
        self._weights = weights or StabilityWeights()
        self._minority_floor = minority_floor
        logger.debug("CoalitionRanker initialized")

    def stability(self, parties: Sequence[Party]) -> float:
        """Expected durability in [0, 1]; larger coalitions are penalised."""
        w = self._weights
        n = len(parties)
        flexibility = sum(p.flexibility for p in parties) / n / 100
        experience = sum(p.experience for p in parties) / n / 100
        size = 1 - w.size_penalty * (n - 2)
        return formulas.clamp01(w.flexibility * flexibility + w.size * size + w.experience * experience)

    def evaluate(self, parties: Sequence[Party]) -> Coalition:
        """Fully scored coalition for an explicit party list."""
        ordered = tuple(strongest_first(parties))
        return self._scored(Coalition(parties=ordered, total_seats=sum(p.seats for p in ordered)))

    def classify(self, coalition: Coalition, majority_threshold: int, min_compatibility: float = 0.0) -> Classification:
        """Bucket for a scored coalition; red lines take precedence over seats."""
        if coalition.is_blocked:
            return Classification.BLOCKED
        if coalition.total_seats >= majority_threshold:
            if coalition.compatibility.final >= min_compatibility:
                return Classification.VIABLE
            return Classification.INCOMPATIBLE
        if coalition.total_seats >= self._minority_floor:
            return Classification.MINORITY
        return Classification.DISCARDED

    def rank(
        self,
        candidates: Iterable[Coalition],
        majority_threshold: int,
        min_compatibility: float = 0.0,
    ) -> CoalitionAnalysis:
        if majority_threshold <= 0:
            raise InvalidInputError(f"Majority threshold must be positive, got {majority_threshold}")
        if not 0 <= min_compatibility <= 1:
            raise InvalidInputError(f"min_compatibility must be within [0, 1], got {min_compatibility}")

        analysis = CoalitionAnalysis(majority_threshold=majority_threshold)
        buckets = {
            Classification.VIABLE: analysis.viable,
            Classification.MINORITY: analysis.minority,
            Classification.BLOCKED: analysis.blocked,
            Classification.INCOMPATIBLE: analysis.incompatible,
        }

        for candidate in candidates:
            analysis.total_analyzed += 1
            c = self._scored(candidate)
            bucket = buckets.get(self.classify(c, majority_threshold, min_compatibility))
            if bucket is not None:
                bucket.append(c)

        analysis.viable.sort(key=_ranking_key)
        analysis.minority.sort(key=_ranking_key)
        analysis.incompatible.sort(key=_ranking_key)
        analysis.blocked.sort(key=lambda c: (-c.total_seats, c.members))

        if analysis.viable:
            analysis.most_compatible = analysis.viable[0]
            analysis.most_stable = min(analysis.viable, key=lambda c: (-c.stability, -c.compatibility.final, c.members))
            analysis.historically_likely = min(
                analysis.viable, key=lambda c: (-c.compatibility.historical, -c.compatibility.final, c.members)
            )

        logger.info(
            "Ranked {} candidates: {} viable, {} minority, {} blocked, {} incompatible",
            analysis.total_analyzed,
            len(analysis.viable),
            len(analysis.minority),
            len(analysis.blocked),
            len(analysis.incompatible),
        )
        return analysis

    def _scored(self, coalition: Coalition) -> Coalition:
        return replace(
            coalition,
            compatibility=self._scorer.score(coalition.parties),
            stability=self.stability(coalition.parties),
            violated_exclusions=self._scorer.violations(coalition.parties),
        )
