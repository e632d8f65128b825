"""Compatibility scoring for a set of parties."""

from collections.abc import Sequence

from loguru import logger

from app.errors import DataInconsistencyError, InsufficientPartiesError, InvalidInputError
from app.models.coalition import CompatibilityBreakdown, CompatibilityWeights, Exclusion, HistoricalTable
from app.models.party import Party
from helpers import formulas
from settings import AXIS_LIMIT


class CompatibilityScorer:
    """Scores how well a group of parties fits together.

    final = w_ideology * ideological + w_historical * historical - w_exclusion * penalty,
    clamped to [0, 1]. The result does not depend on the order of `parties`.
    """

    def __init__(
        self,
        table: HistoricalTable | None = None,
        weights: CompatibilityWeights | None = None,
        axis_limit: float = AXIS_LIMIT,
    ):
        self._table = table if table is not None else HistoricalTable()
        self._weights = weights or CompatibilityWeights()
        self._axis_limit = axis_limit
        logger.debug("CompatibilityScorer initialized ({} historical pairs)", len(self._table))

    @property
    def weights(self) -> CompatibilityWeights:
        return self._weights

    def score(self, parties: Sequence[Party]) -> CompatibilityBreakdown:
        members = self._canonical(parties)

        ideological = formulas.ideological_compatibility([p.ideology for p in members], self._axis_limit)
        historical = formulas.pair_average([p.id for p in members], self._table)
        penalty = formulas.exclusion_fraction({p.id: p.excluded for p in members})

        w = self._weights
        final = formulas.clamp01(w.ideology * ideological + w.historical * historical - w.exclusion * penalty)

        return CompatibilityBreakdown(
            ideological=ideological,
            historical=historical,
            exclusion_penalty=penalty,
            final=final,
        )

    def violations(self, parties: Sequence[Party]) -> tuple[Exclusion, ...]:
        """Red lines crossed inside the group, ordered by party id."""
        members = sorted(parties, key=lambda p: p.id)
        return tuple(Exclusion(a.id, b.id) for a in members for b in members if a.id != b.id and a.excludes(b))

    @staticmethod
    def _canonical(parties: Sequence[Party]) -> list[Party]:
        if len(parties) < 2:
            raise InsufficientPartiesError(f"Compatibility needs at least two parties, got {len(parties)}")

        ids = [p.id for p in parties]
        if len(set(ids)) != len(ids):
            raise InvalidInputError(f"Duplicate parties in group: {', '.join(ids)}")

        dims = {p.dimensions for p in parties}
        if len(dims) > 1:
            raise DataInconsistencyError(f"Parties disagree on ideology dimensions: {sorted(dims)}")

        return sorted(parties, key=lambda p: p.id)
