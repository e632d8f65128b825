"""Reference repository - fixed datasets parsed into domain entities."""

from typing import Any

from loguru import logger
from pydantic import ValidationError

from app.errors import InvalidInputError
from app.models.coalition import HistoricalTable
from app.models.party import CatalogSchema, PartyCatalog
from app.models.validation import HistoricalCase
from app.repositories.base import BaseRepository
from app.repositories.reference.dutch_2023 import DUTCH_2023
from settings import TOTAL_SEATS


def parse_dataset(data: dict[str, Any] | str) -> CatalogSchema:
    """Validate a raw dataset (dict or JSON text)."""
    try:
        if isinstance(data, str):
            return CatalogSchema.model_validate_json(data)
        return CatalogSchema.model_validate(data)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid catalogue data: {e.error_count()} error(s)\n{e}") from e


class ReferenceRepository(BaseRepository):
    """Read-only access to one reference dataset."""

    def __init__(self, dataset: dict[str, Any] | str = DUTCH_2023):
        super().__init__()
        self._schema = parse_dataset(dataset)
        logger.debug("Reference dataset: {} parties", len(self._schema.parties))

    @property
    def total_seats(self) -> int:
        return self._schema.total_seats or TOTAL_SEATS

    def catalog(self) -> PartyCatalog:
        """Party catalogue (seats as supplied, usually zero)."""
        return self._cached("catalog", self._schema.to_catalog)

    def votes(self) -> dict[str, int]:
        """Vote tally; falls back to per-party counts when none is given."""
        if self._schema.votes:
            return dict(self._schema.votes)
        return {p.id: p.votes for p in self._schema.parties}

    def expected_seats(self) -> dict[str, int]:
        return dict(self._schema.expected_seats)

    def historical_table(self) -> HistoricalTable:
        def build() -> HistoricalTable:
            return HistoricalTable((tuple(h.parties), h.score) for h in self._schema.historical)

        return self._cached("historical", build)

    def historical_cases(self) -> list[HistoricalCase]:
        return [HistoricalCase(tuple(c.parties), c.succeeded, c.label) for c in self._schema.cases]

    def scenarios(self) -> dict[str, list[str]]:
        """Named coalitions: {name: [party ids]}."""
        return {s.name: list(s.parties) for s in self._schema.scenarios}
