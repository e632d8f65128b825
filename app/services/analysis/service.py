"""Coalition analysis service - votes to ranked coalitions."""

from collections.abc import Mapping

import polars as pl
from loguru import logger

from app.errors import DataInconsistencyError
from app.models.analysis import AnalysisRun, ScenarioResult
from app.models.coalition import Coalition
from app.models.election import ElectionResult
from app.models.party import PartyCatalog
from app.models.validation import CatalogReport, PredictionReport, ValidationReport
from app.repositories.reference import ReferenceRepository
from app.services.coalition import CoalitionEnumerator, CoalitionRanker
from app.services.election import ElectionTabulator
from app.services.validation import HistoricalValidator
from helpers import formulas
from settings import DEFAULT_MAX_SIZE, MIN_COALITION_SIZE


class CoalitionAnalysisService:
    """Tabulates a tally, seats the catalogue and ranks coalitions."""

    def __init__(
        self,
        repo: ReferenceRepository,
        tabulator: ElectionTabulator,
        enumerator: CoalitionEnumerator,
        ranker: CoalitionRanker,
        validator: HistoricalValidator,
    ):
        self._repo = repo
        self._tabulator = tabulator
        self._enumerator = enumerator
        self._ranker = ranker
        self._validator = validator
        logger.debug("CoalitionAnalysisService initialized")

    def analyze(
        self,
        votes: Mapping[str, int] | None = None,
        catalog: PartyCatalog | None = None,
        total_seats: int | None = None,
        min_size: int = MIN_COALITION_SIZE,
        max_size: int = DEFAULT_MAX_SIZE,
        min_compatibility: float = 0.0,
    ) -> AnalysisRun:
        """Full pass; anything omitted comes from the reference dataset."""
        votes = dict(votes) if votes is not None else self._repo.votes()
        catalog = catalog if catalog is not None else self._repo.catalog()
        total_seats = total_seats if total_seats is not None else self._repo.total_seats

        self._cross_check(votes, catalog)

        # Range errors surface before any seat is allocated
        self._enumerator.count(len(catalog), min_size, max_size)

        election = self._tabulator.tabulate(votes, total_seats)
        seated = catalog.with_seats(election.seats).with_votes(votes)

        candidates = self._enumerator.enumerate(seated.seated(), min_size, max_size)
        coalitions = self._ranker.rank(candidates, formulas.majority_quota(total_seats), min_compatibility)

        logger.info(
            "Analysis complete: {} seats, {} viable coalitions",
            total_seats,
            len(coalitions.viable),
        )
        return AnalysisRun(election=election, catalog=seated, coalitions=coalitions)

    def scenarios(self, run: AnalysisRun) -> list[ScenarioResult]:
        """Named reference coalitions scored against a run."""
        threshold = run.coalitions.majority_threshold
        results = []
        for name, ids in self._repo.scenarios().items():
            coalition = self._ranker.evaluate(run.catalog.select(ids))
            results.append(ScenarioResult(name, coalition, self._ranker.classify(coalition, threshold)))
        return results

    def certify(self, election: ElectionResult, expected: Mapping[str, int] | None = None) -> ValidationReport:
        """Seat allocation against a reference allocation."""
        expected = expected if expected is not None else self._repo.expected_seats()
        return self._validator.validate(election.seats, expected)

    def predictions(self, run: AnalysisRun) -> PredictionReport:
        return self._validator.validate_predictions(run.coalitions, self._repo.historical_cases())

    def catalog_report(
        self,
        votes: Mapping[str, int] | None = None,
        catalog: PartyCatalog | None = None,
    ) -> CatalogReport:
        votes = votes if votes is not None else self._repo.votes()
        catalog = catalog if catalog is not None else self._repo.catalog()
        return self._validator.validate_catalog(catalog, votes)

    @staticmethod
    def seat_table(election: ElectionResult) -> pl.DataFrame:
        """One row per party: votes, seats and shares, strongest first."""
        return pl.DataFrame(
            [
                {
                    "party": p,
                    "votes": election.votes.get(p, 0),
                    "votes_pct": round(election.vote_share(p), 2),
                    "seats": election.seats[p],
                    "seats_pct": round(election.seat_share(p), 2),
                }
                for p in election.ordered()
            ],
            schema={
                "party": pl.Utf8,
                "votes": pl.Int64,
                "votes_pct": pl.Float64,
                "seats": pl.Int64,
                "seats_pct": pl.Float64,
            },
        )

    @staticmethod
    def coalition_table(coalitions: list[Coalition]) -> pl.DataFrame:
        return pl.DataFrame(
            [
                {
                    "coalition": "-".join(c.members),
                    "seats": c.total_seats,
                    "compatibility": round(c.compatibility.final, 3),
                    "ideological": round(c.compatibility.ideological, 3),
                    "historical": round(c.compatibility.historical, 3),
                    "stability": round(c.stability, 3),
                    "type": c.size_class.value,
                    "orientation": c.orientation.value,
                }
                for c in coalitions
            ],
            schema={
                "coalition": pl.Utf8,
                "seats": pl.Int64,
                "compatibility": pl.Float64,
                "ideological": pl.Float64,
                "historical": pl.Float64,
                "stability": pl.Float64,
                "type": pl.Utf8,
                "orientation": pl.Utf8,
            },
        )

    @staticmethod
    def _cross_check(votes: Mapping[str, int], catalog: PartyCatalog) -> None:
        unknown = sorted(set(votes) - set(catalog))
        missing = sorted(set(catalog) - set(votes))
        if unknown or missing:
            parts = []
            if unknown:
                parts.append(f"votes for unknown parties: {', '.join(unknown)}")
            if missing:
                parts.append(f"no votes for: {', '.join(missing)}")
            raise DataInconsistencyError("Votes and catalogue disagree; " + "; ".join(parts))
