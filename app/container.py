"""Dependency Injection container - initialized at app startup."""

from typing import Any

from app.models.coalition import CompatibilityWeights, StabilityWeights
from app.repositories.reference import DUTCH_2023, ReferenceRepository
from app.services.analysis.service import CoalitionAnalysisService
from app.services.coalition import CoalitionEnumerator, CoalitionRanker, CompatibilityScorer
from app.services.election import ElectionTabulator
from app.services.validation import HistoricalValidator
from settings import MINORITY_FLOOR


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        dataset: dict[str, Any] | str = DUTCH_2023,
        compatibility_weights: CompatibilityWeights | None = None,
        stability_weights: StabilityWeights | None = None,
        minority_floor: int = MINORITY_FLOOR,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self.reference = ReferenceRepository(dataset)

        # Services (with injected repos)
        self.tabulator = ElectionTabulator()
        self.enumerator = CoalitionEnumerator()
        self.validator = HistoricalValidator()

        self.scorer = CompatibilityScorer(
            table=self.reference.historical_table(),
            weights=compatibility_weights,
            axis_limit=self.reference.catalog().axis_limit,
        )

        self.ranker = CoalitionRanker(
            scorer=self.scorer,
            weights=stability_weights,
            minority_floor=minority_floor,
        )

        self.analysis = CoalitionAnalysisService(
            repo=self.reference,
            tabulator=self.tabulator,
            enumerator=self.enumerator,
            ranker=self.ranker,
            validator=self.validator,
        )

        self._initialized = True

    def reset(self) -> None:
        """Forget all instances so `init` can run again."""
        self._initialized = False


# Global container instance
container = Container()
