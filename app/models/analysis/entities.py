"""Analysis run entities - one end-to-end pass over a tally."""

from dataclasses import dataclass

from app.models.coalition import Classification, Coalition, CoalitionAnalysis
from app.models.common import BaseEntity
from app.models.election import ElectionResult
from app.models.party import PartyCatalog


@dataclass(frozen=True)
class AnalysisRun(BaseEntity):
    """Seats, the seated catalogue and the ranked coalitions."""

    election: ElectionResult
    catalog: PartyCatalog
    coalitions: CoalitionAnalysis

    def to_dict(self) -> dict:
        return {
            "election": self.election.to_dict(),
            "parties": [p.to_dict() for p in self.catalog.parties],
            "coalitions": self.coalitions.to_dict(),
        }


@dataclass(frozen=True)
class ScenarioResult(BaseEntity):
    """A named coalition evaluated against an analysis run."""

    name: str
    coalition: Coalition
    classification: Classification
