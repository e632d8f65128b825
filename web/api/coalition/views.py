"""Coalition API views - thin layer over services."""

from app.container import container
from app.models.coalition import Coalition
from settings import DEFAULT_MAX_SIZE, MIN_COALITION_SIZE
from web.api.errors import NotFoundError, validate_min_compatibility, validate_size_range

from .schemas import (
    CoalitionItem,
    CoalitionsResponse,
    CompatibilityResponse,
    ScenarioItem,
    ScenariosResponse,
)

# Cap on ranked entries per list in a response
MAX_ITEMS = 50


def _item(c: Coalition) -> CoalitionItem:
    return CoalitionItem(
        parties=list(c.members),
        seats=c.total_seats,
        compatibility=round(c.compatibility.final, 3),
        ideological=round(c.compatibility.ideological, 3),
        historical=round(c.compatibility.historical, 3),
        exclusion_penalty=round(c.compatibility.exclusion_penalty, 3),
        stability=round(c.stability, 3),
        size_class=c.size_class.value,
        orientation=c.orientation.value,
        violated_exclusions=[str(e) for e in c.violated_exclusions],
    )


def get_coalitions(
    min_size: int = MIN_COALITION_SIZE,
    max_size: int = DEFAULT_MAX_SIZE,
    min_compatibility: float = 0.0,
) -> CoalitionsResponse:
    """Get ranked coalitions for the reference tally."""
    validate_size_range(min_size, max_size)
    validate_min_compatibility(min_compatibility)
    run = container.analysis.analyze(min_size=min_size, max_size=max_size, min_compatibility=min_compatibility)
    result = run.coalitions

    return CoalitionsResponse(
        majority_threshold=result.majority_threshold,
        total_analyzed=result.total_analyzed,
        viable=[_item(c) for c in result.viable[:MAX_ITEMS]],
        minority=[_item(c) for c in result.minority[:MAX_ITEMS]],
        blocked_count=len(result.blocked),
        incompatible_count=len(result.incompatible),
        most_compatible=_item(result.most_compatible) if result.most_compatible else None,
        most_stable=_item(result.most_stable) if result.most_stable else None,
        historically_likely=_item(result.historically_likely) if result.historically_likely else None,
    )


def get_scenarios() -> ScenariosResponse:
    """Get all named scenarios scored against the reference tally."""
    run = container.analysis.analyze()
    items = [
        ScenarioItem(name=s.name, classification=s.classification.value, coalition=_item(s.coalition))
        for s in container.analysis.scenarios(run)
    ]
    return ScenariosResponse(majority_threshold=run.coalitions.majority_threshold, items=items)


def get_scenario(name: str) -> ScenarioItem:
    """Get one named scenario."""
    for item in get_scenarios().items:
        if item.name == name:
            return item
    raise NotFoundError(f"Unknown scenario: {name}")


def get_compatibility(parties: list[str]) -> CompatibilityResponse:
    """Get compatibility of an explicit party group."""
    members = container.reference.catalog().select(parties)
    score = container.scorer.score(members)

    return CompatibilityResponse(
        parties=parties,
        ideological=round(score.ideological, 3),
        historical=round(score.historical, 3),
        exclusion_penalty=round(score.exclusion_penalty, 3),
        final=round(score.final, 3),
        violated_exclusions=[str(e) for e in container.scorer.violations(members)],
    )
