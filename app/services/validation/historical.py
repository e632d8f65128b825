"""Validation against reference results and historical outcomes."""

from collections.abc import Iterable, Mapping

from loguru import logger

from app.models.coalition import CoalitionAnalysis
from app.models.party import PartyCatalog
from app.models.validation import (
    CatalogReport,
    HistoricalCase,
    PredictionOutcome,
    PredictionReport,
    SeatMismatch,
    ValidationReport,
)
from settings import PREDICTION_SCORE_CUTOFF


class HistoricalValidator:
    """Compares engine output with reference data. Reports, never raises."""

    def __init__(self, score_cutoff: float = PREDICTION_SCORE_CUTOFF):
        self._score_cutoff = score_cutoff
        logger.debug("HistoricalValidator initialized")

    def validate(self, computed: Mapping[str, int], expected: Mapping[str, int]) -> ValidationReport:
        """Per-party and total seat comparison. A party absent on either side is a mismatch."""
        mismatches: list[SeatMismatch] = []
        issues: list[str] = []

        for party in [*expected, *(p for p in computed if p not in expected)]:
            got = computed.get(party)
            want = expected.get(party)

            if got is None:
                mismatches.append(SeatMismatch(party, want, None))
                issues.append(f"{party} missing from computed result")
            elif want is None:
                mismatches.append(SeatMismatch(party, None, got))
                issues.append(f"{party} missing from expected result")
            elif got != want:
                mismatches.append(SeatMismatch(party, want, got))

        computed_total = sum(computed.values())
        expected_total = sum(expected.values())
        if computed_total != expected_total:
            issues.append(f"Seat totals differ: computed {computed_total}, expected {expected_total}")

        report = ValidationReport(
            is_valid=not mismatches and not issues,
            computed_total=computed_total,
            expected_total=expected_total,
            mismatches=mismatches,
            issues=issues,
        )
        if report.is_valid:
            logger.info("Seat allocation matches reference ({} seats)", computed_total)
        else:
            logger.warning("Seat allocation differs from reference: {} mismatches", len(mismatches))
        return report

    def validate_predictions(self, analysis: CoalitionAnalysis, cases: Iterable[HistoricalCase]) -> PredictionReport:
        """Agreement between ranked viable coalitions and known outcomes.

        A case is predicted to succeed when the best-ranked viable coalition
        containing all its parties scores at least the cutoff. With no such
        coalition the prediction is failure, and the case still counts toward
        accuracy: unmatched failed cases are correct, unmatched successes are not.
        """
        outcomes = []
        for case in cases:
            wanted = set(case.parties)
            match = next((c for c in analysis.viable if wanted <= set(c.members)), None)

            score = match.compatibility.final if match else None
            predicted = score is not None and score >= self._score_cutoff
            outcomes.append(PredictionOutcome(case, predicted, predicted == case.succeeded, score))

        report = PredictionReport(
            correct=sum(o.correct for o in outcomes),
            total=len(outcomes),
            outcomes=outcomes,
        )
        logger.info("Historical prediction accuracy: {:.1f}% ({}/{})", report.accuracy, report.correct, report.total)
        return report

    def validate_catalog(self, catalog: PartyCatalog, votes: Mapping[str, int]) -> CatalogReport:
        """Cross-reference integrity of a catalogue and a vote tally."""
        issues: list[str] = []
        known = set(catalog)

        for party in catalog.parties:
            for target in sorted(party.excluded - known):
                issues.append(f"{party.id} excludes unknown party {target}")
            for target in sorted(party.preferred - known):
                issues.append(f"{party.id} prefers unknown party {target}")
            if party.id in party.excluded:
                issues.append(f"{party.id} excludes itself")
            if party.id not in votes:
                issues.append(f"{party.id} has no vote count")

        for party in votes:
            if party not in known:
                issues.append(f"Votes for party not in catalogue: {party}")

        stats = {
            "parties": len(catalog),
            "with_votes": sum(1 for p in catalog if p in votes),
            "exclusions": sum(len(p.excluded) for p in catalog.parties),
            "total_votes": sum(votes.values()),
        }

        for issue in issues:
            logger.warning(issue)
        return CatalogReport(valid=not issues, stats=stats, issues=issues)
