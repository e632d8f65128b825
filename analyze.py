#!/usr/bin/env python3
"""
Allocate seats and rank governing coalitions.

Usage:
    python analyze.py                          # Dutch 2023 reference tally
    python analyze.py --seats 100              # Different parliament size
    python analyze.py --max-size 3             # Coalitions of at most 3 parties
    python analyze.py --min-compat 0.5         # Drop weak majorities to "incompatible"
    python analyze.py --catalog parties.json   # Own catalogue and votes
    python analyze.py --validate               # Compare with published seats and history
    python analyze.py --verbose                # Debug logging
    python analyze.py --log-file               # Also write logs/coalition_<date>.log
"""

import sys
from pathlib import Path

import polars as pl

from app.container import container
from app.errors import CoalitionError
from app.models.analysis import AnalysisRun
from settings import DEFAULT_MAX_SIZE, MIN_COALITION_SIZE
from settings.logging import setup_logging

# Rows shown per coalition table
TOP_N = 10


def _option(args: list[str], name: str, cast, default):
    """Value following `name` in args, cast; default when absent."""
    if name not in args:
        return default
    i = args.index(name)
    if i + 1 >= len(args):
        print(__doc__)
        sys.exit(1)
    return cast(args[i + 1])


def print_run(run: AnalysisRun) -> None:
    service = container.analysis
    election = run.election
    result = run.coalitions

    print("\n" + "=" * 60)
    print(f"SEAT ALLOCATION ({election.total_seats} seats, {election.total_votes:,} votes)")
    print("=" * 60)
    print(service.seat_table(election))
    print(f"Gallagher index: {election.gallagher * 100:.2f}")

    print("\n" + "=" * 60)
    print(f"COALITIONS (majority {result.majority_threshold}, {result.total_analyzed:,} analyzed)")
    print("=" * 60)
    print(f"Viable: {len(result.viable)}  Minority: {len(result.minority)}  ", end="")
    print(f"Blocked: {len(result.blocked)}  Incompatible: {len(result.incompatible)}")

    if result.viable:
        print(f"\nTop {min(TOP_N, len(result.viable))} viable:")
        print(service.coalition_table(result.viable[:TOP_N]))
        print(f"\nMost compatible:     {result.most_compatible}")
        print(f"Most stable:         {result.most_stable}")
        print(f"Historically likely: {result.historically_likely}")
    else:
        print("\nNo viable majority coalition.")

    if result.minority:
        print(f"\nTop {min(TOP_N, len(result.minority))} minority:")
        print(service.coalition_table(result.minority[:TOP_N]))

    scenarios = service.scenarios(run)
    if scenarios:
        print("\nScenarios:")
        for s in scenarios:
            print(f"  {s.name:<22} {s.classification.value:<13} {s.coalition}")
            for exclusion in s.coalition.violated_exclusions:
                print(f"  {'':<22} ⚠️  {exclusion}")


def run_validation(run: AnalysisRun) -> bool:
    """Print validation reports; True when everything checks out."""
    service = container.analysis

    print("\n" + "=" * 60)
    print("VALIDATION REPORT")
    print("=" * 60)

    catalog = service.catalog_report(catalog=run.catalog)
    status = "✅" if catalog.valid else "❌"
    print(f"\nCatalogue {status}")
    for key, value in catalog.stats.items():
        print(f"  {key}: {value:,}")
    for issue in catalog.issues:
        print(f"  ⚠️  {issue}")

    all_valid = catalog.valid
    if container.reference.expected_seats():
        seats = service.certify(run.election)
        status = "✅" if seats.is_valid else "❌"
        print(f"\nSeats {status} (computed {seats.computed_total}, expected {seats.expected_total})")
        for m in seats.mismatches:
            print(f"  ⚠️  {m}")
        for issue in seats.issues:
            print(f"  ⚠️  {issue}")
        all_valid = all_valid and seats.is_valid

    cases = container.reference.historical_cases()
    if cases:
        predictions = service.predictions(run)
        print(f"\nHistory: {predictions.accuracy:.1f}% ({predictions.correct}/{predictions.total})")
        for o in predictions.outcomes:
            mark = "✅" if o.correct else "❌"
            score = f"{o.score:.2f}" if o.score is not None else "-"
            print(f"  {mark} {o.case.label or '-'.join(o.case.parties)}: score {score}")

    print("\n" + "=" * 60)
    print("✅ All checks passed!" if all_valid else "❌ Some checks failed.")
    print("=" * 60 + "\n")
    return all_valid


def main() -> int:
    args = sys.argv[1:]

    if "-h" in args or "--help" in args:
        print(__doc__)
        return 0

    logger = setup_logging(level="DEBUG" if "--verbose" in args else None, to_file="--log-file" in args)
    pl.Config.set_tbl_rows(-1)

    try:
        catalog_path = _option(args, "--catalog", Path, None)
        container.reset()
        if catalog_path is not None:
            container.init(dataset=catalog_path.read_text(encoding="utf-8"))
        else:
            container.init()

        run = container.analysis.analyze(
            total_seats=_option(args, "--seats", int, None),
            min_size=MIN_COALITION_SIZE,
            max_size=_option(args, "--max-size", int, DEFAULT_MAX_SIZE),
            min_compatibility=_option(args, "--min-compat", float, 0.0),
        )
        print_run(run)

        if "--validate" in args:
            return 0 if run_validation(run) else 1
    except CoalitionError as e:
        logger.error("{}: {}", type(e).__name__, e.message)
        return 2
    except (OSError, ValueError) as e:
        logger.error("Bad argument: {}", e)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
