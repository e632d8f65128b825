"""Pure math formulas - no side effects, easily testable."""
import heapq
import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from fractions import Fraction
from itertools import combinations

import numpy as np


def d_hondt(order: int) -> int:
    """D'Hondt divisor: 1, 2, 3..."""
    return order + 1


def highest_averages(
    votes: dict[str, int],
    n_seats: int,
    divisor: Callable[[int], int] = d_hondt,
) -> dict[str, int]:
    """Allocate seats one at a time to the highest current quotient.

    Quotients are exact fractions. Equal quotients go to the party with more
    raw votes, then to the lexicographically smaller id. Every party appears
    in the result, including those with zero seats.
    """
    seats = {p: 0 for p in votes}
    heap = [(-Fraction(v, divisor(0)), -v, p) for p, v in votes.items()]
    heapq.heapify(heap)

    for _ in range(n_seats):
        _, neg_votes, party = heapq.heappop(heap)
        seats[party] += 1
        heapq.heappush(heap, (-Fraction(-neg_votes, divisor(seats[party])), neg_votes, party))

    return seats


def majority_quota(total_seats: int) -> int:
    """Smallest seat count strictly above half."""
    return total_seats // 2 + 1


def gallagher(votes: dict[str, int], seats: dict[str, int]) -> float:
    """Gallagher least-squares disproportionality (0 = proportional)."""
    pairs = _vote_seat_fractions(votes, seats)
    return math.sqrt(0.5 * sum((v - s) ** 2 for v, s in pairs.values()))


def loosemore_hanby(votes: dict[str, int], seats: dict[str, int]) -> float:
    """Loosemore-Hanby disproportionality (0 = proportional)."""
    pairs = _vote_seat_fractions(votes, seats)
    return 0.5 * sum(abs(v - s) for v, s in pairs.values())


def _vote_seat_fractions(votes: dict[str, int], seats: dict[str, int]) -> dict[str, tuple[float, float]]:
    total_votes = sum(votes.values())
    total_seats = sum(seats.values())
    merged = {
        p: (v / total_votes if total_votes else 0.0, seats.get(p, 0) / total_seats if total_seats else 0.0)
        for p, v in votes.items()
    }
    for p, s in seats.items():
        if p not in merged:
            merged[p] = (0.0, s / total_seats if total_seats else 0.0)
    return merged


def ideological_compatibility(vectors: Sequence[Sequence[float]], axis_limit: float) -> float:
    """1 - mean pairwise L1 distance / maximum possible distance.

    Fewer than two vectors are maximally compatible by convention.
    """
    if len(vectors) < 2:
        return 1.0

    points = np.asarray(vectors, dtype=float)
    max_distance = 2 * axis_limit * points.shape[1]
    if max_distance == 0:
        return 1.0

    distances = [np.abs(points[i] - points[j]).sum() for i, j in combinations(range(len(points)), 2)]
    return float(1.0 - np.mean(distances) / max_distance)


def pair_average(ids: Sequence[str], table: Mapping[frozenset, float]) -> float:
    """Mean table value over unordered pairs present in the table (0 if none)."""
    values = [table[key] for key in (frozenset(pair) for pair in combinations(ids, 2)) if key in table]
    return sum(values) / len(values) if values else 0.0


def exclusion_fraction(excluded: dict[str, Iterable[str]]) -> float:
    """Fraction of ordered pairs (A, B), A != B, where A excludes B."""
    ids = list(excluded)
    n = len(ids)
    if n < 2:
        return 0.0

    members = set(ids)
    hits = sum(len((set(excluded[a]) & members) - {a}) for a in ids)
    return hits / (n * (n - 1))


def clamp01(x: float) -> float:
    return min(1.0, max(0.0, x))


def combination_count(n: int, min_size: int, max_size: int) -> int:
    """Number of subsets of n items with size in [min_size, max_size]."""
    return sum(math.comb(n, k) for k in range(min_size, max_size + 1))
