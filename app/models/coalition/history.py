"""Historical partnership table - unordered party pairs to signed scores."""

from collections.abc import Iterable, Iterator, Mapping

from app.errors import DataInconsistencyError, InvalidInputError


class HistoricalTable(Mapping[frozenset, float]):
    """Symmetric lookup: table.get_pair("A", "B") == table.get_pair("B", "A").

    Scores are within [-1, 1]; positive for successful past partnerships,
    negative for notoriously difficult ones.
    """

    def __init__(
        self,
        pairs: Mapping[tuple[str, str], float] | Iterable[tuple[tuple[str, str], float]] | None = None,
    ):
        self._scores: dict[frozenset, float] = {}
        items = pairs.items() if isinstance(pairs, Mapping) else (pairs or ())
        for (a, b), score in items:
            if a == b:
                raise InvalidInputError(f"Partnership needs two distinct parties: {a}")
            if not -1 <= score <= 1:
                raise InvalidInputError(f"Partnership score out of [-1, 1]: {a}-{b}={score}")
            key = frozenset((a, b))
            if key in self._scores and self._scores[key] != score:
                raise DataInconsistencyError(f"Conflicting scores for {a}-{b}: {self._scores[key]} vs {score}")
            self._scores[key] = score

    def __getitem__(self, key: frozenset) -> float:
        return self._scores[key]

    def __iter__(self) -> Iterator[frozenset]:
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def get_pair(self, a: str, b: str) -> float | None:
        return self._scores.get(frozenset((a, b)))
