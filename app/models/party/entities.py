"""Party domain entities - parties and the per-run catalogue."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace

from app.errors import DataInconsistencyError, InvalidInputError
from app.models.common import BaseEntity
from settings import AXIS_LIMIT


@dataclass(frozen=True)
class Party(BaseEntity):
    """A party with its ideological position and coalition stance."""

    id: str
    name: str
    ideology: tuple[float, ...]
    votes: int = 0
    seats: int = 0
    preferred: frozenset[str] = field(default_factory=frozenset)
    excluded: frozenset[str] = field(default_factory=frozenset)
    flexibility: float = 50.0
    experience: float = 50.0
    leader: str | None = None

    @property
    def dimensions(self) -> int:
        return len(self.ideology)

    def excludes(self, other: "Party") -> bool:
        """Red line: this party refuses to govern with `other`."""
        return other.id in self.excluded


class PartyCatalog(Mapping[str, Party]):
    """Immutable, ordered id -> Party mapping for one analysis run.

    Ids are unique, every ideology vector has the same dimensionality and
    stays within [-axis_limit, axis_limit], flexibility and experience are
    within [0, 100].
    """

    def __init__(self, parties: Iterable[Party], axis_limit: float = AXIS_LIMIT):
        self._parties: dict[str, Party] = {}
        self.axis_limit = axis_limit

        for party in parties:
            if party.id in self._parties:
                raise InvalidInputError(f"Duplicate party id: {party.id}")
            self._parties[party.id] = party

        self._validate()

    def _validate(self) -> None:
        dims = {p.dimensions for p in self._parties.values()}
        if len(dims) > 1:
            raise DataInconsistencyError(f"Parties disagree on ideology dimensions: {sorted(dims)}")
        if 0 in dims:
            raise InvalidInputError("Ideology vectors must have at least one axis")

        for p in self._parties.values():
            if any(abs(x) > self.axis_limit for x in p.ideology):
                raise InvalidInputError(f"{p.id}: ideology outside [-{self.axis_limit}, {self.axis_limit}]")
            if p.votes < 0 or p.seats < 0:
                raise InvalidInputError(f"{p.id}: votes and seats must be non-negative")
            if not (0 <= p.flexibility <= 100 and 0 <= p.experience <= 100):
                raise InvalidInputError(f"{p.id}: flexibility and experience must be within [0, 100]")

    def __getitem__(self, party_id: str) -> Party:
        return self._parties[party_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._parties)

    def __len__(self) -> int:
        return len(self._parties)

    def __repr__(self) -> str:
        return f"PartyCatalog({list(self._parties)})"

    @property
    def parties(self) -> tuple[Party, ...]:
        return tuple(self._parties.values())

    @property
    def dimensions(self) -> int:
        return next(iter(self._parties.values())).dimensions if self._parties else 0

    def select(self, party_ids: Iterable[str]) -> list[Party]:
        """Parties for the given ids, in the given order."""
        ids = list(party_ids)
        unknown = [p for p in ids if p not in self._parties]
        if unknown:
            raise DataInconsistencyError(f"Unknown parties: {', '.join(unknown)}")
        return [self._parties[p] for p in ids]

    def seated(self) -> list[Party]:
        """Parties holding at least one seat."""
        return [p for p in self._parties.values() if p.seats > 0]

    def with_seats(self, seats: Mapping[str, int]) -> "PartyCatalog":
        """New catalogue with seats replaced (missing parties get zero)."""
        self._check_known(seats)
        return PartyCatalog(
            (replace(p, seats=seats.get(p.id, 0)) for p in self._parties.values()),
            axis_limit=self.axis_limit,
        )

    def with_votes(self, votes: Mapping[str, int]) -> "PartyCatalog":
        """New catalogue with votes replaced (missing parties get zero)."""
        self._check_known(votes)
        return PartyCatalog(
            (replace(p, votes=votes.get(p.id, 0)) for p in self._parties.values()),
            axis_limit=self.axis_limit,
        )

    def _check_known(self, mapping: Mapping[str, int]) -> None:
        unknown = sorted(set(mapping) - set(self._parties))
        if unknown:
            raise DataInconsistencyError(f"Not in catalogue: {', '.join(unknown)}")
