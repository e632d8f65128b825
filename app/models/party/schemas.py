"""Party catalogue input schemas (JSON)."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.models.party.entities import Party, PartyCatalog
from settings import AXIS_LIMIT

AxisPosition = Annotated[float, Field(ge=-AXIS_LIMIT, le=AXIS_LIMIT)]


class PartySchema(BaseModel):
    """A party entry in a catalogue file."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    name: str = Field(alias="displayName")
    ideology: list[AxisPosition] = Field(alias="ideologicalVector", min_length=1)
    votes: int = Field(default=0, ge=0)
    seats: int = Field(default=0, ge=0)
    preferred: list[str] = Field(alias="preferredPartners", default=[])
    excluded: list[str] = Field(alias="excludedPartners", default=[])
    flexibility: float = Field(default=50.0, ge=0, le=100)
    experience: float = Field(default=50.0, ge=0, le=100)
    leader: str | None = None

    def to_entity(self) -> Party:
        return Party(
            id=self.id,
            name=self.name,
            ideology=tuple(self.ideology),
            votes=self.votes,
            seats=self.seats,
            preferred=frozenset(self.preferred),
            excluded=frozenset(self.excluded),
            flexibility=self.flexibility,
            experience=self.experience,
            leader=self.leader,
        )


class PartnershipSchema(BaseModel):
    """Historical partnership score for an unordered pair."""

    parties: tuple[str, str]
    score: float = Field(ge=-1, le=1)


class HistoricalCaseSchema(BaseModel):
    """A past coalition attempt and whether it succeeded."""

    label: str = ""
    parties: list[str] = Field(min_length=2)
    succeeded: bool


class ScenarioSchema(BaseModel):
    """A named coalition to evaluate."""

    name: str
    parties: list[str] = Field(min_length=2)


class CatalogSchema(BaseModel):
    """A complete analysis input file."""

    model_config = ConfigDict(populate_by_name=True)

    parties: list[PartySchema] = Field(min_length=1)
    votes: dict[str, int] = {}
    total_seats: int | None = Field(alias="totalSeats", default=None, gt=0)
    expected_seats: dict[str, int] = Field(alias="expectedSeats", default={})
    historical: list[PartnershipSchema] = []
    cases: list[HistoricalCaseSchema] = []
    scenarios: list[ScenarioSchema] = []

    @model_validator(mode="after")
    def check_references(self) -> "CatalogSchema":
        """Scenarios, cases and partnerships may only name catalogue parties."""
        known = {p.id for p in self.parties}
        groups = [
            *((f"scenario {s.name!r}", s.parties) for s in self.scenarios),
            *((f"case {c.label or '-'.join(c.parties)!r}", c.parties) for c in self.cases),
            *((f"partnership {'-'.join(h.parties)}", h.parties) for h in self.historical),
        ]
        for label, ids in groups:
            unknown = sorted(set(ids) - known)
            if unknown:
                raise ValueError(f"{label} names unknown parties: {', '.join(unknown)}")
            if len(set(ids)) != len(ids):
                raise ValueError(f"{label} repeats a party")
        return self

    def to_catalog(self) -> PartyCatalog:
        return PartyCatalog(p.to_entity() for p in self.parties)
