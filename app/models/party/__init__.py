"""Party domain models - parties, catalogue and input schemas."""

from app.models.party.entities import Party, PartyCatalog
from app.models.party.schemas import (
    CatalogSchema,
    HistoricalCaseSchema,
    PartnershipSchema,
    PartySchema,
    ScenarioSchema,
)

__all__ = [
    "Party",
    "PartyCatalog",
    "PartySchema",
    "PartnershipSchema",
    "HistoricalCaseSchema",
    "ScenarioSchema",
    "CatalogSchema",
]
