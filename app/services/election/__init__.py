"""Election services."""

from app.services.election.tabulator import ElectionTabulator

__all__ = ["ElectionTabulator"]
