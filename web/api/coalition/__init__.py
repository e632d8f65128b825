"""Coalition API."""

from web.api.coalition.views import (
    get_coalitions,
    get_compatibility,
    get_scenario,
    get_scenarios,
)

__all__ = [
    "get_coalitions",
    "get_scenarios",
    "get_scenario",
    "get_compatibility",
]
