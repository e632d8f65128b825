import pytest

from app.repositories.reference import ReferenceRepository

# D'Hondt outcome of the reference tally at 150 seats
DUTCH_DHONDT = {
    "GL-PvdA": 31,
    "PVV": 29,
    "VVD": 25,
    "BBB": 18,
    "NSC": 15,
    "D66": 6,
    "CDA": 4,
    "SP": 4,
    "DENK": 3,
    "PvdD": 3,
    "CU": 3,
    "Volt": 3,
    "SGP": 3,
    "FvD": 2,
    "JA21": 1,
}


@pytest.fixture(scope="session")
def dutch_dhondt() -> dict[str, int]:
    return dict(DUTCH_DHONDT)


@pytest.fixture(scope="session")
def repo() -> ReferenceRepository:
    return ReferenceRepository()


@pytest.fixture(scope="session")
def dutch_votes(repo) -> dict[str, int]:
    return repo.votes()


@pytest.fixture(scope="session")
def dutch_seated(repo):
    """Reference catalogue with D'Hondt seats filled in."""
    return repo.catalog().with_seats(DUTCH_DHONDT).with_votes(repo.votes())
