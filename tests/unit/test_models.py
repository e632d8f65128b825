"""Tests for domain models, schemas and the reference repository."""

import json

import pytest

from app.errors import DataInconsistencyError, InvalidInputError
from app.models.coalition import Coalition, HistoricalTable, Orientation, SizeClass
from app.models.election import ElectionResult
from app.models.party import CatalogSchema, Party, PartyCatalog, PartySchema
from app.repositories.reference import DUTCH_2023, ReferenceRepository


def party(pid: str, ideology=(0.0, 0.0), **kwargs) -> Party:
    return Party(id=pid, name=pid, ideology=tuple(ideology), **kwargs)


class TestPartyCatalog:
    def test_ordered_mapping(self):
        catalog = PartyCatalog([party("B"), party("A")])
        assert list(catalog) == ["B", "A"]
        assert catalog["A"].name == "A"
        assert catalog.dimensions == 2

    def test_duplicate_id(self):
        with pytest.raises(InvalidInputError):
            PartyCatalog([party("A"), party("A")])

    def test_mixed_dimensions(self):
        with pytest.raises(DataInconsistencyError):
            PartyCatalog([party("A", (0, 0)), party("B", (0, 0, 0))])

    def test_axis_bounds(self):
        with pytest.raises(InvalidInputError):
            PartyCatalog([party("A", (11, 0))])

    def test_flexibility_bounds(self):
        with pytest.raises(InvalidInputError):
            PartyCatalog([party("A", flexibility=101)])

    def test_negative_seats(self):
        with pytest.raises(InvalidInputError):
            PartyCatalog([party("A", seats=-1)])

    def test_with_seats_is_new(self):
        catalog = PartyCatalog([party("A"), party("B")])
        seated = catalog.with_seats({"A": 3})
        assert seated["A"].seats == 3
        assert seated["B"].seats == 0
        assert catalog["A"].seats == 0
        assert [p.id for p in seated.seated()] == ["A"]

    def test_with_seats_unknown(self):
        with pytest.raises(DataInconsistencyError):
            PartyCatalog([party("A")]).with_seats({"Z": 1})

    def test_select_unknown(self):
        with pytest.raises(DataInconsistencyError):
            PartyCatalog([party("A")]).select(["A", "Z"])


class TestHistoricalTable:
    def test_symmetric(self):
        table = HistoricalTable({("A", "B"): 0.5})
        assert table.get_pair("A", "B") == table.get_pair("B", "A") == 0.5
        assert table.get_pair("A", "C") is None

    def test_consistent_duplicate(self):
        assert len(HistoricalTable([(("A", "B"), 0.5), (("B", "A"), 0.5)])) == 1

    def test_conflict(self):
        with pytest.raises(DataInconsistencyError):
            HistoricalTable([(("A", "B"), 0.5), (("B", "A"), -0.5)])

    def test_out_of_range(self):
        with pytest.raises(InvalidInputError):
            HistoricalTable({("A", "B"): 1.5})

    def test_self_pair(self):
        with pytest.raises(InvalidInputError):
            HistoricalTable({("A", "A"): 0.5})


class TestCoalition:
    def test_size_class(self):
        parties = tuple(party(p) for p in "ABCDE")
        assert Coalition(parties[:2], 0).size_class == SizeClass.TWO_PARTY
        assert Coalition(parties[:3], 0).size_class == SizeClass.THREE_PARTY
        assert Coalition(parties[:4], 0).size_class == SizeClass.FOUR_PARTY
        assert Coalition(parties, 0).size_class == SizeClass.GRAND

    def test_orientation(self, repo):
        catalog = repo.catalog()
        assert Coalition(tuple(catalog.select(["GL-PvdA", "SP"])), 0).orientation == Orientation.LEFT
        assert Coalition(tuple(catalog.select(["PVV", "JA21", "FvD"])), 0).orientation == Orientation.RIGHT
        assert Coalition(tuple(catalog.select(["VVD", "D66"])), 0).orientation == Orientation.CENTRE

    def test_str(self):
        assert str(Coalition((party("A"), party("B")), 80)) == "A-B (80 seats)"


class TestElectionResult:
    def test_shares(self):
        result = ElectionResult(seats={"A": 3, "B": 1}, votes={"A": 60, "B": 40}, total_seats=4)
        assert result.vote_share("A") == 60.0
        assert result.seat_share("B") == 25.0
        assert result.loosemore_hanby == pytest.approx(0.15)
        assert result.ordered() == ["A", "B"]


class TestSchemas:
    def test_aliases(self):
        schema = PartySchema.model_validate(
            {"id": "A", "displayName": "Alpha", "ideologicalVector": [1, 2], "excludedPartners": ["B"]}
        )
        entity = schema.to_entity()
        assert entity.name == "Alpha"
        assert entity.ideology == (1.0, 2.0)
        assert entity.excluded == frozenset({"B"})

    def test_field_names_accepted(self):
        schema = PartySchema(id="A", name="Alpha", ideology=[0.0])
        assert schema.flexibility == 50.0

    def test_reference_dataset_parses(self):
        schema = CatalogSchema.model_validate(DUTCH_2023)
        assert len(schema.parties) == 15
        assert schema.total_seats == 150


class TestReferenceRepository:
    def test_reference(self, repo):
        assert len(repo.catalog()) == 15
        assert repo.catalog().dimensions == 4
        assert repo.total_seats == 150
        assert sum(repo.expected_seats().values()) == 150
        assert repo.historical_table().get_pair("D66", "VVD") == 0.8
        assert len(repo.scenarios()) == 7

    def test_cached(self, repo):
        assert repo.catalog() is repo.catalog()

    def test_json_input(self):
        data = {
            "parties": [
                {"id": "A", "displayName": "A", "ideologicalVector": [0], "votes": 60},
                {"id": "B", "displayName": "B", "ideologicalVector": [1], "votes": 40},
            ]
        }
        repo = ReferenceRepository(json.dumps(data))
        assert repo.votes() == {"A": 60, "B": 40}
        assert repo.total_seats == 150
        assert repo.scenarios() == {}

    def test_invalid_json(self):
        with pytest.raises(InvalidInputError):
            ReferenceRepository('{"parties": [{"id": "A"}]}')

    def test_out_of_range_axis(self):
        data = {"parties": [{"id": "A", "displayName": "A", "ideologicalVector": [12]}]}
        with pytest.raises(InvalidInputError):
            ReferenceRepository(data)

    def test_single_party_scenario(self):
        data = {**DUTCH_2023, "scenarios": [{"name": "Alone", "parties": ["VVD"]}]}
        with pytest.raises(InvalidInputError):
            ReferenceRepository(data)

    @pytest.mark.parametrize(
        "key,entry",
        [
            ("scenarios", {"name": "Ghost", "parties": ["VVD", "XYZ"]}),
            ("cases", {"label": "Ghost", "parties": ["XYZ", "D66"], "succeeded": True}),
            ("historical", {"parties": ["VVD", "XYZ"], "score": 0.5}),
        ],
    )
    def test_unknown_party_reference(self, key, entry):
        data = {**DUTCH_2023, key: [entry]}
        with pytest.raises(InvalidInputError, match="XYZ"):
            ReferenceRepository(data)

    def test_repeated_party_in_scenario(self):
        data = {**DUTCH_2023, "scenarios": [{"name": "Twice", "parties": ["VVD", "VVD"]}]}
        with pytest.raises(InvalidInputError, match="repeats"):
            ReferenceRepository(data)
