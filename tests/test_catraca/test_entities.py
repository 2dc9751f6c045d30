"""Testes de leitura e substituição do campo de estado."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict

from catraca.definition import define_machine
from catraca.entities import current_state, read_field, replace_fields


class Order(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: list[str] = []
    total: int = 0
    status: str | None = None


@dataclass
class Ticket:
    title: str
    state: str | None = None


class Shipment(NamedTuple):
    code: int
    state: str | None = None


class Plain:
    def __init__(self, state: str | None = None) -> None:
        self.state = state
        self.notes = ["keep"]


class TestReadField:
    def test_reads_mappings_and_objects(self) -> None:
        assert read_field({"state": "a"}, "state") == "a"
        assert read_field(Ticket("t", "b"), "state") == "b"
        assert read_field(Order(status="paid"), "status") == "paid"

    def test_missing_field_is_none(self) -> None:
        assert read_field({}, "state") is None
        assert read_field(object(), "state") is None


class TestCurrentState:
    def test_blank_values_fall_back_to_initial(self) -> None:
        machine = define_machine(states=["a", "b"], initial="b", transitions={}, strict=False)

        assert current_state({"state": None}, machine) == "b"
        assert current_state({"state": ""}, machine) == "b"
        assert current_state({"state": "a"}, machine) == "a"


class TestReplaceFields:
    """Cada formato devolve um novo valor e preserva o original."""

    def test_dict(self) -> None:
        original = {"state": "a", "total": 1}

        updated = replace_fields(original, {"state": "b"})

        assert updated == {"state": "b", "total": 1}
        assert original["state"] == "a"

    def test_read_only_mapping(self) -> None:
        original = MappingProxyType({"state": "a"})

        assert replace_fields(original, {"state": "b"}) == {"state": "b"}

    def test_pydantic_model(self) -> None:
        original = Order(items=["x"], total=3)

        updated = replace_fields(original, {"status": "paid"})

        assert isinstance(updated, Order)
        assert updated.status == "paid"
        assert updated.items == ["x"]
        assert original.status is None

    def test_dataclass(self) -> None:
        original = Ticket("t", "a")

        updated = replace_fields(original, {"state": "b"})

        assert updated == Ticket("t", "b")
        assert original.state == "a"

    def test_plain_object(self) -> None:
        original = Plain("a")

        updated = replace_fields(original, {"state": "b"})

        assert isinstance(updated, Plain)
        assert updated.state == "b"
        assert updated.notes is original.notes
        assert original.state == "a"

    def test_named_tuple(self) -> None:
        original = Shipment(7, "a")

        updated = replace_fields(original, {"state": "b"})

        assert updated == Shipment(7, "b")
        assert isinstance(updated, Shipment)
        assert original.state == "a"
