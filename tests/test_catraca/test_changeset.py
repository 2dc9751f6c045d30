"""
Testes do adapter de changeset.

Cobre: Changeset, InMemoryChangeTracker e transition_changeset,
incluindo alterações pendentes e um tracker customizado.
"""

from dataclasses import dataclass, field
from typing import Any

from catraca.changeset import (
    Changeset,
    FieldError,
    InMemoryChangeTracker,
    transition_changeset,
)
from catraca.definition import define_machine
from catraca.rules import Halt


@dataclass(frozen=True)
class GearSchema:
    name: str | None = None
    status: str | None = None
    state: str | None = None


def _machine(**overrides):
    options = {
        "states": ["neutral", "drive", "parking"],
        "transitions": {"neutral": ["drive"]},
        "strict": False,
    }
    options.update(overrides)
    return define_machine(**options)


class TestChangeset:
    def test_empty_changeset_is_valid_and_applies_to_data(self) -> None:
        gear = GearSchema(state="neutral")
        changeset = Changeset(data=gear)

        assert changeset.valid
        assert changeset.apply_changes() is gear
        assert changeset.get_change("state") is None

    def test_apply_changes_returns_prospective_entity(self) -> None:
        changeset = InMemoryChangeTracker().change(GearSchema(state="neutral"), {"name": "x"})

        assert changeset.apply_changes() == GearSchema(name="x", state="neutral")
        assert changeset.data == GearSchema(state="neutral")

    def test_errors_make_changeset_invalid(self) -> None:
        changeset = InMemoryChangeTracker().add_field_error(GearSchema(), "state", "nope")

        assert not changeset.valid
        assert changeset.errors == (FieldError(field="state", message="nope"),)
        assert changeset.errors_on("state") == ("nope",)
        assert changeset.to_log_dict() == {
            "valid": False,
            "changed_fields": [],
            "error_fields": ["state"],
        }


class TestTransitionChangeset:
    def test_valid_transition_produces_change(self) -> None:
        changeset = transition_changeset(GearSchema(state="neutral"), _machine(), "drive")

        assert isinstance(changeset, Changeset)
        assert changeset.valid
        assert changeset.get_change("state") == "drive"

    def test_invalid_transition_attaches_error_to_state_field(self) -> None:
        changeset = transition_changeset(GearSchema(state="neutral"), _machine(), "parking")

        assert not changeset.valid
        (message,) = changeset.errors_on("state")
        assert message.startswith("Cannot transition from")
        assert changeset.changes == {}

    def test_undefined_input_and_destination_are_invalid(self) -> None:
        machine = _machine()

        from_undefined = transition_changeset(GearSchema(state="undefined"), machine, "drive")
        to_undefined = transition_changeset(GearSchema(state="neutral"), machine, "undefined")

        assert not from_undefined.valid
        assert not to_undefined.valid
        assert "Cannot transition from" in from_undefined.errors_on("state")[0]
        assert "Cannot transition from" in to_undefined.errors_on("state")[0]

    def test_error_uses_machine_field(self) -> None:
        machine = _machine(field="status")

        changeset = transition_changeset(GearSchema(status="neutral"), machine, "parking")

        assert changeset.errors_on("status")
        assert not changeset.errors_on("state")

    def test_guard_halt_reason_becomes_field_error(self) -> None:
        machine = _machine(guard=lambda *_: Halt("sem combustível"))

        changeset = transition_changeset(GearSchema(state="neutral"), machine, "drive")

        assert changeset.errors_on("state") == ("sem combustível",)

    def test_pending_changes_are_resolved_before_validation(self) -> None:
        seen = []

        def guard(entity, from_state, to_state):
            seen.append((entity, from_state))

        machine = _machine(guard=guard)
        pending = InMemoryChangeTracker().change(
            GearSchema(name="old", state="parking"),
            {"name": "new", "state": "neutral"},
        )

        changeset = transition_changeset(pending, machine, "drive")

        assert changeset.valid
        assert seen == [(GearSchema(name="new", state="neutral"), "neutral")]
        # Alterações anteriores preservadas sobre o dado original
        assert changeset.data == GearSchema(name="old", state="parking")
        assert changeset.changes == {"name": "new", "state": "drive"}

    def test_rejection_keeps_pending_changes(self) -> None:
        pending = InMemoryChangeTracker().change(GearSchema(state="neutral"), {"name": "x"})

        changeset = transition_changeset(pending, _machine(), "parking")

        assert not changeset.valid
        assert changeset.get_change("name") == "x"

    def test_custom_tracker_is_used(self) -> None:
        tracker = RecordingTracker()

        result = transition_changeset({"state": "neutral"}, _machine(), "drive", tracker=tracker)

        assert result == ("change", {"state": "drive"})
        assert tracker.calls == ["resolve", "change"]


@dataclass
class RecordingTracker:
    """Tracker mínimo que registra as chamadas recebidas."""

    calls: list[str] = field(default_factory=list)

    def resolve(self, value: Any) -> Any:
        self.calls.append("resolve")
        return value

    def change(self, value: Any, updates: Any) -> Any:
        self.calls.append("change")
        return ("change", dict(updates))

    def add_field_error(self, value: Any, field: str, reason: Any) -> Any:
        self.calls.append("add_field_error")
        return ("error", field, reason)
