"""Testes do contrato do guard."""

from unittest.mock import MagicMock

import pytest

from catraca.rules import ALLOW, Allow, Halt, allow_all, evaluate_guard


class TestGuardSignals:
    def test_allow_and_halt_expose_allowed(self) -> None:
        assert ALLOW.allowed is True
        assert Halt("motivo").allowed is False
        assert Halt("motivo").reason == "motivo"

    def test_default_guard_always_allows(self) -> None:
        assert allow_all({"state": "a"}, "a", "b") is ALLOW


class TestEvaluateGuard:
    """Normalização do retorno do guard para Allow | Halt."""

    def test_halt_is_returned_unchanged(self) -> None:
        halt = Halt({"code": 42})

        assert evaluate_guard(lambda *_: halt, {}, "a", "b") is halt

    @pytest.mark.parametrize(
        "returned",
        [None, {"state": "a"}, ALLOW, ("halt", "not a Halt"), False, "halt"],
    )
    def test_anything_else_allows(self, returned: object) -> None:
        signal = evaluate_guard(lambda *_: returned, {}, "a", "b")

        assert isinstance(signal, Allow)

    def test_guard_receives_entity_from_and_to(self) -> None:
        guard = MagicMock(return_value=None)
        entity = {"state": "a"}

        evaluate_guard(guard, entity, "a", "b")

        guard.assert_called_once_with(entity, "a", "b")
