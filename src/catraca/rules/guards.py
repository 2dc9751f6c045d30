"""
Guard de transição: veto de última hora por regra de negócio.

O guard é um único callable `(entity, from_state, to_state)` avaliado
somente depois que a transição foi confirmada como estruturalmente
válida. Ele pode bloquear a transição devolvendo Halt(reason); qualquer
outro retorno (None, a própria entidade, Allow, um valor qualquer)
permite a transição.

Exceções levantadas pelo guard não são capturadas aqui.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from catraca.states.identifiers import State

# Assinatura do guard: (entidade, estado atual, estado alvo) -> sinal
Guard = Callable[[Any, State, State], Any]


@dataclass(frozen=True, slots=True)
class Allow:
    """Sinal de permissão."""

    @property
    def allowed(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Halt:
    """
    Sinal de bloqueio.

    Attributes:
        reason: Valor opaco repassado sem alteração ao Rejected
    """

    reason: Any

    @property
    def allowed(self) -> bool:
        return False


GuardSignal = Allow | Halt

ALLOW = Allow()


def allow_all(entity: Any, from_state: State, to_state: State) -> Allow:
    """Guard padrão: permite qualquer transição estruturalmente válida."""
    del entity, from_state, to_state
    return ALLOW


def evaluate_guard(
    guard: Guard,
    entity: Any,
    from_state: State,
    to_state: State,
) -> GuardSignal:
    """
    Avalia o guard e normaliza o retorno para Allow | Halt.

    Args:
        guard: Callable do guard
        entity: Entidade antes da transição (campo de estado inalterado)
        from_state: Estado atual resolvido
        to_state: Estado alvo

    Returns:
        O Halt devolvido pelo guard, ou ALLOW para qualquer outro retorno
    """
    signal = guard(entity, from_state, to_state)
    if isinstance(signal, Halt):
        return signal
    return ALLOW
