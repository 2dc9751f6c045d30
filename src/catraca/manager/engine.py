"""
Engine de transição: decide se uma entidade pode mudar de estado.

Fluxo de uma decisão (cada chamada é independente, sem estado):
    1. Resolve o estado atual (campo da entidade ou inicial da máquina)
    2. Resolve os candidatos pelas regras exatas e curinga
    3. Destino fora dos candidatos -> Rejected estrutural
    4. Avalia o guard -> Halt(reason) vira Rejected(reason)
    5. Accepted com a entidade copiada e o campo atualizado

O guard só é chamado para destinos estruturalmente válidos.
"""

from typing import Any

from catraca.definition.machine import MachineDefinition
from catraca.entities.access import current_state, replace_fields
from catraca.rules.guards import Guard, Halt, evaluate_guard
from catraca.states.identifiers import State, render_state
from catraca.transitions.candidates import resolve_candidates
from catraca.types.outcome import (
    Accepted,
    InvalidTransitionError,
    Rejected,
    RejectionKind,
    TransitionOutcome,
)
from config.logging import get_logger

logger = get_logger(__name__)


def structural_rejection_reason(from_state: State, to_state: State) -> str:
    """Mensagem estável da rejeição estrutural."""
    return (
        f"Cannot transition from `{render_state(from_state)}` "
        f"to `{render_state(to_state)}`"
    )


def transition(
    entity: Any,
    machine: MachineDefinition,
    target: State,
    *,
    guard: Guard | None = None,
) -> TransitionOutcome:
    """
    Tenta transitar a entidade para `target`.

    Rejeições nunca levantam exceção; são devolvidas como Rejected.
    Exceções levantadas pelo próprio guard propagam.

    Args:
        entity: Entidade com o campo `machine.field`
        machine: Definição da máquina
        target: Estado desejado
        guard: Guard desta chamada (substitui `machine.guard`)

    Returns:
        Accepted(entidade atualizada) ou Rejected(motivo)
    """
    from_state = current_state(entity, machine)
    log_extra = {
        "machine_field": machine.field,
        "from_state": render_state(from_state),
        "to_state": render_state(target),
    }

    candidates = resolve_candidates(from_state, machine.transitions, machine.states)
    if target not in candidates:
        outcome = Rejected(
            reason=structural_rejection_reason(from_state, target),
            kind=RejectionKind.STRUCTURAL,
        )
        logger.info("Transition rejected", extra={**log_extra, **outcome.to_log_dict()})
        return outcome

    signal = evaluate_guard(guard or machine.guard, entity, from_state, target)
    if isinstance(signal, Halt):
        outcome = Rejected(reason=signal.reason, kind=RejectionKind.GUARD_HALT)
        logger.info("Transition rejected", extra={**log_extra, **outcome.to_log_dict()})
        return outcome

    outcome = Accepted(entity=replace_fields(entity, {machine.field: target}))
    logger.debug("Transition accepted", extra={**log_extra, **outcome.to_log_dict()})
    return outcome


def transition_or_fail(
    entity: Any,
    machine: MachineDefinition,
    target: State,
    *,
    guard: Guard | None = None,
) -> Any:
    """
    Variante fail-fast de transition.

    Returns:
        Entidade atualizada

    Raises:
        InvalidTransitionError: Com o mesmo motivo do Rejected
    """
    outcome = transition(entity, machine, target, guard=guard)
    if isinstance(outcome, Rejected):
        raise InvalidTransitionError(outcome.reason)
    return outcome.entity


def can_transition(
    entity: Any,
    machine: MachineDefinition,
    target: State,
    *,
    guard: Guard | None = None,
) -> bool:
    """Verifica se a transição seria aceita (inclui o guard)."""
    return transition(entity, machine, target, guard=guard).accepted


def available_transitions(entity: Any, machine: MachineDefinition) -> tuple[State, ...]:
    """
    Lista os destinos estruturalmente válidos a partir do estado atual.

    O guard não é consultado. Sem duplicatas, na ordem em que aparecem
    nas regras.
    """
    from_state = current_state(entity, machine)
    candidates = resolve_candidates(from_state, machine.transitions, machine.states)
    return tuple(dict.fromkeys(candidates))
