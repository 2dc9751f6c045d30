"""
Resolução dos estados candidatos a próximo estado.

Dado o estado atual, o conjunto de candidatos é a união das expansões
de TODAS as regras cuja origem é o próprio estado ou o curinga "*".
Não há precedência entre regra exata e curinga: as duas contribuem.

Expansão de um destino:
    - "*"       -> todos os estados declarados (inclusive o atual)
    - sequência -> seus elementos, sem alteração
    - valor     -> só ele
"""

from typing import TYPE_CHECKING, Any

from catraca.states.identifiers import WILDCARD, State, is_wildcard

if TYPE_CHECKING:
    from catraca.definition.machine import MachineDefinition, TransitionMap


def expand_destination(destination: Any, states: tuple[State, ...]) -> tuple[State, ...]:
    """
    Expande um seletor de destino em estados concretos.

    Args:
        destination: "*", sequência de estados ou estado único
        states: Universo de estados da máquina

    Returns:
        Tupla de estados alcançáveis por esse destino
    """
    if is_wildcard(destination):
        return tuple(states)
    if isinstance(destination, tuple | list | set | frozenset):
        return tuple(destination)
    return (destination,)


def resolve_candidates(
    current_state: State,
    transitions: "TransitionMap",
    states: tuple[State, ...],
) -> tuple[State, ...]:
    """
    Retorna os estados válidos como próximo estado.

    Duplicatas são possíveis; o resultado serve apenas para teste de
    pertinência.

    Args:
        current_state: Estado atual resolvido
        transitions: Mapa de transições da máquina
        states: Universo de estados (usado para expandir o curinga)

    Returns:
        Candidatos (vazio se nenhuma regra casa)
    """
    candidates: list[State] = []
    for source in (current_state, WILDCARD):
        if source not in transitions:
            continue
        candidates.extend(expand_destination(transitions[source], states))
        # Estado atual "*" não deve contar a mesma regra duas vezes
        if is_wildcard(current_state):
            break
    return tuple(candidates)


def is_reachable(current_state: State, target: State, machine: "MachineDefinition") -> bool:
    """Verifica se `target` é alcançável a partir de `current_state`."""
    return target in resolve_candidates(current_state, machine.transitions, machine.states)
