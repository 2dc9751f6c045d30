"""
Adapter: resultado da engine -> changeset.

Não adiciona regra de negócio; é uma tradução em dois ramos:
    - Accepted -> alteração "campo de estado = alvo" sobre o valor ORIGINAL
      (preserva alterações já pendentes)
    - Rejected -> alteração inválida com o motivo no campo de estado

Se o valor de entrada já é uma alteração pendente, a validação roda
sobre a entidade prospectiva, para que o guard enxergue o estado que
a entidade teria, não o persistido.
"""

from typing import Any

from catraca.changeset.tracker import ChangeTrackerProtocol, InMemoryChangeTracker
from catraca.definition.machine import MachineDefinition
from catraca.manager.engine import transition
from catraca.rules.guards import Guard
from catraca.states.identifiers import State
from catraca.types.outcome import Rejected
from config.logging import get_logger

logger = get_logger(__name__)


def transition_changeset(
    value: Any,
    machine: MachineDefinition,
    target: State,
    *,
    tracker: ChangeTrackerProtocol | None = None,
    guard: Guard | None = None,
) -> Any:
    """
    Cria um changeset a partir do resultado da transição.

    Args:
        value: Entidade ou alteração pendente sobre a entidade
        machine: Definição da máquina
        target: Estado desejado
        tracker: Colaborador de change-tracking (padrão: InMemoryChangeTracker)
        guard: Guard desta chamada (substitui `machine.guard`)

    Returns:
        Changeset válido com o campo alterado, ou inválido com erro no campo
    """
    tracker = tracker or InMemoryChangeTracker()

    outcome = transition(tracker.resolve(value), machine, target, guard=guard)
    if isinstance(outcome, Rejected):
        logger.debug(
            "Changeset invalidated",
            extra={"machine_field": machine.field, "rejection_kind": outcome.kind.value},
        )
        return tracker.add_field_error(value, machine.field, outcome.reason)

    return tracker.change(value, {machine.field: target})
