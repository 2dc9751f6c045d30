"""
catraca: validador declarativo de transições de estado.

Dada uma entidade com um campo de estado, uma definição de máquina e um
estado alvo, decide se a transição é permitida, avalia um guard opcional
e devolve a entidade com o campo atualizado. Não há processo, estado
entre chamadas nem persistência.

Estrutura:
    - states/: Identificadores de estado e curinga "*"
    - definition/: Definição imutável da máquina (define_machine)
    - transitions/: Resolução de candidatos a próximo estado
    - rules/: Contrato do guard (Allow | Halt)
    - entities/: Leitura/substituição do campo de estado
    - types/: Resultados (Accepted | Rejected) e InvalidTransitionError
    - manager/: Engine (transition, transition_or_fail)
    - changeset/: Adapter para alterações pendentes
    - loaders/: Definições declarativas em YAML

Exemplo:
    order_machine = define_machine(
        field="status",
        states=["pending_payment", "cancelled", "paid", "pending_collection",
                "refunded", "fulfilled"],
        initial="pending_payment",
        transitions={
            "pending_payment": ["cancelled", "paid"],
            "paid": ["pending_collection", "refunded"],
        },
    )

    transition({"items": [], "total": 0, "status": None}, order_machine, "paid")
    # Accepted(entity={'items': [], 'total': 0, 'status': 'paid'})
"""

# Changeset
from catraca.changeset import (
    Changeset,
    ChangeTrackerProtocol,
    FieldError,
    InMemoryChangeTracker,
    transition_changeset,
)

# Definição
from catraca.definition import (
    DEFAULT_FIELD,
    InvalidMachineDefinitionError,
    MachineDefinition,
    define_machine,
    validate_definition,
)

# Loaders
from catraca.loaders import (
    MachineConfig,
    MachineConfigError,
    load_machine,
    machine_from_mapping,
)

# Engine
from catraca.manager import (
    available_transitions,
    can_transition,
    transition,
    transition_or_fail,
)

# Guards
from catraca.rules import ALLOW, Allow, Guard, Halt, allow_all

# Estados
from catraca.states import WILDCARD, State

# Transições
from catraca.transitions import resolve_candidates

# Types
from catraca.types import (
    Accepted,
    InvalidTransitionError,
    Rejected,
    RejectionKind,
    TransitionOutcome,
)

__all__ = [
    "ALLOW",
    "DEFAULT_FIELD",
    "WILDCARD",
    "Accepted",
    "Allow",
    "ChangeTrackerProtocol",
    "Changeset",
    "FieldError",
    "Guard",
    "Halt",
    "InMemoryChangeTracker",
    "InvalidMachineDefinitionError",
    "InvalidTransitionError",
    "MachineConfig",
    "MachineConfigError",
    "MachineDefinition",
    "Rejected",
    "RejectionKind",
    "State",
    "TransitionOutcome",
    "allow_all",
    "available_transitions",
    "can_transition",
    "define_machine",
    "load_machine",
    "machine_from_mapping",
    "resolve_candidates",
    "transition",
    "transition_changeset",
    "transition_or_fail",
    "validate_definition",
]
