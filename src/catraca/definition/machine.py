"""
Definição imutável de uma máquina de estados.

Uma MachineDefinition reúne a configuração de uma máquina:
    - field: campo da entidade que guarda o estado
    - states: estados válidos, em ordem (o primeiro é o inicial implícito)
    - initial: estado inicial explícito
    - transitions: mapa seletor de origem -> seletor de destino
    - guard: callable de veto avaliado após a validação estrutural

A definição é construída uma vez por tipo de máquina via define_machine
e compartilhada sem locks entre chamadas concorrentes.

Por padrão a construção é permissiva: `states` vazio (initial None),
`initial` fora de `states` ou destinos desconhecidos não geram erro,
apenas fazem as transições afetadas serem rejeitadas. validate_definition lista esses problemas e
define_machine(strict=True) os transforma em InvalidMachineDefinitionError.
"""

import dataclasses
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Final

from catraca.rules.guards import Guard, allow_all
from catraca.states.identifiers import State, is_wildcard
from config.logging import get_logger
from config.settings import get_machine_settings

logger = get_logger(__name__)

# Nome convencional do campo de estado
DEFAULT_FIELD: Final[str] = "state"

# Tipagem explícita do mapa de transições
TransitionMap = Mapping[Any, Any]


class InvalidMachineDefinitionError(ValueError):
    """Definição de máquina inconsistente (modo estrito)."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass(frozen=True, slots=True)
class MachineDefinition:
    """
    Configuração imutável de uma máquina.

    Attributes:
        field: Nome do atributo/chave da entidade que guarda o estado
        states: Estados válidos em ordem
        initial: Estado assumido quando a entidade não tem estado
        transitions: Mapa somente leitura de origem -> destino
        guard: Guard padrão da máquina
    """

    field: str
    states: tuple[State, ...]
    initial: State
    transitions: TransitionMap = dataclasses.field(hash=False)
    guard: Guard = dataclasses.field(default=allow_all, compare=False)

    def describe(self) -> dict[str, Any]:
        """Resumo seguro para logs."""
        return {
            "machine_field": self.field,
            "states": [str(s) for s in self.states],
            "initial": str(self.initial),
            "transition_sources": [str(k) for k in self.transitions],
        }


def _normalize_destination(destination: Any) -> Any:
    """Listas/conjuntos de destino viram tuplas; seletores simples ficam."""
    if isinstance(destination, str) or not isinstance(destination, Iterable):
        return destination
    return tuple(destination)


def define_machine(
    *,
    states: Sequence[State],
    transitions: TransitionMap,
    field: str = DEFAULT_FIELD,
    initial: State | None = None,
    guard: Guard | None = None,
    strict: bool | None = None,
) -> MachineDefinition:
    """
    Constrói uma MachineDefinition.

    Args:
        states: Estados válidos em ordem
        transitions: Mapa de seletor de origem para seletor de destino
        field: Campo de estado da entidade (padrão "state")
        initial: Estado inicial (padrão: primeiro de `states`)
        guard: Guard da máquina (padrão: allow_all)
        strict: Valida a definição e levanta erro se inconsistente.
            None usa CATRACA_STRICT_DEFINITIONS.

    Returns:
        MachineDefinition imutável

    Raises:
        InvalidMachineDefinitionError: Em modo estrito, se houver erros
    """
    states_tuple = tuple(states)
    if initial is None and states_tuple:
        initial = states_tuple[0]

    machine = MachineDefinition(
        field=field,
        states=states_tuple,
        initial=initial,
        transitions=MappingProxyType(
            {source: _normalize_destination(dest) for source, dest in transitions.items()}
        ),
        guard=guard or allow_all,
    )

    if strict is None:
        strict = get_machine_settings().strict_definitions

    if strict:
        errors = validate_definition(machine)
        if errors:
            logger.warning(
                "Machine definition rejected",
                extra={**machine.describe(), "error_count": len(errors)},
            )
            raise InvalidMachineDefinitionError(errors)

    return machine


def validate_definition(machine: MachineDefinition) -> list[str]:
    """
    Valida a integridade de uma definição.

    Verifica:
    - states vazio
    - Estados duplicados
    - Estado inicial declarado em `states`
    - Origens de transição declaradas (ou curinga)
    - Destinos de transição declarados (ou curinga)

    Returns:
        Lista de erros encontrados (vazia se válida)
    """
    errors: list[str] = []
    declared = set(machine.states)

    if not machine.states:
        errors.append("states não pode ser vazio")
    elif len(declared) != len(machine.states):
        errors.append("states contém estados duplicados")

    if machine.initial not in declared:
        errors.append(f"Estado inicial {machine.initial} ausente em states")

    for source, destination in machine.transitions.items():
        if not is_wildcard(source) and source not in declared:
            errors.append(f"Origem {source} ausente em states")

        if is_wildcard(destination):
            continue
        targets = destination if isinstance(destination, tuple) else (destination,)
        for target in targets:
            if target not in declared:
                errors.append(f"Transição {source} → {target}: destino inválido")

    return errors
