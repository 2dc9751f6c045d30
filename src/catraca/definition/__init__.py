"""
Exports públicos do módulo catraca/definition.

Definição imutável de máquinas de estado.
"""

from catraca.definition.machine import (
    DEFAULT_FIELD,
    InvalidMachineDefinitionError,
    MachineDefinition,
    TransitionMap,
    define_machine,
    validate_definition,
)

__all__ = [
    "DEFAULT_FIELD",
    "InvalidMachineDefinitionError",
    "MachineDefinition",
    "TransitionMap",
    "define_machine",
    "validate_definition",
]
