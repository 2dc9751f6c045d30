"""
Leitura e substituição do campo de estado em entidades.

A engine lê e escreve um único campo; os demais passam intactos.
A entidade de entrada nunca é mutada: a substituição devolve um novo
valor do mesmo tipo.

Formatos suportados:
    - Mapping mutável (dict e subclasses): cópia rasa + atribuição
    - Mapping somente leitura: novo dict
    - pydantic BaseModel: model_copy(update=...)
    - dataclass: dataclasses.replace
    - NamedTuple: _replace
    - objeto comum: copy.copy + setattr
"""

import copy
import dataclasses
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from catraca.states.identifiers import State, is_blank_state

if TYPE_CHECKING:
    from catraca.definition.machine import MachineDefinition


def read_field(entity: Any, field: str) -> Any:
    """
    Lê um campo da entidade.

    Args:
        entity: Mapping ou objeto com atributos
        field: Nome do campo

    Returns:
        Valor do campo, ou None se ausente
    """
    if isinstance(entity, Mapping):
        return entity.get(field)
    return getattr(entity, field, None)


def current_state(entity: Any, machine: "MachineDefinition") -> State:
    """
    Resolve o estado atual da entidade.

    Campo ausente, None ou "" resolve para o estado inicial da máquina.
    """
    value = read_field(entity, machine.field)
    if is_blank_state(value):
        return machine.initial
    return value


def replace_fields(entity: Any, updates: Mapping[str, Any]) -> Any:
    """
    Devolve uma nova entidade com os campos de `updates` substituídos.

    Args:
        entity: Entidade original (não é alterada)
        updates: Campos e novos valores

    Returns:
        Nova entidade do mesmo tipo
    """
    if isinstance(entity, BaseModel):
        return entity.model_copy(update=dict(updates))

    if isinstance(entity, MutableMapping):
        updated = copy.copy(entity)
        updated.update(updates)
        return updated

    if isinstance(entity, Mapping):
        return {**entity, **updates}

    if dataclasses.is_dataclass(entity) and not isinstance(entity, type):
        return dataclasses.replace(entity, **updates)

    if isinstance(entity, tuple) and hasattr(entity, "_replace"):
        return entity._replace(**updates)

    updated = copy.copy(entity)
    for name, value in updates.items():
        setattr(updated, name, value)
    return updated
