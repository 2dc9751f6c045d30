"""Loader de definições de máquina a partir de YAML ou mappings.

Formato esperado (YAML):

    field: status
    states: [pending_payment, cancelled, paid, pending_collection, refunded, fulfilled]
    initial: pending_payment
    transitions:
      pending_payment: [cancelled, paid]
      paid: [pending_collection, refunded]

`field`, `initial` e `transitions` são opcionais. O guard não é
serializável: é passado pelo chamador na carga.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from catraca.definition.machine import DEFAULT_FIELD, MachineDefinition, define_machine
from catraca.rules.guards import Guard
from config.logging import get_logger

logger = get_logger(__name__)


class MachineConfigError(ValueError):
    """Configuração de máquina com formato inválido."""


class MachineConfig(BaseModel):
    """Schema da configuração declarativa de uma máquina."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    field: str = Field(default=DEFAULT_FIELD, min_length=1)
    states: list[str]
    initial: str | None = None
    transitions: dict[str, str | list[str]] = Field(default_factory=dict)


def machine_from_mapping(
    data: Any,
    *,
    guard: Guard | None = None,
    strict: bool | None = None,
) -> MachineDefinition:
    """Constrói uma MachineDefinition a partir de um dict.

    Args:
        data: Dados já carregados (ex: de YAML/JSON)
        guard: Guard da máquina
        strict: Repassado a define_machine

    Returns:
        MachineDefinition

    Raises:
        MachineConfigError: Se o formato for inválido
    """
    try:
        config = MachineConfig.model_validate(data)
    except ValidationError as exc:
        raise MachineConfigError(f"Configuração de máquina inválida: {exc}") from exc

    return define_machine(
        field=config.field,
        states=config.states,
        initial=config.initial,
        transitions=config.transitions,
        guard=guard,
        strict=strict,
    )


def load_machine(
    path: str | Path,
    *,
    guard: Guard | None = None,
    strict: bool | None = None,
) -> MachineDefinition:
    """Carrega uma MachineDefinition de um arquivo YAML.

    Args:
        path: Caminho do YAML
        guard: Guard da máquina
        strict: Repassado a define_machine

    Returns:
        MachineDefinition

    Raises:
        FileNotFoundError: Se o arquivo não existir
        MachineConfigError: Se o YAML for inválido ou tiver schema inválido
    """
    yaml_path = Path(path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Definição de máquina não encontrada: {yaml_path}")

    try:
        with yaml_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        logger.error(
            "Erro ao parsear YAML de máquina",
            extra={"path": str(yaml_path), "error": str(exc)},
        )
        raise MachineConfigError(f"YAML inválido em {yaml_path}") from exc

    if not isinstance(data, dict):
        raise MachineConfigError(f"YAML de máquina deve ser um dicionário: {yaml_path}")

    machine = machine_from_mapping(data, guard=guard, strict=strict)
    logger.debug(
        "Definição de máquina carregada",
        extra={"path": str(yaml_path), **machine.describe()},
    )
    return machine
