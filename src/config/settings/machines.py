"""Settings de definição de máquinas.

Controla o modo de construção das MachineDefinition.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class MachineSettings:
    """Configurações de máquinas.

    Attributes:
        strict_definitions: Valida definições na construção e levanta
            erro em vez de rejeitar transições silenciosamente
    """

    strict_definitions: bool = False


def _load_machines_from_env() -> MachineSettings:
    """Carrega MachineSettings de variáveis de ambiente."""
    return MachineSettings(
        strict_definitions=os.getenv("CATRACA_STRICT_DEFINITIONS", "").lower()
        in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_machine_settings() -> MachineSettings:
    """Retorna instância cacheada de MachineSettings."""
    return _load_machines_from_env()
