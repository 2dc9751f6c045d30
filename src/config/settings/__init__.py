"""Agregador de settings do catraca.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Machine settings
from config.settings.machines import (
    MachineSettings,
    get_machine_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "MachineSettings",
    "get_base_settings",
    "get_machine_settings",
]
