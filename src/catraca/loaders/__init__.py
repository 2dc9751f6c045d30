"""
Exports públicos do módulo catraca/loaders.

Carga declarativa de definições de máquina.
"""

from catraca.loaders.machine_config import (
    MachineConfig,
    MachineConfigError,
    load_machine,
    machine_from_mapping,
)

__all__ = [
    "MachineConfig",
    "MachineConfigError",
    "load_machine",
    "machine_from_mapping",
]
