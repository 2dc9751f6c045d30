"""
Exports públicos do módulo catraca/entities.

Acesso ao campo de estado das entidades.
"""

from catraca.entities.access import current_state, read_field, replace_fields

__all__ = [
    "current_state",
    "read_field",
    "replace_fields",
]
