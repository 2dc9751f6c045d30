"""
Exports públicos do módulo catraca/states.

Identificadores de estado e o seletor curinga.
"""

from catraca.states.identifiers import (
    WILDCARD,
    State,
    is_blank_state,
    is_wildcard,
    render_state,
)

__all__ = [
    "WILDCARD",
    "State",
    "is_blank_state",
    "is_wildcard",
    "render_state",
]
