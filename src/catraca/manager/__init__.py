"""
Exports públicos do módulo catraca/manager.

Engine de transição de estado.
"""

from catraca.manager.engine import (
    available_transitions,
    can_transition,
    structural_rejection_reason,
    transition,
    transition_or_fail,
)

__all__ = [
    "available_transitions",
    "can_transition",
    "structural_rejection_reason",
    "transition",
    "transition_or_fail",
]
