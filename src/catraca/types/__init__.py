"""
Exports públicos do módulo catraca/types.

Tipos de resultado de transição.
"""

from catraca.types.outcome import (
    Accepted,
    InvalidTransitionError,
    Rejected,
    RejectionKind,
    TransitionOutcome,
)

__all__ = [
    "Accepted",
    "InvalidTransitionError",
    "Rejected",
    "RejectionKind",
    "TransitionOutcome",
]
