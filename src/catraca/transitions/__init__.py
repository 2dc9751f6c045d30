"""
Exports públicos do módulo catraca/transitions.

Resolução de candidatos a próximo estado.
"""

from catraca.transitions.candidates import (
    expand_destination,
    is_reachable,
    resolve_candidates,
)

__all__ = [
    "expand_destination",
    "is_reachable",
    "resolve_candidates",
]
