"""
Exports públicos do módulo catraca/rules.

Contrato do guard de transição.
"""

from catraca.rules.guards import (
    ALLOW,
    Allow,
    Guard,
    GuardSignal,
    Halt,
    allow_all,
    evaluate_guard,
)

__all__ = [
    "ALLOW",
    "Allow",
    "Guard",
    "GuardSignal",
    "Halt",
    "allow_all",
    "evaluate_guard",
]
