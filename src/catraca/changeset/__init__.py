"""
Exports públicos do módulo catraca/changeset.

Tradução do resultado de transição para alterações pendentes.
"""

from catraca.changeset.adapter import transition_changeset
from catraca.changeset.changeset import Changeset, FieldError
from catraca.changeset.tracker import ChangeTrackerProtocol, InMemoryChangeTracker

__all__ = [
    "ChangeTrackerProtocol",
    "Changeset",
    "FieldError",
    "InMemoryChangeTracker",
    "transition_changeset",
]
