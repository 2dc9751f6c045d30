"""
Contrato do colaborador de change-tracking usado pelo adapter.

O adapter de changeset não conhece a biblioteca de persistência; ele
fala com um tracker que sabe:
    - resolver um valor pendente para a entidade prospectiva
    - registrar alterações de campo
    - anexar erros a um campo

InMemoryChangeTracker implementa o contrato sobre Changeset.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Protocol

from catraca.changeset.changeset import Changeset, FieldError


class ChangeTrackerProtocol(Protocol):
    """Contrato mínimo de change-tracking."""

    def resolve(self, value: Any) -> Any:
        """Entidade prospectiva de `value` (entidade ou alteração pendente)."""
        ...

    def change(self, value: Any, updates: Mapping[str, Any]) -> Any:
        """Registra `updates` como alterações pendentes sobre `value`."""
        ...

    def add_field_error(self, value: Any, field: str, reason: Any) -> Any:
        """Anexa um erro ao campo, invalidando a alteração."""
        ...


class InMemoryChangeTracker:
    """Tracker baseado em Changeset."""

    def _as_changeset(self, value: Any) -> Changeset:
        if isinstance(value, Changeset):
            return value
        return Changeset(data=value)

    def resolve(self, value: Any) -> Any:
        if isinstance(value, Changeset):
            return value.apply_changes()
        return value

    def change(self, value: Any, updates: Mapping[str, Any]) -> Changeset:
        changeset = self._as_changeset(value)
        merged = MappingProxyType({**changeset.changes, **updates})
        return Changeset(data=changeset.data, changes=merged, errors=changeset.errors)

    def add_field_error(self, value: Any, field: str, reason: Any) -> Changeset:
        changeset = self._as_changeset(value)
        return Changeset(
            data=changeset.data,
            changes=changeset.changes,
            errors=(*changeset.errors, FieldError(field=field, message=reason)),
        )
