"""
Changeset: registro imutável de alterações pendentes sobre uma entidade.

Um Changeset guarda a entidade original (`data`), as alterações ainda
não aplicadas (`changes`) e os erros por campo (`errors`). É válido
enquanto não houver erros. apply_changes devolve o valor prospectivo
da entidade sem alterar o original.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from catraca.entities.access import replace_fields


@dataclass(frozen=True, slots=True)
class FieldError:
    """
    Erro associado a um campo.

    Attributes:
        field: Nome do campo
        message: Motivo (texto ou valor opaco devolvido por um guard)
    """

    field: str
    message: Any


@dataclass(frozen=True, slots=True)
class Changeset:
    """
    Alterações pendentes sobre `data`.

    Attributes:
        data: Entidade original
        changes: Campo -> novo valor (somente leitura)
        errors: Erros por campo, em ordem de inclusão
    """

    data: Any
    changes: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    errors: tuple[FieldError, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    def get_change(self, field: str, default: Any = None) -> Any:
        """Retorna a alteração pendente do campo, ou `default`."""
        return self.changes.get(field, default)

    def errors_on(self, field: str) -> tuple[Any, ...]:
        """Mensagens de erro do campo."""
        return tuple(e.message for e in self.errors if e.field == field)

    def apply_changes(self) -> Any:
        """Valor prospectivo da entidade com as alterações aplicadas."""
        if not self.changes:
            return self.data
        return replace_fields(self.data, self.changes)

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs (só nomes de campos)."""
        return {
            "valid": self.valid,
            "changed_fields": sorted(self.changes),
            "error_fields": sorted({e.field for e in self.errors}),
        }
