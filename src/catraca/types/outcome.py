"""
Tipos de resultado de uma tentativa de transição.

Uma transição termina sempre em um de dois resultados, sem sucesso
parcial:
    - Accepted: entidade com o campo de estado atualizado
    - Rejected: motivo da rejeição (estrutural ou veto do guard)

InvalidTransitionError é a forma "fail-fast" do Rejected, levantada por
transition_or_fail.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class RejectionKind(StrEnum):
    """
    Tipos de rejeição.

    - STRUCTURAL: destino não alcançável pelas regras da máquina
    - GUARD_HALT: guard vetou uma transição estruturalmente válida
    """

    STRUCTURAL = "STRUCTURAL"
    GUARD_HALT = "GUARD_HALT"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Accepted:
    """
    Transição aceita.

    Attributes:
        entity: Nova entidade, com o campo de estado já atualizado
    """

    entity: Any

    @property
    def accepted(self) -> bool:
        return True

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs (nunca inclui a entidade)."""
        return {"accepted": True}


@dataclass(frozen=True, slots=True)
class Rejected:
    """
    Transição rejeitada.

    Attributes:
        reason: Mensagem estrutural ou valor opaco devolvido pelo guard
        kind: Origem da rejeição
    """

    reason: Any
    kind: RejectionKind = RejectionKind.STRUCTURAL

    @property
    def accepted(self) -> bool:
        return False

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs."""
        return {
            "accepted": False,
            "rejection_kind": self.kind.value,
            "reason": str(self.reason),
        }


TransitionOutcome = Accepted | Rejected


class InvalidTransitionError(Exception):
    """
    Transição não permitida.

    Carrega o mesmo motivo do Rejected correspondente em `reason`;
    a mensagem da exceção é o motivo formatado como texto.
    """

    def __init__(self, reason: Any = "State transition is not allowed.") -> None:
        super().__init__(str(reason))
        self.reason = reason
