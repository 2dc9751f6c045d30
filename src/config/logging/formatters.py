"""Formatter JSON dos logs do catraca.

Cada linha sai como um objeto JSON. Os campos fixos vêm primeiro
(asctime, level, logger, message, correlation_id, service), seguidos
dos campos de `extra` de cada chamada: machine_field, from_state,
to_state, rejection_kind, reason...

Estados podem ser StrEnum ou qualquer hashable, e o motivo de um Halt é
um valor opaco; tudo que não for serializável em JSON vira str().
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem de saída dos campos fixos
_ORDERED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

REQUIRED_LOG_FIELDS = frozenset(_ORDERED_LOG_FIELDS)

# Nomes curtos no JSON
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Monta o JsonFormatter usado pelo handler raiz.

    Uma rejeição estrutural sai assim:
        {"asctime": "2026-02-02 10:30:00,123", "level": "INFO",
         "logger": "catraca.manager.engine", "message": "Transition rejected",
         "correlation_id": "req-123", "service": "catraca",
         "machine_field": "status", "from_state": "paid",
         "to_state": "fulfilled", "accepted": false,
         "rejection_kind": "STRUCTURAL", "reason": "Cannot transition ..."}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in _ORDERED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        json_default=str,
    )
