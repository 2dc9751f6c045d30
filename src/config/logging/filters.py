"""Filter que completa os records com service e correlation_id.

A engine é uma função pura e não conhece requisições. Quem embute o
catraca (um worker, um middleware HTTP) fornece uma função que devolve
o correlation_id corrente; sem ela o campo sai vazio.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _no_correlation_id() -> str:
    return ""


class CorrelationIdFilter(logging.Filter):
    """Preenche `service` e `correlation_id`; nunca descarta records.

    Args:
        service_name: Valor gravado em `service`.
        correlation_id_getter: Fonte do correlation_id corrente.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or _no_correlation_id

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id em `extra` tem precedência sobre o getter
        record.correlation_id = (
            getattr(record, "correlation_id", None) or self._get_correlation_id()
        )
        record.service = self._service_name
        return True
