"""Instalação do handler JSON no logger raiz.

O catraca só cria loggers com get_logger(__name__) e loga decisões com
`extra`. Quem decide para onde e em que nível os logs vão é o processo
que o embute, via configure_logging (normalmente por catraca.bootstrap).
Sem essa chamada os records seguem a configuração já existente.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "catraca"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Troca os handlers do logger raiz por um único handler JSON.

    Chamadas repetidas não acumulam handlers.

    Args:
        level: Nível do raiz e do handler, sem diferenciar caixa.
        service_name: Valor do campo `service`.
        correlation_id_getter: Repassado ao CorrelationIdFilter.
        stream: Destino das linhas JSON (padrão: stderr).

    Returns:
        O handler instalado.

    Raises:
        ValueError: Se o nível não for um dos VALID_LOG_LEVELS.
    """
    level_name = level.upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setLevel(level_name)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_name)
    root.handlers = [handler]
    return handler


def get_logger(name: str) -> logging.Logger:
    """Logger do módulo; `service` e `correlation_id` vêm do filter."""
    return logging.getLogger(name)
