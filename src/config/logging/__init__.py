"""Logs JSON do catraca.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", correlation_id_getter=request_id.get)

    logger = get_logger(__name__)
    logger.info("Transition rejected", extra={"from_state": "paid"})

Ver formatters.REQUIRED_LOG_FIELDS para os campos fixos de cada linha.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
]
