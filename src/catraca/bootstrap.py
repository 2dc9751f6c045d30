"""
Inicialização do ambiente de execução do catraca.

Valida as settings e configura o logging estruturado. Deve ser chamado
uma vez pelo processo que embute o catraca; a engine funciona sem ele
(os loggers apenas herdam a configuração do processo).
"""

from collections.abc import Callable

from config.logging import configure_logging, get_logger
from config.settings import BaseSettings, get_base_settings, get_machine_settings

logger = get_logger(__name__)


def bootstrap(
    settings: BaseSettings | None = None,
    correlation_id_getter: Callable[[], str] | None = None,
) -> BaseSettings:
    """
    Valida settings e configura logging.

    Args:
        settings: Settings base (padrão: carregadas do ambiente)
        correlation_id_getter: Repassado ao filter de logging

    Returns:
        Settings efetivamente usadas

    Raises:
        ValueError: Se as settings forem inválidas
    """
    settings = settings or get_base_settings()

    errors = settings.validate()
    if errors:
        raise ValueError("Settings inválidas: " + "; ".join(errors))

    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=correlation_id_getter,
    )
    logger.info(
        "catraca configured",
        extra={
            "environment": settings.environment,
            "strict_definitions": get_machine_settings().strict_definitions,
        },
    )
    return settings
