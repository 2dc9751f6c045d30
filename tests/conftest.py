"""Configuração do pytest para o projeto catraca."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas por processo; cada teste lê o ambiente de novo."""
    from config.settings import get_base_settings, get_machine_settings

    get_base_settings.cache_clear()
    get_machine_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_machine_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    """configure_logging substitui handlers do root; restaura ao final."""
    import logging

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
