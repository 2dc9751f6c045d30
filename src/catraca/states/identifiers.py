"""
Identificadores de estado e o seletor curinga.

Estados são identificadores opacos: strings, membros de StrEnum ou
qualquer valor hashable. O seletor "*" vale como origem (qualquer estado
atual) ou como destino (qualquer estado declarado na máquina).
"""

from collections.abc import Hashable
from typing import Any, Final

# Tipagem explícita de um identificador de estado
State = Hashable

# Seletor curinga aceito como origem ou destino de uma regra
WILDCARD: Final[str] = "*"


def is_wildcard(selector: Any) -> bool:
    """
    Verifica se o seletor é o curinga "*".

    Args:
        selector: Chave ou destino de uma regra de transição

    Returns:
        True se o seletor é o curinga
    """
    return isinstance(selector, str) and selector == WILDCARD


def is_blank_state(value: Any) -> bool:
    """
    Verifica se o valor lido da entidade conta como "sem estado".

    None e string vazia são tratados como ausência de estado; nesses
    casos o estado atual passa a ser o inicial da máquina.
    """
    return value is None or (isinstance(value, str) and value == "")


def render_state(state: Any) -> str:
    """Formata um estado para mensagens (StrEnum usa o valor)."""
    return str(state)
