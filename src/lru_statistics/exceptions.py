"""Exceções do rastreador de estatísticas."""

from typing import Any


class StatisticsError(Exception):
    """Erro base para operações de estatísticas."""

    def __init__(self, message: str, key: Any = None) -> None:
        self.key = key
        super().__init__(message)


class UnmonitoredKeyError(StatisticsError, KeyError):
    """Consulta por chave que não está sendo monitorada.

    Também é um ``KeyError``, então ``stats[key]`` se comporta como
    um lookup de mapping comum.
    """

    def __init__(self, key: Any) -> None:
        super().__init__(f"Chave não monitorada: {key!r}", key=key)

    def __str__(self) -> str:
        # KeyError.__str__ faria repr() da mensagem inteira
        return str(self.args[0])
