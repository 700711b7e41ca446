"""Protocols para integração com o cache.

Define a interface de callbacks que um cache dispara a cada lookup:
- AccessHooks: notificação de hit/miss por chave
"""

from collections.abc import Hashable
from typing import Protocol


class AccessHooks(Protocol):
    """Protocol para callbacks de acesso ao cache.

    Implemente este protocol para reagir aos lookups do cache.

    Example:
        ```python
        class PrintHooks:
            def on_cache_hit(self, key) -> None:
                print(f"hit {key}")

            def on_cache_miss(self, key) -> None:
                print(f"miss {key}")
        ```
    """

    def on_cache_hit(self, key: Hashable) -> None:
        """Chamado quando o lookup encontrou o valor.

        Args:
            key: Chave acessada
        """
        ...

    def on_cache_miss(self, key: Hashable) -> None:
        """Chamado quando o lookup não encontrou o valor.

        Args:
            key: Chave acessada
        """
        ...
