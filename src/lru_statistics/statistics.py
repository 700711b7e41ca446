"""Rastreador de estatísticas de acesso de um cache."""

import logging
import math
from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

from .exceptions import UnmonitoredKeyError
from .key_statistics import KeyStatistics

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class Statistics(Generic[K]):
    """Estatísticas de acesso de um cache, globais e por chave.

    Os totais globais contam todo acesso reportado pelo cache, esteja a
    chave monitorada ou não. Contadores por chave existem apenas para as
    chaves monitoradas.

    Este objeto é o handle de leitura: pode ser entregue a qualquer
    código cliente. O registro de acessos fica no mutator devolvido por
    ``create_statistics``, que apenas o cache dono possui.

    Não é thread-safe. Se o cache for usado por várias threads, o próprio
    cache deve serializar o acesso ao rastreador.

    Example:
        ```python
        stats, mutator = create_statistics("user:1", "user:2")
        stats.monitor("user:3")

        # ... o cache registra acessos com o mutator ...

        print(f"Hit rate: {stats.hit_rate():.2%}")
        print(f"user:1 hits: {stats.hits_for('user:1')}")
        ```
    """

    def __init__(self, *keys: K) -> None:
        """Inicializa o rastreador monitorando as chaves informadas.

        Args:
            *keys: Chaves a monitorar desde o início
        """
        self._total_accesses = 0
        self._total_hits = 0
        self._key_map: dict[K, KeyStatistics] = {}

        for key in keys:
            self.monitor(key)

    @classmethod
    def from_keys(cls, keys: Iterable[K]) -> "Statistics[K]":
        """Cria um rastreador monitorando cada elemento de um iterável.

        Args:
            keys: Qualquer iterável de chaves (lista, set, gerador, range...)

        Returns:
            Novo rastreador com totais zerados
        """
        statistics: Statistics[K] = cls()
        for key in keys:
            statistics.monitor(key)
        return statistics

    def total_accesses(self) -> int:
        return self._total_accesses

    def total_hits(self) -> int:
        return self._total_hits

    def total_misses(self) -> int:
        return self._total_accesses - self._total_hits

    def hit_rate(self) -> float:
        """Fração de acessos que foram hits.

        Sem acessos registrados o resultado é ``nan`` (0/0), não um erro.
        """
        if self._total_accesses == 0:
            return math.nan
        return self._total_hits / self._total_accesses

    def miss_rate(self) -> float:
        """Fração de acessos que foram misses (``nan`` sem acessos)."""
        return 1 - self.hit_rate()

    def stats_for(self, key: K) -> KeyStatistics:
        """Retorna as estatísticas de uma chave monitorada.

        O objeto retornado é uma visão viva: reflete acessos futuros
        enquanto a chave continuar monitorada.

        Args:
            key: Chave monitorada

        Returns:
            Estatísticas da chave

        Raises:
            UnmonitoredKeyError: Se a chave não estiver sendo monitorada
        """
        try:
            return self._key_map[key]
        except KeyError:
            raise UnmonitoredKeyError(key) from None

    def hits_for(self, key: K) -> int:
        return self.stats_for(key).hits

    def misses_for(self, key: K) -> int:
        return self.stats_for(key).misses

    def accesses_for(self, key: K) -> int:
        return self.stats_for(key).accesses()

    def monitor(self, key: K) -> None:
        """Passa a monitorar uma chave.

        Idempotente: se a chave já é monitorada, os contadores
        existentes são preservados.
        """
        if key in self._key_map:
            return
        self._key_map[key] = KeyStatistics()
        logger.debug("Monitoring key %r", key)

    def unmonitor(self, key: K) -> None:
        """Para de monitorar uma chave (no-op se não monitorada)."""
        if self._key_map.pop(key, None) is not None:
            logger.debug("Stopped monitoring key %r", key)

    def unmonitor_all(self) -> None:
        """Para de monitorar todas as chaves. Totais não são afetados."""
        count = len(self._key_map)
        self._key_map.clear()
        logger.debug("Stopped monitoring %d keys", count)

    def is_monitoring(self, key: K) -> bool:
        return key in self._key_map

    def number_of_monitored_keys(self) -> int:
        return len(self._key_map)

    def is_monitoring_keys(self) -> bool:
        return bool(self._key_map)

    def monitored_keys(self) -> Iterator[K]:
        """Itera sobre as chaves monitoradas."""
        return iter(list(self._key_map))

    def __getitem__(self, key: K) -> KeyStatistics:
        return self.stats_for(key)

    def __contains__(self, key: object) -> bool:
        return key in self._key_map

    def __repr__(self) -> str:
        return (
            f"Statistics(total_accesses={self._total_accesses}, "
            f"total_hits={self._total_hits}, "
            f"monitored_keys={len(self._key_map)})"
        )
