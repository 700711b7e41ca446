"""Registro privilegiado de acessos nas estatísticas."""

import logging
from collections.abc import Hashable
from typing import Generic, TypeVar

from .metrics import AccessMetrics, NoOpMetrics
from .statistics import Statistics

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)

# Só create_statistics() possui este token
_CONSTRUCTION_TOKEN = object()


class StatisticsMutator(Generic[K]):
    """Capacidade de escrita sobre um ``Statistics``.

    ``Statistics`` expõe apenas leitura e operações estruturais
    (monitor/unmonitor). Avançar os contadores exige este objeto, que
    só é criado por ``create_statistics`` e entregue ao cache dono das
    estatísticas. Assim o rastreador pode ser distribuído para
    relatórios sem que código cliente consiga forjar acessos.

    Depois de ``reset()`` o mutator fica desanexado e ignora os
    registros; não é possível anexá-lo a outro rastreador.
    """

    def __init__(
        self,
        statistics: Statistics[K],
        metrics: AccessMetrics | None = None,
        *,
        _token: object = None,
    ) -> None:
        """Inicializa o mutator.

        Args:
            statistics: Rastreador a ser alimentado
            metrics: Exportador notificado a cada acesso registrado

        Raises:
            TypeError: Se criado fora de create_statistics
        """
        if _token is not _CONSTRUCTION_TOKEN:
            raise TypeError("StatisticsMutator is only created by create_statistics()")
        self._statistics: Statistics[K] | None = statistics
        self._metrics: AccessMetrics = metrics if metrics is not None else NoOpMetrics()

    @property
    def statistics(self) -> Statistics[K] | None:
        """Handle de leitura das estatísticas anexadas."""
        return self._statistics

    @property
    def metrics(self) -> AccessMetrics:
        return self._metrics

    def has_stats(self) -> bool:
        return self._statistics is not None

    def __bool__(self) -> bool:
        return self.has_stats()

    def reset(self) -> None:
        """Desanexa o rastreador; registros seguintes são ignorados."""
        self._statistics = None
        logger.debug("Statistics mutator detached")

    def record_access(self, key: K, is_hit: bool) -> None:
        """Registra um acesso reportado pelo cache.

        Sempre incrementa os totais globais. Se a chave estiver
        monitorada, incrementa também seu contador de hits ou misses.
        Nunca falha e nunca passa a monitorar a chave: erros do
        exportador de métricas são apenas logados.

        Args:
            key: Chave acessada
            is_hit: True se o valor foi encontrado no cache
        """
        statistics = self._statistics
        if statistics is None:
            return

        statistics._total_accesses += 1
        if is_hit:
            statistics._total_hits += 1

        key_stats = statistics._key_map.get(key)
        if key_stats is not None:
            if is_hit:
                key_stats._increment_hits()
            else:
                key_stats._increment_misses()

        exported_key = key if key_stats is not None else None
        try:
            if is_hit:
                self._metrics.record_hit(exported_key)
            else:
                self._metrics.record_miss(exported_key)
        except Exception as e:
            # Falha de exportação não pode quebrar o lookup do cache
            logger.warning("Metrics error recording access for key %r: %s", key, e)

    def record_hit(self, key: K) -> None:
        self.record_access(key, is_hit=True)

    def record_miss(self, key: K) -> None:
        self.record_access(key, is_hit=False)
