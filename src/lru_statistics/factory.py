"""Criação do par estatísticas/mutator para um cache."""

from collections.abc import Hashable
from typing import TypeVar

from .config import StatisticsConfig
from .metrics import AccessMetrics, OpenTelemetryMetrics
from ._mutator import _CONSTRUCTION_TOKEN, StatisticsMutator
from .statistics import Statistics

K = TypeVar("K", bound=Hashable)


def create_statistics(
    *keys: K,
    metrics: AccessMetrics | None = None,
    enable_otel: bool | None = None,
    meter_name: str | None = None,
) -> tuple[Statistics[K], StatisticsMutator[K]]:
    """Cria estatísticas e o mutator privilegiado que as alimenta.

    Deve ser chamado pelo cache dono: o mutator fica com o cache e
    apenas o ``Statistics`` é entregue a código cliente.

    Args:
        *keys: Chaves a monitorar desde o início
        metrics: Exportador explícito (tem precedência sobre enable_otel)
        enable_otel: Exporta via OpenTelemetry (default: LRU_STATISTICS_OTEL_ENABLED)
        meter_name: Nome do meter OpenTelemetry

    Returns:
        Tupla (statistics, mutator)
    """
    if metrics is None and StatisticsConfig.resolve_otel_enabled(enable_otel):
        metrics = OpenTelemetryMetrics(meter_name)

    statistics: Statistics[K] = Statistics(*keys)
    return statistics, StatisticsMutator(statistics, metrics, _token=_CONSTRUCTION_TOKEN)
