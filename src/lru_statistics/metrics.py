"""Exportação das estatísticas de acesso usando OpenTelemetry."""

import logging
from collections.abc import Hashable
from typing import Protocol

from opentelemetry import metrics as otel_metrics

from .config import StatisticsConfig

logger = logging.getLogger(__name__)


class AccessMetrics(Protocol):
    """Protocol para exportadores de métricas de acesso.

    ``key`` é ``None`` quando o acesso é de uma chave não monitorada,
    para que a cardinalidade dos labels fique limitada ao conjunto
    monitorado.
    """

    def record_hit(self, key: Hashable | None) -> None:
        """Registra cache hit."""
        ...

    def record_miss(self, key: Hashable | None) -> None:
        """Registra cache miss."""
        ...


class NoOpMetrics:
    """Exportador que não faz nada (default)."""

    def record_hit(self, key: Hashable | None) -> None:
        pass

    def record_miss(self, key: Hashable | None) -> None:
        pass


class OpenTelemetryMetrics:
    """Exportador de métricas de acesso usando OpenTelemetry.

    Métricas exportadas:
    - cache.accesses (counter): Número total de acessos
    - cache.hits (counter): Número de cache hits
    - cache.misses (counter): Número de cache misses

    Acessos a chaves monitoradas carregam o atributo ``key``.

    Example:
        ```python
        from opentelemetry.sdk.metrics import MeterProvider
        from opentelemetry import metrics

        metrics.set_meter_provider(MeterProvider())

        stats, mutator = create_statistics("hot-key", metrics=OpenTelemetryMetrics())
        ```
    """

    def __init__(self, meter_name: str | None = None) -> None:
        """Inicializa métricas OpenTelemetry.

        Args:
            meter_name: Nome do meter (default: resolvido por StatisticsConfig)
        """
        resolved_name = StatisticsConfig.resolve_meter_name(meter_name)
        meter = otel_metrics.get_meter(resolved_name)

        self._accesses_counter = meter.create_counter(
            "cache.accesses",
            description="Número de acessos ao cache",
            unit="1",
        )
        self._hits_counter = meter.create_counter(
            "cache.hits",
            description="Número de cache hits",
            unit="1",
        )
        self._misses_counter = meter.create_counter(
            "cache.misses",
            description="Número de cache misses",
            unit="1",
        )
        logger.debug("OpenTelemetry access metrics using meter '%s'", resolved_name)

    def record_hit(self, key: Hashable | None) -> None:
        """Registra cache hit."""
        attributes = self._attributes(key)
        self._accesses_counter.add(1, attributes)
        self._hits_counter.add(1, attributes)

    def record_miss(self, key: Hashable | None) -> None:
        """Registra cache miss."""
        attributes = self._attributes(key)
        self._accesses_counter.add(1, attributes)
        self._misses_counter.add(1, attributes)

    @staticmethod
    def _attributes(key: Hashable | None) -> dict[str, str]:
        if key is None:
            return {}
        return {"key": str(key)}
