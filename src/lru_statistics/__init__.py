"""lru-statistics: Estatísticas de acesso por chave para caches.

Rastreia quantas vezes cada chave monitorada é acessada e se cada acesso
foi hit ou miss, além de totais globais do cache.

Uso básico:
    ```python
    from lru_statistics import create_statistics

    # O cache fica com o mutator; clientes recebem apenas stats
    stats, mutator = create_statistics("user:1", "user:2")

    mutator.record_access("user:1", is_hit=True)
    mutator.record_access("user:3", is_hit=False)

    stats.total_accesses()   # 2
    stats.hit_rate()         # 0.5
    stats.hits_for("user:1") # 1
    stats.is_monitoring("user:3")  # False
    ```

Com métricas OpenTelemetry:
    ```python
    from lru_statistics import OpenTelemetryMetrics, create_statistics

    stats, mutator = create_statistics("user:1", metrics=OpenTelemetryMetrics())
    ```
"""

__version__ = "0.1.0"

# Configuração
from .config import StatisticsConfig

# Exceções
from .exceptions import StatisticsError, UnmonitoredKeyError

# Criação
from .factory import create_statistics

# Hooks
from .hooks import CompositeHooks, LoggingHooks, StatisticsHooks

# Estatísticas
from .key_statistics import KeyStatistics

# Métricas
from .metrics import AccessMetrics, NoOpMetrics, OpenTelemetryMetrics

# Protocols (para extensibilidade)
from .protocols import AccessHooks
from .statistics import Statistics

__all__ = [
    # Estatísticas
    "Statistics",
    "KeyStatistics",
    "create_statistics",
    # Métricas
    "AccessMetrics",
    "NoOpMetrics",
    "OpenTelemetryMetrics",
    # Hooks
    "AccessHooks",
    "StatisticsHooks",
    "LoggingHooks",
    "CompositeHooks",
    # Configuração
    "StatisticsConfig",
    # Exceções
    "StatisticsError",
    "UnmonitoredKeyError",
]
