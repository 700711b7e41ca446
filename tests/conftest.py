"""Configuração de fixtures para testes."""

import pytest

from lru_statistics import Statistics, StatisticsConfig, create_statistics
from lru_statistics._mutator import StatisticsMutator


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove variáveis de ambiente que alteram a configuração."""
    monkeypatch.delenv(StatisticsConfig.ENV_METER_NAME, raising=False)
    monkeypatch.delenv(StatisticsConfig.ENV_OTEL_ENABLED, raising=False)


@pytest.fixture
def tracker() -> tuple[Statistics[str], StatisticsMutator[str]]:
    """Par estatísticas/mutator monitorando as chaves 'a' e 'b'."""
    return create_statistics("a", "b")


@pytest.fixture
def statistics(tracker: tuple[Statistics[str], StatisticsMutator[str]]) -> Statistics[str]:
    return tracker[0]


@pytest.fixture
def mutator(tracker: tuple[Statistics[str], StatisticsMutator[str]]) -> StatisticsMutator[str]:
    return tracker[1]
