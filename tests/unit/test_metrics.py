"""Testes para os exportadores de métricas."""

from unittest.mock import MagicMock, patch

import pytest

from lru_statistics.metrics import NoOpMetrics, OpenTelemetryMetrics


def _mock_otel() -> tuple[MagicMock, MagicMock, list[MagicMock]]:
    """Cria otel_metrics falso com um counter distinto por métrica."""
    counters = [MagicMock(name="accesses"), MagicMock(name="hits"), MagicMock(name="misses")]
    mock_meter = MagicMock()
    mock_meter.create_counter.side_effect = counters
    mock_otel = MagicMock()
    mock_otel.get_meter.return_value = mock_meter
    return mock_otel, mock_meter, counters


class TestNoOpMetrics:
    """Testes para NoOpMetrics."""

    def test_record_hit_does_nothing(self) -> None:
        """Deve aceitar record_hit sem fazer nada."""
        NoOpMetrics().record_hit("key")

    def test_record_miss_does_nothing(self) -> None:
        """Deve aceitar record_miss sem fazer nada."""
        NoOpMetrics().record_miss(None)


class TestOpenTelemetryMetrics:
    """Testes para OpenTelemetryMetrics."""

    def test_init_creates_counters(self) -> None:
        """Deve criar os três counters na inicialização."""
        mock_otel, mock_meter, _ = _mock_otel()

        with patch("lru_statistics.metrics.otel_metrics", mock_otel):
            OpenTelemetryMetrics("test_meter")

        mock_otel.get_meter.assert_called_once_with("test_meter")
        names = [call.args[0] for call in mock_meter.create_counter.call_args_list]
        assert names == ["cache.accesses", "cache.hits", "cache.misses"]

    def test_init_uses_default_meter_name(self) -> None:
        """Deve usar nome de meter padrão."""
        mock_otel, _, _ = _mock_otel()

        with patch("lru_statistics.metrics.otel_metrics", mock_otel):
            OpenTelemetryMetrics()

        mock_otel.get_meter.assert_called_once_with("lru_statistics")

    def test_init_uses_env_meter_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Deve usar nome de meter da variável de ambiente."""
        monkeypatch.setenv("LRU_STATISTICS_METER_NAME", "from_env")
        mock_otel, _, _ = _mock_otel()

        with patch("lru_statistics.metrics.otel_metrics", mock_otel):
            OpenTelemetryMetrics()

        mock_otel.get_meter.assert_called_once_with("from_env")

    def test_record_hit(self) -> None:
        """Deve incrementar acessos e hits com o atributo key."""
        mock_otel, _, (accesses, hits, misses) = _mock_otel()

        with patch("lru_statistics.metrics.otel_metrics", mock_otel):
            metrics = OpenTelemetryMetrics()
            metrics.record_hit("test_key")

        accesses.add.assert_called_once_with(1, {"key": "test_key"})
        hits.add.assert_called_once_with(1, {"key": "test_key"})
        misses.add.assert_not_called()

    def test_record_miss(self) -> None:
        """Deve incrementar acessos e misses com o atributo key."""
        mock_otel, _, (accesses, hits, misses) = _mock_otel()

        with patch("lru_statistics.metrics.otel_metrics", mock_otel):
            metrics = OpenTelemetryMetrics()
            metrics.record_miss(("user", 7))

        accesses.add.assert_called_once_with(1, {"key": "('user', 7)"})
        misses.add.assert_called_once_with(1, {"key": "('user', 7)"})
        hits.add.assert_not_called()

    def test_unlabeled_access(self) -> None:
        """Deve omitir o atributo key para chave não monitorada."""
        mock_otel, _, (accesses, hits, _) = _mock_otel()

        with patch("lru_statistics.metrics.otel_metrics", mock_otel):
            metrics = OpenTelemetryMetrics()
            metrics.record_hit(None)

        accesses.add.assert_called_once_with(1, {})
        hits.add.assert_called_once_with(1, {})

    def test_empty_meter_name_rejected(self) -> None:
        """Deve rejeitar nome de meter vazio."""
        with pytest.raises(ValueError, match="meter_name"):
            OpenTelemetryMetrics("  ")
