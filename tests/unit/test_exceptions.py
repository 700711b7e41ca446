"""Testes para as exceções."""

import pytest

from lru_statistics import Statistics, StatisticsError, UnmonitoredKeyError


class TestUnmonitoredKeyError:
    """Testes para UnmonitoredKeyError."""

    def test_carries_key(self) -> None:
        """Deve guardar a chave que causou o erro."""
        error = UnmonitoredKeyError("missing")

        assert error.key == "missing"
        assert "'missing'" in str(error)

    def test_hierarchy(self) -> None:
        """Deve ser StatisticsError e KeyError."""
        error = UnmonitoredKeyError(42)

        assert isinstance(error, StatisticsError)
        assert isinstance(error, KeyError)

    def test_caught_as_key_error(self) -> None:
        """Deve poder ser tratado como KeyError comum."""
        stats: Statistics[str] = Statistics()

        with pytest.raises(KeyError):
            stats["nope"]


class TestStatisticsError:
    """Testes para StatisticsError."""

    def test_key_defaults_to_none(self) -> None:
        """Deve ter key None por padrão."""
        error = StatisticsError("boom")

        assert error.key is None
        assert str(error) == "boom"
