"""
Configuration management for statistics tracking.

Handles environment variables and default values following the
precedence rules used across the package.
"""

import os


class StatisticsConfig:
    """Configuration manager for statistics tracking.

    Precedence rules:

    1. Explicit parameter (highest precedence)
    2. Environment variable
    3. Default value (lowest precedence)
    """

    # Environment variable names
    ENV_METER_NAME = "LRU_STATISTICS_METER_NAME"
    ENV_OTEL_ENABLED = "LRU_STATISTICS_OTEL_ENABLED"

    # Default values
    DEFAULT_METER_NAME = "lru_statistics"
    DEFAULT_OTEL_ENABLED = False

    TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})

    @classmethod
    def resolve_meter_name(cls, explicit_value: str | None = None) -> str:
        """Resolve OpenTelemetry meter name following precedence rules.

        Args:
            explicit_value: Explicit meter name

        Returns:
            Resolved meter name

        Raises:
            ValueError: If the explicit meter name is empty
        """
        if explicit_value is not None:
            cls._validate_meter_name(explicit_value)
            return explicit_value

        env_value = os.getenv(cls.ENV_METER_NAME)
        if env_value and env_value.strip():
            return env_value.strip()

        return cls.DEFAULT_METER_NAME

    @classmethod
    def resolve_otel_enabled(cls, explicit_value: bool | None = None) -> bool:
        """Resolve whether accesses are exported through OpenTelemetry.

        Args:
            explicit_value: Explicit flag

        Returns:
            Resolved flag
        """
        if explicit_value is not None:
            return explicit_value

        env_value = os.getenv(cls.ENV_OTEL_ENABLED)
        if env_value is not None:
            return env_value.strip().lower() in cls.TRUTHY_VALUES

        return cls.DEFAULT_OTEL_ENABLED

    @classmethod
    def _validate_meter_name(cls, meter_name: str) -> None:
        """Validate meter name parameter.

        Raises:
            ValueError: If meter_name is invalid
        """
        if not meter_name or not meter_name.strip():
            raise ValueError("meter_name cannot be empty")
