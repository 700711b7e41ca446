"""
Access hooks implementations.

Provides implementations of the AccessHooks protocol that feed statistics,
log cache accesses, or fan out to several other hooks.
"""

import logging
from collections.abc import Hashable

from ._mutator import StatisticsMutator
from .protocols import AccessHooks

logger = logging.getLogger(__name__)


class StatisticsHooks:
    """Feeds cache hit/miss callbacks into a StatisticsMutator.

    Lets a cache that only knows how to fire callbacks record accesses
    without exposing the mutator itself to the callback registry.

    Example:
        ```python
        stats, mutator = create_statistics("user:1")
        cache = SomeLRUCache(hooks=StatisticsHooks(mutator))
        ```
    """

    def __init__(self, mutator: StatisticsMutator) -> None:
        """Initialize hooks.

        Args:
            mutator: Mutator owning the statistics to update
        """
        self._mutator = mutator

    def on_cache_hit(self, key: Hashable) -> None:
        """Record cache hit."""
        self._mutator.record_hit(key)

    def on_cache_miss(self, key: Hashable) -> None:
        """Record cache miss."""
        self._mutator.record_miss(key)


class LoggingHooks:
    """Logs every cache access.

    Can be used as-is or combined with StatisticsHooks through
    CompositeHooks.
    """

    def __init__(self, log_level: int = logging.DEBUG) -> None:
        """Initialize hooks with configurable log level.

        Args:
            log_level: Log level for access events (default: DEBUG)
        """
        self._log_level = log_level

    def on_cache_hit(self, key: Hashable) -> None:
        logger.log(self._log_level, "Cache HIT for key %r", key)

    def on_cache_miss(self, key: Hashable) -> None:
        logger.log(self._log_level, "Cache MISS for key %r", key)


class CompositeHooks:
    """Fans each cache access out to several AccessHooks.

    A hook that raises is logged and skipped, so the remaining hooks
    (typically the StatisticsHooks feeding the tracker) still see every
    access and the cache lookup itself never fails. ``failures`` counts
    how many hook calls raised.

    Example:
        hooks = CompositeHooks([
            StatisticsHooks(mutator),
            LoggingHooks(),
        ])
    """

    def __init__(self, hooks: list[AccessHooks] | None = None) -> None:
        """Initialize composite hooks.

        Args:
            hooks: Hooks notified of every access, in order
        """
        self._hooks: list[AccessHooks] = list(hooks or [])
        self._failures = 0

    @property
    def hooks(self) -> tuple[AccessHooks, ...]:
        return tuple(self._hooks)

    @property
    def failures(self) -> int:
        """Number of hook calls that raised."""
        return self._failures

    def on_cache_hit(self, key: Hashable) -> None:
        self._dispatch(key, is_hit=True)

    def on_cache_miss(self, key: Hashable) -> None:
        self._dispatch(key, is_hit=False)

    def _dispatch(self, key: Hashable, is_hit: bool) -> None:
        outcome = "hit" if is_hit else "miss"
        for hook in self._hooks:
            callback = hook.on_cache_hit if is_hit else hook.on_cache_miss
            try:
                callback(key)
            except Exception as e:
                self._failures += 1
                logger.warning(
                    "Access hook %s failed on %s for key %r: %s",
                    type(hook).__name__,
                    outcome,
                    key,
                    e,
                )

    def add_hook(self, hook: AccessHooks) -> None:
        self._hooks.append(hook)

    def remove_hook(self, hook: AccessHooks) -> bool:
        """Remove a hook.

        Returns:
            True if hook was found and removed, False otherwise
        """
        if hook not in self._hooks:
            return False
        self._hooks.remove(hook)
        return True
