"""
In-process TTL cache.

Backs the translation cache and the optional upstream response cache.
Entries expire lazily: an entry is only checked against its TTL when it is
read, and an expired entry is treated as absent. There is no capacity bound
and no background sweep; the cache lives for the lifetime of the process.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import structlog

logger = structlog.get_logger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    created_at: float


class TTLCache:
    """
    Keyed store with time-to-live expiry.

    Writes replace whole entries, so concurrent coroutines racing to fill the
    same key simply end with the last write.
    """

    def __init__(self, ttl_seconds: int, clock: Clock = time.time, name: str = "cache"):
        """
        Args:
            ttl_seconds: Seconds after which an entry is treated as absent
            clock: Returns the current time in seconds; injectable for tests
            name: Label used in log events
        """
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be non-negative")

        self.ttl_seconds = ttl_seconds
        self.name = name
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._clock() - entry.created_at >= self.ttl_seconds:
            logger.debug("cache_entry_expired", cache=self.name, key_length=len(key))
            return None

        return entry.value

    def put(self, key: str, value: Any) -> None:
        self._entries[key] = CacheEntry(value=value, created_at=self._clock())

    def __len__(self) -> int:
        return len(self._entries)
