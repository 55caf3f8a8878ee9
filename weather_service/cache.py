import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from .models import WeatherData

CACHE_TTL_SECONDS = 30 * 60

CacheKey = Tuple[str, int]


def make_key(query: str, days: int) -> CacheKey:
    return (query, days)


@dataclass(frozen=True)
class CacheEntry:
    value: WeatherData
    stored_at: float


class TTLCache:
    """In-memory store of the latest payload per key.

    Entries are never expired in place: a stale entry stays until the next
    ``put`` for its key or a ``clear``. Freshness is checked by the caller
    through ``is_fresh``.
    """

    def __init__(self, ttl_seconds: float = CACHE_TTL_SECONDS,
                 clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._store: Dict[CacheKey, CacheEntry] = {}

    def lookup(self, key: CacheKey) -> Optional[CacheEntry]:
        return self._store.get(key)

    def put(self, key: CacheKey, value: WeatherData) -> None:
        self._store[key] = CacheEntry(value=value, stored_at=self._clock())

    def clear(self) -> None:
        self._store.clear()

    def is_fresh(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.stored_at < self.ttl_seconds

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store
