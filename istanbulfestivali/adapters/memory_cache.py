"""
In-memory Cache — the default token store, also used by the tests.
"""

import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from istanbulfestivali.domain.cache import Cache, Ttl


class InMemoryCache(Cache):

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._store: dict[str, Any] = {}
        self._expirations: dict[str, float | None] = {}

    def get(self, key: str, default: Any = None) -> Any:
        if not self.has(key):
            return default
        return self._store[key]

    def set(self, key: str, value: Any, ttl: Ttl = None) -> bool:
        if isinstance(ttl, timedelta):
            ttl = int(ttl.total_seconds())

        self._store[key] = value
        if ttl is None:
            self._expirations[key] = None
        elif ttl <= 0:
            self._expirations[key] = self._clock() - 1
        else:
            self._expirations[key] = self._clock() + ttl
        return True

    def delete(self, key: str) -> bool:
        self._store.pop(key, None)
        self._expirations.pop(key, None)
        return True

    def clear(self) -> bool:
        self._store.clear()
        self._expirations.clear()
        return True

    def has(self, key: str) -> bool:
        if key not in self._store:
            return False

        expires_at = self._expirations.get(key)
        if expires_at is not None and expires_at <= self._clock():
            self.delete(key)
            return False
        return True
