"""
Cache port — key/value store with per-entry expiry.

The token provider keeps exactly one entry here. Implementations must
check expiry lazily: an expired entry is treated as absent and evicted
by the get()/has() call that discovers it. No background sweep.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any

Ttl = int | float | timedelta | None


class Cache(ABC):
    """
    Port: where the bearer token lives between calls.

    ttl semantics shared by every adapter:
        None     : never expires
        <= 0     : expires immediately (unreadable on the next check)
        timedelta: converted to whole seconds
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value, or default if missing or expired."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Ttl = None) -> bool:
        """Store value under key, replacing any previous entry."""
        ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove key. Deleting a missing key is not an error."""
        ...

    @abstractmethod
    def has(self, key: str) -> bool:
        """True if key is stored and not expired."""
        ...

    @abstractmethod
    def clear(self) -> bool:
        """Remove every entry."""
        ...

    # Bulk variants go key by key, no atomicity across keys.

    def get_many(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        return {key: self.get(key, default) for key in keys}

    def set_many(self, values: Mapping[str, Any], ttl: Ttl = None) -> bool:
        for key, value in values.items():
            self.set(key, value, ttl)
        return True

    def delete_many(self, keys: Iterable[str]) -> bool:
        for key in keys:
            self.delete(key)
        return True
