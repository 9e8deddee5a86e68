"""
Bounded FIFO caches of known stringprep fixed points.

Stringprep is expensive and addresses are built at a very high rate in a
messaging server. Every value produced by a profile is its own normalized
form, so remembering recent outputs lets the normalizer skip the profile
whenever an incoming value is already normalized.

Each [NormalizationCache][jidkit.core.cache.NormalizationCache] is a bounded
set with First-In-First-Out eviction: a repeated insert does not refresh an
entry, and lookups do not record access. One lock protects the ordered
store; it is never held while a profile runs.

Examples:
    ```python
    cache = NormalizationCache(2)
    cache.put("a")
    cache.put("b")
    cache.put("a")        # no-op, "a" stays oldest
    cache.put("c")        # evicts "a"
    "a" in cache          # False
    cache.contains(None)  # True: nothing to normalize
    ```
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass

from pydantic import BaseModel, Field

from jidkit.models.constants import ComponentKind


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class CacheConfig(BaseModel):
    """Capacity of each per-kind cache.

    Domains get a much smaller cache because a server sees few distinct
    domains compared to users and sessions.
    """

    node: int = Field(default=10_000, ge=1, description="Nodeprep cache capacity")
    domain: int = Field(default=500, ge=1, description="Nameprep cache capacity")
    resource: int = Field(default=10_000, ge=1, description="Resourceprep cache capacity")


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------


class NormalizationCache:
    """Thread-safe bounded set with FIFO eviction.

    Args:
        capacity: Maximum number of entries kept after any ``put()``.

    Raises:
        ValueError: If *capacity* is lower than 1.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._entries: OrderedDict[str, None] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def put(self, value: str) -> int:
        """Insert *value* if absent, then evict the oldest entries over capacity.

        Returns:
            Number of entries evicted by this call.
        """
        evicted = 0
        with self._lock:
            if value in self._entries:
                return 0
            self._entries[value] = None
            while len(self._entries) > self._capacity:
                self._entries.popitem(last=False)
                evicted += 1
        return evicted

    def contains(self, value: str | None) -> bool:
        """Return whether *value* is a known fixed point.

        ``None`` is always reported present: an absent component needs no
        normalization.
        """
        if value is None:
            return True
        with self._lock:
            return value in self._entries

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, value: object) -> bool:
        if value is not None and not isinstance(value, str):
            return False
        return self.contains(value)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"NormalizationCache(capacity={self._capacity}, size={len(self)})"


@dataclass(frozen=True, slots=True)
class PrepCaches:
    """One [NormalizationCache][jidkit.core.cache.NormalizationCache] per component kind."""

    node: NormalizationCache
    domain: NormalizationCache
    resource: NormalizationCache

    @classmethod
    def from_config(cls, config: CacheConfig | None = None) -> PrepCaches:
        config = config or CacheConfig()
        return cls(
            node=NormalizationCache(config.node),
            domain=NormalizationCache(config.domain),
            resource=NormalizationCache(config.resource),
        )

    def for_kind(self, kind: ComponentKind) -> NormalizationCache:
        if kind == ComponentKind.NODE:
            return self.node
        if kind == ComponentKind.DOMAIN:
            return self.domain
        return self.resource

    def clear(self) -> None:
        """Empty all three caches."""
        for cache in (self.node, self.domain, self.resource):
            cache.clear()


__all__ = [
    "CacheConfig",
    "NormalizationCache",
    "PrepCaches",
]
