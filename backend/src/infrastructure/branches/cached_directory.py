"""TTL cache decorator around a branch directory.

Branch reads are idempotent and may be slightly stale without affecting
correctness, so lookups against the external registry are cached for a
bounded time and a bounded number of entries.
"""

import logging
import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Optional

from domain.vendors.ports import Branch, BranchDirectoryPort

logger = logging.getLogger(__name__)

_MISSING = object()


class CachedBranchDirectory(BranchDirectoryPort):
    """Wraps another BranchDirectoryPort with a thread-safe TTL cache.

    Unknown branches (None) are cached too. When the cache is full the
    least recently stored entry is evicted.

    Example:
        directory = CachedBranchDirectory(InMemoryBranchDirectory(), ttl_seconds=300)
        directory.find_by_id("1")  # hits the wrapped directory
        directory.find_by_id("1")  # served from cache
    """

    def __init__(
        self,
        inner: BranchDirectoryPort,
        ttl_seconds: float = 300.0,
        max_entries: int = 256,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize cache.

        Args:
            inner: Directory actually answering lookups
            ttl_seconds: Entry lifetime
            max_entries: Upper bound on cached keys
            clock: Monotonic time source (injectable for tests)
        """
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self.inner = inner
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: "OrderedDict[str, tuple[float, Any]]" = OrderedDict()
        self._lock = threading.Lock()

    def find_by_id(self, branch_id: str) -> Optional[Branch]:
        return self._cached(f"branch:{branch_id}", lambda: self.inner.find_by_id(branch_id))

    def is_active(self, branch_id: str) -> bool:
        return self._cached(f"active:{branch_id}", lambda: self.inner.is_active(branch_id))

    def list_active(self) -> list[Branch]:
        return list(self._cached("active-list", self.inner.list_active))

    def invalidate(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            self._entries.clear()

    def _cached(self, key: str, load: Callable[[], Any]) -> Any:
        value = self._get(key)
        if value is not _MISSING:
            return value

        value = load()
        self._put(key, value)
        return value

    def _get(self, key: str) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return _MISSING
            stored_at, value = entry
            if self._clock() - stored_at >= self.ttl_seconds:
                del self._entries[key]
                logger.debug(f"Branch cache entry expired: {key}")
                return _MISSING
            return value

    def _put(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = (self._clock(), value)
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)
