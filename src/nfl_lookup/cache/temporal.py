from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_S = 300.0
DEFAULT_SWEEP_INTERVAL_S = 600.0


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    value: T
    inserted_at: float


@dataclass
class TemporalCache(Generic[T]):
    """In-memory key/value cache with a single fixed time-to-live.

    Freshness is enforced on read: `get` never returns an entry older than
    `ttl_s` and drops it on the spot. `sweep` removes every stale entry and
    only exists so keys that are never read again do not pile up.

    All operations are guarded by one lock; overlapping puts are last-writer-wins.
    """

    ttl_s: float = DEFAULT_TTL_S

    _clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    _entries: dict[str, CacheEntry[T]] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)
    _sweeper: CacheSweeper | None = field(default=None, init=False, repr=False)

    def _is_stale(self, entry: CacheEntry[T], now: float) -> bool:
        return now - entry.inserted_at > self.ttl_s

    def get(self, key: str) -> T | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._is_stale(entry, self._clock()):
                del self._entries[key]
                return None
            return entry.value

    def put(self, key: str, value: T) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(value=value, inserted_at=self._clock())
        logger.debug("Cached %s", key)

    def evict(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def sweep(self) -> int:
        """Drop every stale entry; returns how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if self._is_stale(e, now)]
            for key in expired:
                del self._entries[key]

        if expired:
            logger.info("Swept %d expired cache entries", len(expired))
        return len(expired)

    def __len__(self) -> int:
        """Number of stored entries, stale ones included until evicted."""
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            entry = self._entries.get(key)  # type: ignore[arg-type]
            return entry is not None and not self._is_stale(entry, self._clock())

    # -----------------------------
    # Lifecycle
    # -----------------------------

    def start_sweeper(self, interval_s: float = DEFAULT_SWEEP_INTERVAL_S) -> CacheSweeper:
        if self._sweeper is None:
            self._sweeper = CacheSweeper(self, interval_s=interval_s)
        self._sweeper.start()
        return self._sweeper

    def close(self) -> None:
        if self._sweeper is not None:
            self._sweeper.stop()
            self._sweeper = None

    def __enter__(self) -> TemporalCache[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class CacheSweeper:
    """Runs `cache.sweep()` every `interval_s` seconds on a daemon thread.

    `stop()` wakes the thread immediately and joins it.
    """

    def __init__(
        self, cache: TemporalCache, *, interval_s: float = DEFAULT_SWEEP_INTERVAL_S
    ) -> None:
        if interval_s <= 0:
            raise ValueError("interval_s must be positive")
        self.cache = cache
        self.interval_s = interval_s
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="cache-sweeper", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _run(self) -> None:
        while not self._stop.wait(self.interval_s):
            try:
                self.cache.sweep()
            except Exception:
                # Keep the loop alive; the next tick retries.
                logger.exception("Cache sweep failed")

    def __enter__(self) -> CacheSweeper:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
