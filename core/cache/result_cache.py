"""Result Cache Service - in-process TTL caching for parsed resumes."""
import json
import logging
import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from core.utils import ContentFingerprinter, format_bytes, format_duration

if TYPE_CHECKING:
    from etl.resume.models import ResumeRecord

logger = logging.getLogger(__name__)

# 5 minutes in seconds
CACHE_TTL_SECONDS = 5 * 60

# The sweep only bounds memory; freshness is checked on every read
SWEEP_INTERVAL_SECONDS = 10 * 60


@dataclass(frozen=True)
class CacheEntry:
    """A cached extraction result and the clock reading at insertion."""
    fingerprint: str
    record: "ResumeRecord"
    inserted_at: float


class ResultCacheService:
    """
    Service for caching extraction results to avoid re-parsing.

    Entries are keyed by content fingerprint and considered fresh while
    `now - inserted_at < ttl_seconds`. A background sweeper bounds memory
    by deleting stale entries every `sweep_interval_seconds`.

    All map access goes through one lock, the sweep included. Errors are
    logged and reported as a miss, never raised to the caller.
    """

    def __init__(
        self,
        ttl_seconds: int = CACHE_TTL_SECONDS,
        sweep_interval_seconds: int = SWEEP_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        self.ttl_seconds = ttl_seconds
        self.sweep_interval_seconds = sweep_interval_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._sweeper: Optional[threading.Thread] = None

    @staticmethod
    def fingerprint(text: str) -> str:
        """Content fingerprint used as the cache key."""
        return ContentFingerprinter.calculate(text)

    @property
    def size(self) -> int:
        """Number of stored entries, stale ones included until swept."""
        with self._lock:
            return len(self._entries)

    def keys(self) -> List[str]:
        """Fingerprints currently stored."""
        with self._lock:
            return list(self._entries)

    def _is_fresh(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.inserted_at < self.ttl_seconds

    def get(self, fingerprint: str) -> Optional["ResumeRecord"]:
        """Get a cached record by fingerprint, None when absent or stale."""
        try:
            with self._lock:
                entry = self._entries.get(fingerprint)
                if entry is None:
                    logger.debug(f"Cache miss for {ContentFingerprinter.short(fingerprint)}")
                    return None

                if not self._is_fresh(entry, self._clock()):
                    del self._entries[fingerprint]
                    logger.debug(f"Cache entry expired for {ContentFingerprinter.short(fingerprint)}")
                    return None

            logger.debug(f"Cache hit for {ContentFingerprinter.short(fingerprint)}")
            return entry.record

        except Exception as e:
            logger.warning(f"Error reading from result cache: {e}")
            return None

    def get_entry(self, fingerprint: str) -> Optional[CacheEntry]:
        """Get the raw entry (fresh or stale) for inspection."""
        try:
            with self._lock:
                return self._entries.get(fingerprint)
        except Exception as e:
            logger.warning(f"Error reading from result cache: {e}")
            return None

    def put(self, fingerprint: str, record: "ResumeRecord") -> bool:
        """Cache a record, replacing any previous entry for the fingerprint."""
        try:
            entry = CacheEntry(
                fingerprint=fingerprint,
                record=record,
                inserted_at=self._clock()
            )
            with self._lock:
                self._entries[fingerprint] = entry
            logger.debug(
                f"Cached result {ContentFingerprinter.short(fingerprint)} "
                f"(TTL: {self.ttl_seconds}s)"
            )
            return True

        except Exception as e:
            logger.warning(f"Error writing to result cache: {e}")
            return False

    def delete(self, fingerprint: str) -> bool:
        """Remove an entry from the cache."""
        try:
            with self._lock:
                self._entries.pop(fingerprint, None)
            logger.debug(f"Deleted {ContentFingerprinter.short(fingerprint)} from cache")
            return True
        except Exception as e:
            logger.warning(f"Error deleting from result cache: {e}")
            return False

    def sweep(self) -> int:
        """Delete every entry whose age has reached the TTL.

        Returns:
            Number of entries removed
        """
        try:
            with self._lock:
                now = self._clock()
                stale = [
                    fingerprint for fingerprint, entry in self._entries.items()
                    if not self._is_fresh(entry, now)
                ]
                for fingerprint in stale:
                    del self._entries[fingerprint]
                remaining = len(self._entries)

            if stale:
                logger.info(f"Swept {len(stale)} expired entries from result cache ({remaining} left)")
            return len(stale)

        except Exception as e:
            logger.warning(f"Error sweeping result cache: {e}")
            return 0

    def _estimate_memory(self, entries: List[CacheEntry]) -> int:
        """Approximate footprint: UTF-8 size of keys plus JSON-encoded records."""
        total = 0
        for entry in entries:
            total += len(entry.fingerprint)
            total += len(json.dumps(entry.record.to_dict(), ensure_ascii=False).encode('utf-8'))
        return total

    def get_cache_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        try:
            with self._lock:
                entries = list(self._entries.values())

            memory_bytes = self._estimate_memory(entries)
            return {
                "available": True,
                "size": len(entries),
                "ttl_seconds": self.ttl_seconds,
                "ttl_human": format_duration(self.ttl_seconds),
                "sweep_interval_seconds": self.sweep_interval_seconds,
                "memory_usage_bytes": memory_bytes,
                "memory_usage_human": format_bytes(memory_bytes),
                "cache_keys": [entry.fingerprint for entry in entries]
            }
        except Exception as e:
            logger.warning(f"Error getting cache stats: {e}")
            return {"available": False, "error": str(e)}

    def clear_all(self) -> bool:
        """Clear all cached results."""
        try:
            with self._lock:
                deleted = len(self._entries)
                self._entries.clear()
            logger.info(f"Cleared {deleted} results from cache")
            return True
        except Exception as e:
            logger.warning(f"Error clearing result cache: {e}")
            return False

    def start_sweeper(self) -> None:
        """Start the background sweep thread (no-op if already running)."""
        if self._sweeper is not None and self._sweeper.is_alive():
            return

        self._stop_event.clear()
        self._sweeper = threading.Thread(
            target=self._sweep_loop,
            name="result-cache-sweeper",
            daemon=True
        )
        self._sweeper.start()
        logger.info(f"Result cache sweeper started (every {self.sweep_interval_seconds}s)")

    def stop_sweeper(self, timeout: Optional[float] = 5.0) -> None:
        """Signal the sweep thread to exit and wait for it."""
        self._stop_event.set()
        if self._sweeper is not None:
            self._sweeper.join(timeout=timeout)
            self._sweeper = None
            logger.info("Result cache sweeper stopped")

    def _sweep_loop(self) -> None:
        while not self._stop_event.wait(self.sweep_interval_seconds):
            self.sweep()


# Global instance for application use
_result_cache: Optional[ResultCacheService] = None


def get_result_cache() -> Optional[ResultCacheService]:
    """Get global result cache instance."""
    return _result_cache


def init_result_cache(
    ttl_seconds: int = CACHE_TTL_SECONDS,
    sweep_interval_seconds: int = SWEEP_INTERVAL_SECONDS
) -> ResultCacheService:
    """Initialize global result cache."""
    global _result_cache
    _result_cache = ResultCacheService(ttl_seconds, sweep_interval_seconds)
    return _result_cache
