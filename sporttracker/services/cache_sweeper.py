"""Background sweeper for expired cache entries.

TTLCache already hides expired entries on read; this only reclaims the
memory of keys nobody asks for again.

FastAPI integration:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        sweeper = CacheSweeper(cache, interval_minutes=15)
        sweeper.start()
        yield
        sweeper.stop()
"""

import logging
import threading

from sporttracker.utilities.cache import TTLCache

logger = logging.getLogger(__name__)


class CacheSweeper:
    """Runs TTLCache.cleanup_expired() periodically in a daemon thread."""

    def __init__(self, cache: TTLCache, interval_minutes: float = 15):
        self._cache = cache
        self._interval_seconds = interval_minutes * 60
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> bool:
        """Start the sweeper thread.

        Returns:
            True if started, False if already running
        """
        if self.is_running:
            logger.warning("[CACHE] Sweeper already running")
            return False

        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run_loop, name="cache-sweeper", daemon=True)
        self._thread.start()
        logger.info("[CACHE] Sweeper started (interval: %.0fs)", self._interval_seconds)
        return True

    def stop(self, timeout: float = 5.0) -> None:
        """Signal the thread to stop and wait for it."""
        if not self._thread:
            return
        self._stop_event.set()
        self._thread.join(timeout=timeout)
        self._thread = None
        logger.info("[CACHE] Sweeper stopped")

    def sweep(self) -> int:
        """Run one sweep now. Returns the number of entries removed."""
        removed = self._cache.cleanup_expired()
        if removed:
            logger.debug("[CACHE] Swept %d expired entries", removed)
        return removed

    def _run_loop(self) -> None:
        while not self._stop_event.wait(self._interval_seconds):
            try:
                self.sweep()
            except Exception as e:
                logger.error("[CACHE] Sweep failed: %s", e)
