"""
Background expiry sweeper.

Optional companion to lazy expiration: periodically purges stale entries so
they stop counting towards size(). Correctness never depends on it; the
cache stays bounded by capacity with or without a sweeper running.

Each sweep walks the table in batches (see TTLCache.sweep_expired), so
get/put wait at most one batch for the cache lock, not a full scan.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from core.cache import TTLCache
from core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ExpirySweeper:
    def __init__(self, cache: TTLCache, *, interval_seconds: float) -> None:
        interval = float(interval_seconds)
        if not interval > 0:
            raise ConfigurationError(f"interval_seconds must be positive, got {interval_seconds!r}")
        self._cache = cache
        self._interval = interval
        # One stop event per worker thread; a stopped worker is never revived.
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        # Guards start/stop against each other, not the sweep itself.
        self._lock = threading.Lock()

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive() and not self._stop.is_set()

    def run_once(self) -> int:
        removed = self._cache.sweep_expired()
        if removed:
            logger.debug("Swept %d expired entries", removed)
        return removed

    def start(self) -> None:
        with self._lock:
            if self.running:
                return
            previous = self._thread
            if previous is not None and previous.is_alive():
                # A timed-out stop(): let that worker finish its sweep first
                previous.join()
            stop = threading.Event()
            self._stop = stop
            self._thread = threading.Thread(
                target=self._run, args=(stop,), name="cache-expiry-sweeper", daemon=True
            )
            self._thread.start()
        logger.info("Expiry sweeper started (interval=%.3fs)", self._interval)

    def stop(self, timeout: Optional[float] = None) -> None:
        with self._lock:
            thread = self._thread
            if thread is None:
                return
            self._stop.set()
            thread.join(timeout)
            if thread.is_alive():
                logger.warning("Expiry sweeper still finishing a sweep after %ss", timeout)
                return
            self._thread = None
        logger.info("Expiry sweeper stopped")

    def _run(self, stop: threading.Event) -> None:
        # Event.wait doubles as the sleep so stop() wakes the loop immediately.
        while not stop.wait(self._interval):
            try:
                self.run_once()
            except Exception:
                logger.exception("Expiry sweep failed")

    def __enter__(self) -> "ExpirySweeper":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
