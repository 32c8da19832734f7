"""Background sweep of expired cache entries."""

import threading
from typing import Callable, Optional

import schedule

from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_SWEEP_INTERVAL_SECONDS = 300


class CacheSweeper:
    """Runs a purge job on a fixed interval from a daemon thread.

    The job is registered on a private schedule.Scheduler so sweeps do not
    mix with any module-level schedule jobs. The thread polls the
    scheduler and stops when stop() sets the cease event.

    Attributes:
        interval_seconds: Time between two sweeps.
        poll_interval: How often the thread checks for pending sweeps.
    """

    def __init__(
        self,
        purge: Callable[[], int],
        interval_seconds: int = DEFAULT_SWEEP_INTERVAL_SECONDS,
        poll_interval: float = 1.0,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than zero")
        self.interval_seconds = interval_seconds
        self.poll_interval = poll_interval
        self._purge = purge
        self._scheduler = schedule.Scheduler()
        self._scheduler.every(interval_seconds).seconds.do(self.run_now)
        self._cease = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run_now(self) -> int:
        """Run one sweep immediately.

        Errors from the purge job are logged, never raised, so a failing
        sweep cannot kill the thread.

        Returns:
            Number of entries removed (0 on error).
        """
        try:
            removed = self._purge()
        except Exception as e:  # pylint: disable=broad-except
            logger.error("cache_sweep_error", error=str(e))
            return 0

        if removed:
            logger.debug("cache_sweep_completed", removed=removed)
        return removed

    def start(self) -> None:
        """Start the sweep thread. No-op if already running."""
        if self.is_running:
            return

        self._cease.clear()
        self._thread = threading.Thread(
            target=self._run, name="cache-sweeper", daemon=True
        )
        self._thread.start()
        logger.info("cache_sweeper_started", interval_seconds=self.interval_seconds)

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signal the sweep thread to stop and wait for it."""
        if self._thread is None:
            return

        self._cease.set()
        self._thread.join(timeout)
        self._thread = None
        logger.info("cache_sweeper_stopped")

    def _run(self) -> None:
        while not self._cease.is_set():
            self._scheduler.run_pending()
            self._cease.wait(self.poll_interval)
