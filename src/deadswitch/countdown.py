"""Countdown state machine for deadswitch.

One controller owns the single countdown of the process. All reads and
writes of its state go through one lock:

    disarmed --arm()--> armed --(expiry passed, files deleted)--> disarmed

Arming while armed is a silent no-op, so at most one watcher thread exists
per armed period. The watcher holds the lock across the deletion call, so
``armed`` only flips back to False after the files are gone and no new
countdown can start mid-deletion. Status readers stall for the duration of
the deletion.
"""

from __future__ import annotations

import math
import threading
import time
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from .constants import POLL_INTERVAL, THREAD_JOIN_TIMEOUT, TIMESTAMP_FORMAT
from .deletion import DeletionReport, delete_all
from .logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from .config import Configuration

    Deleter = Callable[[Iterable[Path]], list[DeletionReport]]

logger = get_logger(__name__)


def _format_deadline(seconds: int) -> str:
    """Wall-clock deletion time, or a relative form past the datetime range."""
    try:
        return (datetime.now() + timedelta(seconds=seconds)).strftime(TIMESTAMP_FORMAT)
    except (OverflowError, ValueError):
        return f"{seconds} seconds from now"


class CountdownController:
    """Thread-safe owner of the armed flag and expiry deadline.

    Usage:
        controller = CountdownController()
        controller.arm(config)          # starts the watcher
        controller.remaining_seconds()  # safe from any thread

    Args:
        poll_interval: Seconds between watcher expiry checks.
        deleter: Called with the configured roots once the deadline passes.
        clock: Monotonic time source in seconds.
    """

    def __init__(
        self,
        poll_interval: float = POLL_INTERVAL,
        deleter: Deleter = delete_all,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.poll_interval = poll_interval
        self._deleter = deleter
        self._clock = clock

        self._lock = threading.Lock()
        self._armed = False
        self._expiry = 0.0
        self._closed = False
        self._watcher: threading.Thread | None = None
        self._stop_event = threading.Event()
        self.last_reports: list[DeletionReport] = []

    def arm(self, config: Configuration) -> bool:
        """Start the countdown for ``config`` unless one is already running.

        Returns:
            True if a new countdown started, False if the call was a no-op.
        """
        with self._lock:
            if self._armed or self._closed:
                logger.debug("Countdown already running; arm request ignored")
                return False

            self._armed = True
            self._expiry = self._clock() + config.time_limit_seconds
            self._stop_event = threading.Event()
            self._watcher = threading.Thread(
                target=self._watch,
                args=(config, self._stop_event),
                name="deadswitch-watcher",
                daemon=True,
            )
            self._watcher.start()

        logger.warning(
            "Countdown started. Code will be deleted at: %s",
            _format_deadline(config.time_limit_seconds),
        )
        return True

    def remaining_seconds(self) -> int:
        """Whole seconds until deletion, 0 when disarmed or past the deadline."""
        with self._lock:
            if not self._armed:
                return 0
            return max(0, math.floor(self._expiry - self._clock()))

    @property
    def is_armed(self) -> bool:
        with self._lock:
            return self._armed

    @property
    def expiry(self) -> float | None:
        """Deadline on the controller clock, None while disarmed."""
        with self._lock:
            return self._expiry if self._armed else None

    def shutdown(self, timeout: float = THREAD_JOIN_TIMEOUT) -> None:
        """Stop a pending watcher without deleting anything.

        Only meant for process exit: the controller accepts no further
        arm requests afterwards.
        """
        with self._lock:
            self._closed = True
            watcher = self._watcher
            self._stop_event.set()

        if watcher is not None and watcher is not threading.current_thread():
            watcher.join(timeout=timeout)

    def _watch(self, config: Configuration, stop_event: threading.Event) -> None:
        """Poll for expiry, then delete and disarm in one critical section."""
        while not stop_event.wait(self.poll_interval):
            with self._lock:
                if self._clock() <= self._expiry:
                    continue

                logger.warning("Countdown expired, deleting files")
                try:
                    self.last_reports = self._deleter(config.roots)
                except Exception:
                    logger.exception("Deletion aborted unexpectedly")
                    self.last_reports = []
                finally:
                    self._armed = False
                return
        logger.debug("Watcher stopped before expiry")
