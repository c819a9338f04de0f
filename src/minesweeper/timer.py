"""
Elapsed-time counter for a Minesweeper session.

The counter advances once per interval while started, saturates at 999
and can be driven either by its own background timer (start/stop) or by
an external scheduler calling tick().
"""
import logging
import threading
from typing import Optional


logger = logging.getLogger(__name__)


class ElapsedTimer:
    """
    Saturating seconds counter with a cancellable periodic callback.

    Each tick re-arms a threading.Timer. stop() cancels the pending timer
    and bumps a generation number so that a callback already running
    cannot re-arm itself afterwards.
    """

    MAX_SECONDS = 999

    def __init__(self, interval: float = 1.0) -> None:
        """
        Initialize the timer.

        Args:
            interval: Seconds between ticks.
        """
        self.interval = interval
        self._seconds = 0
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0

    @property
    def seconds(self) -> int:
        """Elapsed seconds, 0 to MAX_SECONDS."""
        with self._lock:
            return self._seconds

    @property
    def running(self) -> bool:
        """Check if a periodic callback is armed."""
        with self._lock:
            return self._timer is not None

    def tick(self) -> int:
        """Advance by one second and return the new value."""
        with self._lock:
            return self._advance()

    def _advance(self) -> int:
        self._seconds = min(self._seconds + 1, self.MAX_SECONDS)
        return self._seconds

    def start(self) -> None:
        """Start ticking in the background; no-op if already running."""
        with self._lock:
            if self._timer is not None:
                return
            self._generation += 1
            self._arm(self._generation)
            started_at = self._seconds
        logger.debug("Timer started at %ds", started_at)

    def _arm(self, generation: int) -> None:
        # Caller holds the lock.
        timer = threading.Timer(self.interval, self._on_tick, args=(generation,))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _on_tick(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._timer is None:
                return
            self._advance()
            self._arm(generation)

    def stop(self) -> None:
        """Cancel the periodic callback, keeping the elapsed value."""
        with self._lock:
            self._generation += 1
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
            logger.debug("Timer stopped at %ds", self.seconds)

    def reset(self) -> None:
        """Stop ticking and return to zero."""
        self.stop()
        with self._lock:
            self._seconds = 0
