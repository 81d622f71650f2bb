"""Periodic timers advanced by an explicit elapsed time."""

import logging

logger = logging.getLogger(__name__)


class PeriodicTimer:
    """Fires every `delay_ms` of accumulated time while running.

    The timer never reads a clock. The owner passes elapsed time to
    `advance()` and gets back how many periods completed, so tests can
    drive it frame by frame.

    Usage:
        timer = PeriodicTimer(1500.0)
        timer.start()

        # In update loop:
        for _ in range(timer.advance(delta_ms)):
            spawn()
    """

    def __init__(self, delay_ms: float, name: str = "timer") -> None:
        if delay_ms <= 0:
            raise ValueError(f"delay_ms must be > 0, got {delay_ms}")
        self.name = name
        self._delay_ms = float(delay_ms)
        self._elapsed_ms = 0.0
        self._running = False

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @delay_ms.setter
    def delay_ms(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"delay_ms must be > 0, got {value}")
        self._delay_ms = float(value)

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start (or restart) the timer from a fresh period."""
        self._elapsed_ms = 0.0
        self._running = True
        logger.debug(f"{self.name} started ({self._delay_ms:.0f}ms)")

    def stop(self) -> None:
        """Pause the timer. Pending partial time is discarded."""
        self._running = False
        self._elapsed_ms = 0.0
        logger.debug(f"{self.name} stopped")

    def advance(self, elapsed_ms: float, max_fires: int | None = None) -> int:
        """Accumulate elapsed time and return the number of completed periods.

        Args:
            elapsed_ms: Time since the previous call
            max_fires: Optional cap; time beyond the cap is dropped

        Returns:
            Number of times the timer fired (0 while stopped)
        """
        if not self._running or elapsed_ms <= 0:
            return 0

        self._elapsed_ms += elapsed_ms
        fires = int(self._elapsed_ms // self._delay_ms)
        self._elapsed_ms -= fires * self._delay_ms

        if max_fires is not None and fires > max_fires:
            logger.debug(f"{self.name} dropped {fires - max_fires} late periods")
            fires = max_fires

        return fires
