"""
Fixed-period ticker for the game loop.

Runs a single job on a private schedule.Scheduler and waits on a
cancellation event between runs, so a cancel wakes it immediately.
"""

import logging
import threading
from typing import Callable

import schedule

logger = logging.getLogger(__name__)


class Ticker:
    """
    Calls job every interval seconds until cancel is set.

    Each Ticker owns its own Scheduler so several loops (or tests) never
    share the module-level default schedule.
    """

    def __init__(self, interval: float, job: Callable[[], None]):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}.")
        self.interval = interval
        self.job = job
        self.scheduler = schedule.Scheduler()

    def run(self, cancel: threading.Event) -> None:
        """Block until cancel is set, running the job on every tick."""
        self.scheduler.every(self.interval).seconds.do(self.job)
        logger.debug("Ticker started every %ss", self.interval)
        try:
            while not cancel.wait(self._idle_seconds()):
                self.scheduler.run_pending()
        finally:
            self.scheduler.clear()
            logger.debug("Ticker stopped")

    def _idle_seconds(self) -> float:
        idle = self.scheduler.idle_seconds
        if idle is None:
            return self.interval
        return max(idle, 0.0)
