"""
Tick Scheduler

Fixed-period asyncio loop that calls a synchronous callback once per period.
Deadlines are absolute, so a late tick is run as soon as possible instead of
being skipped or merged with the next one.
"""

import asyncio
import contextlib
from typing import Callable, Optional

from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ANIMATION)


class TickScheduler:
    """
    Periodic driver for tick-based animations.

    Example:
        scheduler = TickScheduler(fade_generator.tick, period_ms=20)
        await scheduler.start()
        ...
        await scheduler.stop()
    """

    def __init__(self, callback: Callable[[], object], period_ms: int = 20, name: str = "fade-ticker"):
        if period_ms <= 0:
            raise ValueError(f"Tick period must be positive, got {period_ms} ms")

        self._callback = callback
        self.period_ms = period_ms
        self.name = name
        self.running = False
        self.tick_count = 0
        self.error_count = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def task(self) -> Optional[asyncio.Task]:
        return self._task

    async def start(self) -> None:
        """Start the tick loop."""
        if self.running:
            log.warn("TickScheduler already running", name=self.name)
            return

        self.running = True
        self._task = asyncio.create_task(self._tick_loop(), name=self.name)

    async def stop(self) -> None:
        """Stop the tick loop. No further callbacks run after this returns."""
        if not self.running:
            return
        self.running = False

        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

        log.info("Tick loop stopped", name=self.name, ticks=self.tick_count)

    async def _tick_loop(self) -> None:
        """Main tick loop @ fixed period."""
        loop = asyncio.get_running_loop()
        period = self.period_ms / 1000

        log.info(f"Tick loop @ {self.period_ms} ms", name=self.name)

        next_deadline = loop.time()
        while self.running:
            try:
                self._callback()
            except Exception as e:
                # A failing tick must not cancel the loop
                self.error_count += 1
                log.error("Tick callback failed", name=self.name, error=str(e), error_type=type(e).__name__)

            self.tick_count += 1
            next_deadline += period
            await asyncio.sleep(max(0.0, next_deadline - loop.time()))
