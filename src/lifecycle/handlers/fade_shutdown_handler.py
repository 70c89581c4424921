from __future__ import annotations

from engine.tick_scheduler import TickScheduler
from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class FadeShutdownHandler(IShutdownHandler):
    """
    Shutdown handler for the fade animation.

    Stops the tick scheduler before the PWM channels are zeroed, so no tick
    can write after the LEDs were turned off.

    Priority: 130 (runs first)
    """

    def __init__(self, scheduler: TickScheduler):
        self.scheduler = scheduler

    @property
    def shutdown_priority(self) -> int:
        return 130  # FIRST

    async def shutdown(self) -> None:
        log.info("Stopping fade animation...")
        await self.scheduler.stop()
        log.debug("Fade animation stopped", ticks=self.scheduler.tick_count)
