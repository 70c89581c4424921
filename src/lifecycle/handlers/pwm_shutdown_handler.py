from __future__ import annotations

from hardware.pwm.errors import ShutdownFailure
from hardware.pwm.pwm_sink_interface import IPwmSink
from hardware.pwm.sink_lifecycle import shutdown_sink
from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class PwmShutdownHandler(IShutdownHandler):
    """
    Shutdown handler for PWM hardware.

    Writes 0 to every channel and releases the PWM driver.
    A release failure is logged and does not block termination.

    Priority: 10 (shutdown last)
    """

    def __init__(self, sink: IPwmSink):
        self.sink = sink

    @property
    def shutdown_priority(self) -> int:
        """PWM cleanup has low priority (happens last)."""
        return 10

    async def shutdown(self) -> None:
        log.info("Turning off LEDs and releasing PWM driver...")

        try:
            shutdown_sink(self.sink)
            log.debug("PWM driver released")
        except ShutdownFailure as e:
            log.error(f"Error releasing PWM driver: {e}")
