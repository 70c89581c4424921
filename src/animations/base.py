"""
Base Animation Class

All PWM animations inherit from BaseAnimation and implement tick().
"""

from hardware.pwm.errors import WriteFailure
from hardware.pwm.pwm_sink_interface import IPwmSink
from models.enums import LedChannel
from utils.logger import LogCategory, get_category_logger

log = get_category_logger(LogCategory.ANIMATION)


class BaseAnimation:
    """
    Base class for tick-driven PWM animations

    Animations are plain state machines: an external scheduler calls tick()
    once per period. They never sleep or await, so a tick cannot overrun
    the period.

    Subclasses MUST implement tick().
    """

    def __init__(self, sink: IPwmSink):
        self.sink = sink

    # ------------------------------------------------------------
    # Runtime
    # ------------------------------------------------------------

    def tick(self):
        raise NotImplementedError

    def reset(self) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------

    def _emit(self, channel: LedChannel, value: int) -> bool:
        """
        Fire-and-forget write to the sink.

        Returns:
            False if the write failed (failure is logged, never raised)
        """
        try:
            self.sink.write(channel, value)
            return True
        except WriteFailure as e:
            log.warn("PWM write failed", channel=channel.name, value=value, error=str(e))
            return False
