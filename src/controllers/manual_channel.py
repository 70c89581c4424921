from hardware.pwm.errors import WriteFailure
from hardware.pwm.pwm_sink_interface import IPwmSink
from models.enums import LedChannel
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.INPUT)


class ManualChannel:
    """
    Pass-through from a user level to one PWM channel.

    Holds no state. Callers clamp the level to [0, 255] (see
    utils.clamp_level); set_level() does not validate.
    """

    def __init__(self, sink: IPwmSink, channel: LedChannel = LedChannel.MANUAL):
        self.sink = sink
        self.channel = channel

    def set_level(self, value: int) -> None:
        """Write value to the manual channel (fire-and-forget)"""
        try:
            self.sink.write(self.channel, value)
            log.debug("Manual level set", channel=self.channel.name, value=value)
        except WriteFailure as e:
            log.warn("PWM write failed", channel=self.channel.name, value=value, error=str(e))
