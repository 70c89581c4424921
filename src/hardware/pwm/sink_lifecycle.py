"""
PWM sink lifecycle hooks

initialize_sink() must run before any write. shutdown_sink() turns every
channel off and then releases the driver.
"""

from hardware.pwm.errors import ShutdownFailure, WriteFailure
from hardware.pwm.pwm_sink_interface import IPwmSink
from models.fade_state import PWM_MIN
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


def initialize_sink(sink: IPwmSink) -> None:
    """
    Initialize the sink and turn all channels off.

    Raises:
        InitializationFailure: If the driver cannot be opened
    """
    sink.initialize()

    for channel in sink.channels:
        try:
            sink.write(channel, PWM_MIN)
        except WriteFailure as e:
            log.warn("Initial PWM write failed", channel=channel.name, error=str(e))


def shutdown_sink(sink: IPwmSink) -> None:
    """
    Write 0 to all channels, then release the sink.

    Failed zero writes are logged and do not stop the release.

    Raises:
        ShutdownFailure: If the sink cannot be released
    """
    log.info(f"Turning off {len(sink.channels)} PWM channels")

    for channel in sink.channels:
        try:
            sink.write(channel, PWM_MIN)
        except WriteFailure as e:
            log.warn("Failed to turn off PWM channel", channel=channel.name, error=str(e))

    try:
        sink.cleanup()
    except ShutdownFailure:
        raise
    except Exception as e:
        raise ShutdownFailure(f"PWM sink cleanup failed: {e}") from e

    log.info("PWM sink shutdown complete")
