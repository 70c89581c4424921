"""
pigpio PWM sink - Hardware Layer

Drives LED channels through the pigpio daemon (pigpiod).
Duty cycle range is set to 255 so channel values are written unscaled.
"""

from typing import Dict, Optional
from hardware.pwm.errors import InitializationFailure, ShutdownFailure, WriteFailure
from hardware.pwm.pwm_sink_interface import IPwmSink
from models.enums import LedChannel
from models.fade_state import PWM_MAX
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


class PigpioPwmSink(IPwmSink):
    """
    PWM sink backed by pigpio.

    Responsibilities:
    - Connect to pigpiod (local or remote host)
    - Configure channel pins as PWM outputs
    - Write 0-255 duty cycles
    - Disconnect on cleanup
    """

    def __init__(self, pins: Dict[LedChannel, int], frequency_hz: int = 800, host: Optional[str] = None):
        """
        Args:
            pins: Channel -> BCM pin mapping
            frequency_hz: PWM frequency requested from pigpiod
            host: pigpiod host (None = localhost / PIGPIO_ADDR)
        """
        self._pins: Dict[LedChannel, int] = dict(pins)
        self._frequency_hz = frequency_hz
        self._host = host
        self._pi = None

    @property
    def channels(self) -> Dict[LedChannel, int]:
        return self._pins.copy()

    # -------------------------------
    # Lifecycle
    # -------------------------------

    def initialize(self) -> None:
        try:
            import pigpio
        except ImportError as e:
            raise InitializationFailure("pigpio not available") from e

        self._pi = pigpio.pi(self._host) if self._host else pigpio.pi()

        if not self._pi.connected:
            raise InitializationFailure("GPIO initialization failed (is pigpiod running?)")

        try:
            for channel, pin in self._pins.items():
                self._pi.set_mode(pin, pigpio.OUTPUT)
                self._pi.set_PWM_frequency(pin, self._frequency_hz)
                self._pi.set_PWM_range(pin, PWM_MAX)
                log.debug("PWM pin configured", channel=channel.name, pin=pin)
        except (pigpio.error, OSError) as e:
            raise InitializationFailure(f"GPIO initialization failed: {e}") from e

        log.info(
            "pigpio PWM sink initialized",
            pins=", ".join(str(p) for p in self._pins.values()),
            frequency=f"{self._frequency_hz} Hz"
        )

    def cleanup(self) -> None:
        if self._pi is None:
            return

        try:
            self._pi.stop()
        except Exception as e:
            raise ShutdownFailure(f"pigpio disconnect failed: {e}") from e
        finally:
            self._pi = None

        log.info("pigpio PWM sink released")

    # -------------------------------
    # IO
    # -------------------------------

    def write(self, channel: LedChannel, value: int) -> None:
        if self._pi is None:
            raise WriteFailure("PWM sink not initialized")

        pin = self._pins[channel]
        try:
            self._pi.set_PWM_dutycycle(pin, value)
        except Exception as e:
            raise WriteFailure(f"PWM write to GPIO {pin} failed: {e}") from e
