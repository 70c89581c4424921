"""
RPi.GPIO PWM sink - Hardware Layer

Software PWM through RPi.GPIO. Channel values (0-255) are mapped to the
0-100 % duty cycle RPi.GPIO expects.
"""

from typing import Dict
from hardware.pwm.errors import InitializationFailure, ShutdownFailure, WriteFailure
from hardware.pwm.pwm_sink_interface import IPwmSink
from models.enums import LedChannel
from models.fade_state import PWM_MAX
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


def to_duty_percent(value: int) -> float:
    """Map 0-255 level to 0-100 % duty cycle"""
    return value * 100.0 / PWM_MAX


class RpiGpioPwmSink(IPwmSink):
    """
    PWM sink backed by RPi.GPIO software PWM.

    Responsibilities:
    - Initialize RPi.GPIO library (BCM mode, disable warnings)
    - Create one GPIO.PWM object per channel, started at 0 %
    - Stop PWM objects and clean up channel pins on shutdown
    """

    def __init__(self, pins: Dict[LedChannel, int], frequency_hz: int = 800):
        self._pins: Dict[LedChannel, int] = dict(pins)
        self._frequency_hz = frequency_hz
        self._gpio = None
        self._pwm: Dict[LedChannel, object] = {}

    @property
    def channels(self) -> Dict[LedChannel, int]:
        return self._pins.copy()

    # -------------------------------
    # Lifecycle
    # -------------------------------

    def initialize(self) -> None:
        try:
            import RPi.GPIO as GPIO
        except (ImportError, RuntimeError) as e:
            # RPi.GPIO raises RuntimeError on import when not running on a Pi
            raise InitializationFailure(f"RPi.GPIO not available: {e}") from e

        self._gpio = GPIO

        try:
            self._gpio.setmode(self._gpio.BCM)
            self._gpio.setwarnings(False)

            for channel, pin in self._pins.items():
                self._gpio.setup(pin, self._gpio.OUT, initial=self._gpio.LOW)
                pwm = self._gpio.PWM(pin, self._frequency_hz)
                pwm.start(0)
                self._pwm[channel] = pwm
                log.debug("PWM pin configured", channel=channel.name, pin=pin)
        except (RuntimeError, ValueError) as e:
            raise InitializationFailure(f"GPIO initialization failed: {e}") from e

        log.info(
            "RPi.GPIO PWM sink initialized (BCM mode)",
            pins=", ".join(str(p) for p in self._pins.values()),
            frequency=f"{self._frequency_hz} Hz"
        )

    def cleanup(self) -> None:
        if self._gpio is None:
            return

        try:
            for pwm in self._pwm.values():
                pwm.stop()
            self._gpio.cleanup(list(self._pins.values()))
        except (RuntimeError, ValueError) as e:
            raise ShutdownFailure(f"GPIO cleanup failed: {e}") from e
        finally:
            self._pwm.clear()
            self._gpio = None

        log.info("RPi.GPIO PWM sink released")

    # -------------------------------
    # IO
    # -------------------------------

    def write(self, channel: LedChannel, value: int) -> None:
        pwm = self._pwm.get(channel)
        if pwm is None:
            raise WriteFailure(f"PWM channel {channel.name} not initialized")

        try:
            pwm.ChangeDutyCycle(to_duty_percent(value))
        except Exception as e:
            raise WriteFailure(f"PWM write to GPIO {self._pins[channel]} failed: {e}") from e
