"""
Configuration models

PwmConfig is built from the merged YAML data loaded by ConfigManager.
"""

from dataclasses import dataclass
from typing import Any, Dict

from models.enums import LedChannel, LogLevel, PwmBackend
from utils.enum_helper import EnumHelper


@dataclass(frozen=True)
class PwmConfig:
    """
    Runtime configuration of the PWM LED controller.

    Pins are BCM numbers. period_ms is the fixed fade tick period.
    """
    backend: PwmBackend = PwmBackend.AUTO
    frequency_hz: int = 800
    manual_pin: int = 17
    fade_primary_pin: int = 27
    fade_secondary_pin: int = 22
    fade_step: int = 2
    period_ms: int = 20
    log_level: LogLevel = LogLevel.INFO
    log_colors: bool = True

    def __post_init__(self):
        pins = [self.manual_pin, self.fade_primary_pin, self.fade_secondary_pin]
        if len(set(pins)) != len(pins):
            raise ValueError(f"PWM pins must be distinct, got {pins}")
        if any(pin < 0 for pin in pins):
            raise ValueError(f"PWM pins must be non-negative, got {pins}")
        if self.fade_step <= 0:
            raise ValueError(f"fade.step must be positive, got {self.fade_step}")
        if self.period_ms <= 0:
            raise ValueError(f"fade.period_ms must be positive, got {self.period_ms}")
        if self.frequency_hz <= 0:
            raise ValueError(f"pwm.frequency_hz must be positive, got {self.frequency_hz}")

    @property
    def pins(self) -> Dict[LedChannel, int]:
        return {
            LedChannel.MANUAL: self.manual_pin,
            LedChannel.FADE_PRIMARY: self.fade_primary_pin,
            LedChannel.FADE_SECONDARY: self.fade_secondary_pin,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PwmConfig":
        """
        Build config from YAML data

        Missing sections or keys keep their defaults.

        Raises:
            ValueError: On unknown backend / log level or invalid values
        """
        data = data or {}
        pwm = data.get("pwm") or {}
        pins = data.get("pins") or {}
        fade = data.get("fade") or {}
        logging = data.get("logging") or {}

        defaults = cls()
        return cls(
            backend=EnumHelper.to_enum(PwmBackend, pwm.get("backend", defaults.backend.name)),
            frequency_hz=int(pwm.get("frequency_hz", defaults.frequency_hz)),
            manual_pin=int(pins.get("manual", defaults.manual_pin)),
            fade_primary_pin=int(pins.get("fade_primary", defaults.fade_primary_pin)),
            fade_secondary_pin=int(pins.get("fade_secondary", defaults.fade_secondary_pin)),
            fade_step=int(fade.get("step", defaults.fade_step)),
            period_ms=int(fade.get("period_ms", defaults.period_ms)),
            log_level=EnumHelper.to_enum(LogLevel, logging.get("level", defaults.log_level.name)),
            log_colors=bool(logging.get("colors", defaults.log_colors)),
        )
