"""
Enums for the PWM LED controller
"""

from enum import Enum, auto


class FadeDirection(Enum):
    """Direction of the fade generator ramp"""
    RISING = auto()
    FALLING = auto()


class LedChannel(Enum):
    """Logical PWM output channels (one per LED)"""
    MANUAL = auto()          # Red LED, driven by the user level
    FADE_PRIMARY = auto()    # Green LED, follows fade brightness
    FADE_SECONDARY = auto()  # Blue LED, inverse of fade brightness


class PwmBackend(Enum):
    """PWM driver backends selectable from config.yaml"""
    AUTO = auto()      # pigpio if available, then RPi.GPIO, else mock
    PIGPIO = auto()    # pigpiod daemon (hardware-timed PWM)
    RPI_GPIO = auto()  # RPi.GPIO software PWM
    MOCK = auto()      # In-memory sink (development machines, tests)


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    HARDWARE = auto()    # PWM sink, GPIO pins
    ANIMATION = auto()   # Fade generator, tick scheduler
    INPUT = auto()       # Manual level input
    SYSTEM = auto()      # Startup, errors
    SHUTDOWN = auto()    # Shutdown sequence
