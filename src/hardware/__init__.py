"""
Hardware Layer

Low-level hardware access only:

- PWM sinks (pigpio, RPi.GPIO, mock) + lifecycle hooks
- Input sources for the manual channel (stdin)
"""
from .pwm import IPwmSink, create_pwm_sink, initialize_sink, shutdown_sink

__all__ = [
    "IPwmSink",
    "create_pwm_sink",
    "initialize_sink",
    "shutdown_sink",
]
