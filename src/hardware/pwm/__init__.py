from .errors import PwmSinkError, InitializationFailure, WriteFailure, ShutdownFailure
from .pwm_sink_interface import IPwmSink
from .pwm_sink_pigpio import PigpioPwmSink
from .pwm_sink_rpi_gpio import RpiGpioPwmSink
from .pwm_sink_mock import MockPwmSink
from .pwm_sink_factory import create_pwm_sink, resolve_backend
from .sink_lifecycle import initialize_sink, shutdown_sink


__all__ = [
    "PwmSinkError",
    "InitializationFailure",
    "WriteFailure",
    "ShutdownFailure",
    "IPwmSink",
    "PigpioPwmSink",
    "RpiGpioPwmSink",
    "MockPwmSink",
    "create_pwm_sink",
    "resolve_backend",
    "initialize_sink",
    "shutdown_sink",
]
