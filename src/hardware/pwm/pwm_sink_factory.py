# factory.py
from models.config import PwmConfig
from models.enums import PwmBackend
from runtime.runtime_info import RuntimeInfo
from hardware.pwm.pwm_sink_interface import IPwmSink
from hardware.pwm.pwm_sink_pigpio import PigpioPwmSink
from hardware.pwm.pwm_sink_rpi_gpio import RpiGpioPwmSink
from hardware.pwm.pwm_sink_mock import MockPwmSink
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


def resolve_backend(backend: PwmBackend) -> PwmBackend:
    """Resolve AUTO to a concrete backend based on installed modules"""
    if backend != PwmBackend.AUTO:
        return backend

    if RuntimeInfo.has_pigpio():
        return PwmBackend.PIGPIO
    if RuntimeInfo.has_gpio() and RuntimeInfo.is_raspberry_pi():
        return PwmBackend.RPI_GPIO
    return PwmBackend.MOCK


def create_pwm_sink(config: PwmConfig) -> 'IPwmSink':
    backend = resolve_backend(config.backend)
    log.info("PWM backend selected", requested=config.backend.name, backend=backend.name)

    if backend == PwmBackend.PIGPIO:
        return PigpioPwmSink(config.pins, frequency_hz=config.frequency_hz)
    if backend == PwmBackend.RPI_GPIO:
        return RpiGpioPwmSink(config.pins, frequency_hz=config.frequency_hz)
    return MockPwmSink(config.pins)
