import pytest

from hardware.pwm.pwm_sink_mock import MockPwmSink
from models.enums import LedChannel, LogLevel
from utils.logger import configure_logger, get_logger


PINS = {
    LedChannel.MANUAL: 17,
    LedChannel.FADE_PRIMARY: 27,
    LedChannel.FADE_SECONDARY: 22,
}


@pytest.fixture(autouse=True)
def restore_logger():
    """Keep logger configuration changes local to one test."""
    logger = get_logger()
    saved = (logger.min_level, logger.use_colors)
    yield
    configure_logger(*saved)


@pytest.fixture
def pins():
    return dict(PINS)


@pytest.fixture
def sink(pins):
    """Initialized in-memory PWM sink."""
    mock = MockPwmSink(pins)
    mock.initialize()
    return mock
