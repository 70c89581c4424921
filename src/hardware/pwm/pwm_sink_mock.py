from typing import Dict, List, Tuple
from hardware.pwm.errors import InitializationFailure, ShutdownFailure, WriteFailure
from hardware.pwm.pwm_sink_interface import IPwmSink
from models.enums import LedChannel
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)

class MockPwmSink(IPwmSink):
    """
    In-memory PWM sink for machines without GPIO and for tests.

    Records the last value per channel and the full write history.
    fail_on_initialize / fail_writes / fail_on_cleanup simulate driver errors.
    """

    def __init__(
        self,
        pins: Dict[LedChannel, int],
        fail_on_initialize: bool = False,
        fail_writes: bool = False,
        fail_on_cleanup: bool = False,
    ):
        self._pins: Dict[LedChannel, int] = dict(pins)
        self.values: Dict[LedChannel, int] = {}
        self.history: List[Tuple[LedChannel, int]] = []
        self.initialized = False
        self.released = False

        self.fail_on_initialize = fail_on_initialize
        self.fail_writes = fail_writes
        self.fail_on_cleanup = fail_on_cleanup

    @property
    def channels(self) -> Dict[LedChannel, int]:
        return self._pins.copy()

    # -------------------------------
    # Lifecycle
    # -------------------------------

    def initialize(self) -> None:
        if self.fail_on_initialize:
            raise InitializationFailure("GPIO initialization failed (simulated)")

        self.values = {channel: 0 for channel in self._pins}
        self.initialized = True
        self.released = False
        log.info("Mock PWM sink initialized", channels=len(self._pins))

    def cleanup(self) -> None:
        if self.fail_on_cleanup:
            raise ShutdownFailure("PWM release failed (simulated)")

        self.initialized = False
        self.released = True
        log.info("Mock PWM sink released")

    # -------------------------------
    # IO
    # -------------------------------

    def write(self, channel: LedChannel, value: int) -> None:
        if not self.initialized:
            raise WriteFailure("PWM sink not initialized")
        if self.fail_writes:
            raise WriteFailure(f"PWM write to {channel.name} failed (simulated)")

        self.values[channel] = int(value)
        self.history.append((channel, int(value)))

    def writes_for(self, channel: LedChannel) -> List[int]:
        """All values written to one channel, oldest first"""
        return [value for ch, value in self.history if ch == channel]
