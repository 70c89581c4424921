"""
Fade Generator

Complementary fade on two PWM channels: the primary LED rises while the
secondary LED falls, reflecting at the 0 / 255 bounds.
"""

from typing import Tuple

from animations.base import BaseAnimation
from hardware.pwm.pwm_sink_interface import IPwmSink
from models.enums import FadeDirection, LedChannel
from models.fade_state import FadeState, PWM_MAX, PWM_MIN
from utils.logger import LogCategory, get_category_logger

log = get_category_logger(LogCategory.ANIMATION)


class FadeGenerator(BaseAnimation):
    """
    Linear ramp over [0, 255] with exact reflection at both bounds.

    Each tick emits (brightness, 255 - brightness) and then advances by
    `step`. Overshoot is clamped to the bound and flips the direction, so
    both 0 and 255 are always visited. The sequence is tick-counted and does
    not depend on the scheduling period.

    Example (step=2):
        tick 1   -> emits (0, 255),   brightness becomes 2
        tick 128 -> emits (254, 1),   brightness becomes 255, FALLING
        tick 256 -> emits (1, 254),   brightness becomes 0, RISING
    """

    DEFAULT_STEP = 2

    def __init__(self, sink: IPwmSink, step: int = DEFAULT_STEP):
        super().__init__(sink)
        if step <= 0:
            raise ValueError(f"Fade step must be positive, got {step}")

        self.step = step
        self._state = FadeState()
        self.tick_count = 0

    @property
    def state(self) -> FadeState:
        return self._state

    def reset(self) -> None:
        """Restore the initial state (brightness 0, rising)"""
        self._state = FadeState()
        self.tick_count = 0

    def tick(self) -> Tuple[int, int]:
        """
        Emit current outputs, then advance the ramp.

        Write failures are logged by _emit(); the advance happens regardless.

        Returns:
            (primary, secondary) pair emitted during this tick
        """
        primary = self._state.brightness
        secondary = self._state.inverse

        self._emit(LedChannel.FADE_PRIMARY, primary)
        self._emit(LedChannel.FADE_SECONDARY, secondary)

        self._advance()
        self.tick_count += 1
        return primary, secondary

    def _advance(self) -> None:
        state = self._state

        if state.direction == FadeDirection.RISING:
            state.brightness += self.step
            if state.brightness >= PWM_MAX:
                state.brightness = PWM_MAX
                state.direction = FadeDirection.FALLING
                log.debug("Fade reached upper bound", tick=self.tick_count + 1)
        else:
            state.brightness -= self.step
            if state.brightness <= PWM_MIN:
                state.brightness = PWM_MIN
                state.direction = FadeDirection.RISING
                log.debug("Fade reached lower bound", tick=self.tick_count + 1)
