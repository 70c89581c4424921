from dataclasses import dataclass

from models.enums import FadeDirection


PWM_MIN = 0
PWM_MAX = 255


@dataclass
class FadeState:
    """
    Mutable state of the fade generator.

    Owned by exactly one FadeGenerator and mutated only by its tick().
    brightness always stays within [PWM_MIN, PWM_MAX].
    """
    brightness: int = PWM_MIN
    direction: FadeDirection = FadeDirection.RISING

    @property
    def inverse(self) -> int:
        """Complementary duty cycle for the secondary channel"""
        return PWM_MAX - self.brightness
