"""
Animation system for PWM LEDs

- base: Base animation class (tick-driven, fire-and-forget output)
- fade_generator: Complementary fade on the two fade channels
"""

from .base import BaseAnimation
from .fade_generator import FadeGenerator

__all__ = [
    "BaseAnimation",
    "FadeGenerator",
]
