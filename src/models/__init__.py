"""
Models package - Data models for the PWM LED controller
"""

from .enums import FadeDirection, LedChannel, PwmBackend, LogLevel, LogCategory
from .fade_state import FadeState, PWM_MIN, PWM_MAX
from .config import PwmConfig

__all__ = [
    'FadeDirection',
    'LedChannel',
    'PwmBackend',
    'LogLevel',
    'LogCategory',
    'FadeState',
    'PWM_MIN',
    'PWM_MAX',
    'PwmConfig',
]
