"""
Utility functions for the PWM LED controller
"""

from .levels import clamp_level
from .enum_helper import EnumHelper

__all__ = [
    'clamp_level',
    'EnumHelper',
]
