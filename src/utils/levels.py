"""PWM level helpers"""

from models.fade_state import PWM_MAX, PWM_MIN


def clamp_level(value: int) -> int:
    """Clamp to [PWM_MIN, PWM_MAX]"""
    return max(PWM_MIN, min(PWM_MAX, int(value)))
