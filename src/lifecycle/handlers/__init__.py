from .fade_shutdown_handler import FadeShutdownHandler
from .pwm_shutdown_handler import PwmShutdownHandler
from .task_cancellation_handler import TaskCancellationHandler

__all__ = [
    "FadeShutdownHandler",
    "PwmShutdownHandler",
    "TaskCancellationHandler",
]
