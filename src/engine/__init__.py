from .tick_scheduler import TickScheduler

__all__ = [
    "TickScheduler",
]
