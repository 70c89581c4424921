"""
Lifecycle subsystem
-------------------

Exports the public API for:
- graceful shutdown
- shutdown handlers

External code should import from:
    from lifecycle import ShutdownCoordinator
    from lifecycle.handlers import PwmShutdownHandler
"""

from .shutdown_coordinator import ShutdownCoordinator
from .shutdown_protocol import IShutdownHandler
from . import handlers

__all__ = [
    "ShutdownCoordinator",
    "IShutdownHandler",
    "handlers",
]
