from __future__ import annotations
import asyncio
from typing import List

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)

class TaskCancellationHandler(IShutdownHandler):
    """
    Shutdown handler for asyncio tasks.

    Cancels and awaits all given tasks (manual input reader).

    Priority: 40
    """

    def __init__(self, tasks: List[asyncio.Task]):
        """
        Initialize task cancellation handler.

        Args:
            tasks: List of asyncio.Task objects to cancel
        """
        self.tasks = tasks

    @property
    def shutdown_priority(self) -> int:
        """Tasks are cancelled after the animation stops."""
        return 40

    async def shutdown(self) -> None:
        """Cancel and await all tasks."""
        log.info("Cancelling background tasks...")

        for task in self.tasks:
            if not task.done():
                task.cancel()
                log.debug(f"Cancelled task: {task.get_name()}")

        # Wait for all tasks to finish (either complete or raise CancelledError)
        if self.tasks:
            await asyncio.gather(*self.tasks, return_exceptions=True)

        log.debug("All tasks cancelled")
