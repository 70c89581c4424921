"""
Shutdown coordinator for the PWM LED controller.

Collects shutdown handlers and runs them in priority order once a signal,
the quit command, or application code asks for shutdown.
"""

import asyncio
import signal
from typing import List, Optional

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class ShutdownCoordinator:
    """
    Runs registered shutdown handlers, highest priority first.

    Each handler gets its own timeout; a handler that fails or hangs is logged
    and the sequence moves on, so the PWM sink is always released.

    Example:
        coordinator = ShutdownCoordinator()
        coordinator.register(FadeShutdownHandler(scheduler))
        coordinator.register(PwmShutdownHandler(sink))

        coordinator.setup_signal_handlers(loop)
        await coordinator.wait_for_shutdown()
        await coordinator.shutdown_all()
    """

    def __init__(self, timeout_per_handler: float = 5.0, total_timeout: float = 15.0):
        """
        Args:
            timeout_per_handler: Seconds a single handler may take
            total_timeout: Seconds after which remaining handlers are skipped
        """
        self._handlers: List[IShutdownHandler] = []
        self._shutdown_event = asyncio.Event()
        self._timeout_per_handler = timeout_per_handler
        self._total_timeout = total_timeout
        self._reason: Optional[str] = None

    @property
    def shutdown_reason(self) -> Optional[str]:
        """First reason passed to request_shutdown() (signal name or command)"""
        return self._reason

    def register(self, handler: IShutdownHandler) -> None:
        if not hasattr(handler, "shutdown_priority"):
            raise ValueError(f"Handler {handler} missing shutdown_priority property")
        if not hasattr(handler, "shutdown"):
            raise ValueError(f"Handler {handler} missing shutdown() method")

        self._handlers.append(handler)
        log.debug("Shutdown handler registered",
                  handler=handler.__class__.__name__, priority=handler.shutdown_priority)

    def request_shutdown(self, reason: str) -> None:
        """Trigger shutdown. Only the first reason is kept."""
        if self._shutdown_event.is_set():
            return
        self._reason = reason
        log.info(f"Shutdown requested → {reason}")
        self._shutdown_event.set()

    def setup_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        """Route SIGINT (Ctrl+C) and SIGTERM to request_shutdown()."""
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, self.request_shutdown, sig.name)

        log.info("Signal handlers installed (SIGINT, SIGTERM)")

    async def wait_for_shutdown(self) -> None:
        await self._shutdown_event.wait()
        log.debug("Shutdown triggered", reason=self._reason)

    async def shutdown_all(self) -> None:
        """
        Run every handler in descending shutdown_priority.

        Timeouts and handler exceptions are logged; cancellation propagates.
        """
        log.info("🛑 Shutting down PWM LED controller...", reason=self._reason or "UNKNOWN")

        handlers = sorted(self._handlers, key=lambda h: h.shutdown_priority, reverse=True)

        loop = asyncio.get_running_loop()
        deadline = loop.time() + self._total_timeout

        for handler in handlers:
            name = handler.__class__.__name__

            if loop.time() > deadline:
                log.error("Shutdown time budget exhausted, skipping remaining handlers",
                          total_timeout=f"{self._total_timeout}s", next_handler=name)
                break

            try:
                await asyncio.wait_for(handler.shutdown(), timeout=self._timeout_per_handler)
                log.debug(f"✓ {name} done")

            except asyncio.TimeoutError:
                log.error(f"{name} did not finish in {self._timeout_per_handler}s")

            except asyncio.CancelledError:
                log.warn(f"{name} shutdown was cancelled")
                raise

            except Exception as e:
                log.error(f"{name} failed during shutdown: {e}", error_type=type(e).__name__)

        log.info("✓ Shutdown sequence complete")
