"""
main_asyncio.py — Application entry point for the PWM LED controller
---------------------------------------------------------------------

Responsible for:
- loading configuration and configuring the logger
- initializing the PWM sink (fatal on failure, exit status 1)
- wiring the manual channel, fade generator and tick scheduler
- starting the async main loop
- graceful shutdown on Ctrl+C, SIGTERM or the 'q' command
"""

import sys

# ---------------------------------------------------------------------------
# UTF-8 ENCODING FIX (important for Raspberry Pi)
# ---------------------------------------------------------------------------

# Set UTF-8 encoding for output BEFORE any imports (fixes Unicode symbol rendering)
if hasattr(sys.stdout, 'reconfigure') and (sys.stdout.encoding or '').lower() != 'utf-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and (sys.stderr.encoding or '').lower() != 'utf-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import asyncio
from typing import Optional

from animations.fade_generator import FadeGenerator
from controllers.manual_channel import ManualChannel
from engine.tick_scheduler import TickScheduler
from hardware.input.stdin_level_input import StdinLevelInput
from hardware.pwm import (
    IPwmSink, InitializationFailure, ShutdownFailure,
    create_pwm_sink, initialize_sink
)
from lifecycle import ShutdownCoordinator
from lifecycle.handlers import FadeShutdownHandler, PwmShutdownHandler, TaskCancellationHandler
from managers import ConfigManager
from models.config import PwmConfig
from models.enums import LogCategory
from utils.logger import get_logger, configure_logger

# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------

log = get_logger().for_category(LogCategory.SYSTEM)


# ---------------------------------------------------------------------------
# STARTUP
# ---------------------------------------------------------------------------

def start_sink(config: PwmConfig) -> Optional[IPwmSink]:
    """
    Create and initialize the PWM sink.

    Returns:
        Initialized sink, or None if initialization failed (already logged
        and cleaned up)
    """
    sink = create_pwm_sink(config)

    try:
        initialize_sink(sink)
    except InitializationFailure as ex:
        log.error(f"Startup Error: {ex}")
        try:
            sink.cleanup()
        except ShutdownFailure as cleanup_error:
            log.warn("PWM cleanup after failed startup also failed", error=str(cleanup_error))
        return None

    return sink


# ---------------------------------------------------------------------------
# Application Entry
# ---------------------------------------------------------------------------

async def main(config_manager: Optional[ConfigManager] = None, install_signal_handlers: bool = True) -> int:
    """
    Main async entry point (dependency injection and event loop startup).

    Returns:
        Process exit status (0 = clean shutdown, 1 = startup failure)
    """
    config = (config_manager or ConfigManager()).load()
    configure_logger(config.log_level, config.log_colors)

    log.info("Starting PWM LED controller...")

    # ========================================================================
    # 1. HARDWARE
    # ========================================================================

    sink = start_sink(config)
    if sink is None:
        return 1

    # ========================================================================
    # 2. CHANNELS
    # ========================================================================

    manual_channel = ManualChannel(sink)
    fade_generator = FadeGenerator(sink, step=config.fade_step)
    scheduler = TickScheduler(fade_generator.tick, period_ms=config.period_ms)

    # ========================================================================
    # 3. LIFECYCLE
    # ========================================================================

    coordinator = ShutdownCoordinator()
    if install_signal_handlers:
        coordinator.setup_signal_handlers(asyncio.get_running_loop())

    level_input = StdinLevelInput(
        manual_channel,
        on_quit=lambda: coordinator.request_shutdown("Quit command")
    )

    await scheduler.start()
    input_task = asyncio.create_task(level_input.run(), name="stdin-level-input")

    coordinator.register(FadeShutdownHandler(scheduler))
    coordinator.register(TaskCancellationHandler([input_task]))
    coordinator.register(PwmShutdownHandler(sink))

    log.info(
        "PWM LED controller running",
        manual_pin=config.manual_pin,
        fade_pins=f"{config.fade_primary_pin}, {config.fade_secondary_pin}",
    )

    # ========================================================================
    # 4. RUN
    # ========================================================================

    try:
        await coordinator.wait_for_shutdown()
    finally:
        await coordinator.shutdown_all()

    return 0


def run() -> None:
    """Console script entry point"""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
