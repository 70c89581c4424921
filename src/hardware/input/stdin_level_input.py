import asyncio
import codecs
import os
import select
import sys
from typing import Callable, Optional, TextIO

from controllers.manual_channel import ManualChannel
from utils.levels import clamp_level
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.INPUT)

class StdinLevelInput:
    """
    Line-based level source for the manual channel

    Intended for:
    - SSH sessions
    - Local Unix terminals
    - Piped input (echo 128 | ...)

    Each line is one event:
    - integer      -> clamped to [0, 255] and written to the manual channel
    - q/quit/exit  -> on_quit() is called
    - anything else is logged and ignored

    Only the most recent value matters; nothing is queued beyond stdin itself.
    """

    QUIT_COMMANDS = frozenset({"q", "quit", "exit"})
    MAX_LINE_LENGTH = 256

    def __init__(
        self,
        manual_channel: ManualChannel,
        on_quit: Optional[Callable[[], None]] = None,
        stream: Optional[TextIO] = None,
        poll_interval: float = 0.05,
    ):
        self.manual_channel = manual_channel
        self.on_quit = on_quit
        self.stream = stream or sys.stdin
        self.poll_interval = poll_interval
        self.last_level: Optional[int] = None
        self._buffer = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def feed(self, data: bytes, final: bool = False) -> None:
        """
        Decode raw stdin bytes and handle every line they complete.

        A partial line longer than MAX_LINE_LENGTH is dropped.
        """
        self._buffer += self._decoder.decode(data, final=final)
        self._process_buffer()

        if final and self._buffer:
            self.handle_line(self._buffer)
            self._buffer = ""
        elif len(self._buffer) > self.MAX_LINE_LENGTH:
            log.warn("Discarding overlong input line", length=len(self._buffer))
            self._buffer = ""

    def _process_buffer(self) -> None:
        """Handle every complete line in the buffer, keep the partial tail"""
        while "\n" in self._buffer:
            line, self._buffer = self._buffer.split("\n", 1)
            self.handle_line(line)

    def handle_line(self, line: str) -> Optional[int]:
        """
        Process one input line.

        Returns:
            Level written to the manual channel, or None if nothing was written
        """
        text = line.strip().lower()
        if not text:
            return None

        if text in self.QUIT_COMMANDS:
            log.info("Quit requested from stdin")
            if self.on_quit:
                self.on_quit()
            return None

        try:
            value = int(text)
        except ValueError:
            log.warn("Ignoring input, expected level 0-255 or 'q'", input=repr(line.strip()))
            return None

        level = clamp_level(value)
        if level != value:
            log.debug("Level clamped", requested=value, level=level)

        self.manual_channel.set_level(level)
        self.last_level = level
        return level

    async def run(self) -> None:
        """
        Read lines until EOF or cancellation (non-blocking via select.select()).
        """
        log.info("Starting stdin level input (type 0-255, 'q' to quit)")

        try:
            while True:
                ready, _, _ = select.select([self.stream], [], [], 0)

                if not ready:
                    # Yield control to event loop
                    await asyncio.sleep(self.poll_interval)
                    continue

                # Raw read so no complete line is left behind in a Python-level buffer
                chunk = os.read(self.stream.fileno(), 1024)
                if not chunk:
                    self.feed(b"", final=True)
                    log.info("STDIN closed, manual input disabled")
                    return

                self.feed(chunk)

        except asyncio.CancelledError:
            log.info("Stdin level input cancelled")
            raise
