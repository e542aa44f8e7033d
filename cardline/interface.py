# interface.py

import asyncio
from typing import Optional

from .logger import Logger
from .config import DisplayConfig
from .display import Display
from .animation import Animator
from .game import Table
from .loop import DisplayLoop, ticker

class Interface:
    """
    Main entry point that assembles the Display, Animator, Table and loop.
    """

    def __init__(self, config: Optional[DisplayConfig] = None,
                 logging_enabled: bool = False,
                 log_file: Optional[str] = None,
                 stream=None):
        """
        Initialize components with optional configuration and logging.

        Args:
            config: Loop and table settings. Defaults are used if None.
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stderr.
            stream: Output stream for frames (stdout if None).
        """
        self.config = config or DisplayConfig()
        try:
            self.logger = Logger(__name__, logging_enabled, log_file)
            self.display = Display(stream=stream, logger=self.logger.child("terminal"))
            self.animator = Animator(logger=self.logger.child("animator"))
            self.table = Table(
                self.animator,
                deal_count=self.config.deal_count,
                max_rows=self.config.max_rows,
                logger=self.logger.child("table"),
            )
            self.loop = DisplayLoop(
                self.table, self.animator, self.display.terminal,
                config=self.config, logger=self.logger.child("loop"),
            )
        except Exception as e:
            if hasattr(self, 'logger'):
                self.logger.error(f"Init error: {e}")
            raise

    async def run(self) -> None:
        """Attach key input and the tick timer, then run the display loop."""
        inputs: asyncio.Queue = asyncio.Queue()
        ticks: asyncio.Queue = asyncio.Queue(maxsize=1)
        timer = asyncio.create_task(ticker(ticks, self.config.tick_interval))
        try:
            with self.display.terminal.key_events(inputs):
                await self.loop.run(inputs, ticks)
        finally:
            timer.cancel()

    def start(self) -> None:
        """Show the legend and play until the quit key is pressed."""
        terminal = self.display.terminal
        if self.config.show_legend:
            self.display.show_legend()
        if self.config.hide_cursor:
            terminal.hide_cursor()
        try:
            asyncio.run(self.run())
        except KeyboardInterrupt:
            self.logger.debug("Interrupted")
        finally:
            terminal.reset()
