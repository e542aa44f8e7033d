# loop.py

import asyncio
from typing import Optional

from .animation import Animator
from .config import DisplayConfig
from .display.frame import Frame


async def ticker(queue: asyncio.Queue, interval: float) -> None:
    """
    Put an incrementing tick count on queue every interval seconds.

    With a bounded queue the put waits for the owner to take the last tick,
    so a stalled owner never finds a backlog of ticks waiting.
    """
    count = 0
    while True:
        await queue.put(count)
        count += 1
        await asyncio.sleep(interval)


class DisplayLoop:
    """
    Owns the game state, the Animator and the last displayed frame.

    Input and tick producers only hand values over through queues; every
    mutation happens in this object's run() coroutine, one event at a time.
    """

    def __init__(self, game, animator: Animator, terminal,
                 config: Optional[DisplayConfig] = None, logger=None):
        self.game = game
        self.animator = animator
        self.terminal = terminal
        self.config = config or DisplayConfig()
        self.logger = logger
        self.last_frame = Frame(max_rows=self.config.max_rows)
        self.ticks = 0
        self._dirty = True

    def _log(self, msg: str) -> None:
        if self.logger:
            self.logger.debug(msg)

    def handle_input(self, key: Optional[str]) -> bool:
        """Apply one decoded key; return False when the loop should stop."""
        if key is None:
            raise EOFError("input stream closed")
        if key in self.config.quit_keys:
            self._log(f"Quit key {key!r}")
            return False
        if self.game.input(key):
            self._dirty = True
        return True

    def tick(self) -> str:
        """Step animations and return the terminal update, if any is due."""
        self.ticks += 1
        ran = self.animator.step()
        if not (ran or self._dirty):
            return ""
        frame = self.game.render()
        output = frame.replace(self.last_frame)
        if frame.line_count != self.last_frame.line_count:
            self._log(f"Frame height {self.last_frame.line_count} -> {frame.line_count}")
        self.last_frame = frame
        self._dirty = False
        return output

    def display(self) -> None:
        """Run one tick and write its output."""
        output = self.tick()
        if output:
            self.terminal.write(output)

    async def run(self, inputs: asyncio.Queue, ticks: asyncio.Queue) -> None:
        """Process input keys and ticks, whichever arrives first, until quit."""
        self._log("Display loop started")
        next_input = asyncio.ensure_future(inputs.get())
        next_tick = asyncio.ensure_future(ticks.get())
        try:
            while True:
                await asyncio.wait(
                    {next_input, next_tick}, return_when=asyncio.FIRST_COMPLETED
                )
                if next_input.done():
                    key = next_input.result()
                    next_input = asyncio.ensure_future(inputs.get())
                    if not self.handle_input(key):
                        break
                else:
                    next_tick.result()
                    next_tick = asyncio.ensure_future(ticks.get())
                    self.display()
        finally:
            next_input.cancel()
            next_tick.cancel()
            self._log(f"Display loop stopped after {self.ticks} ticks")
