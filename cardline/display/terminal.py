# display/terminal.py
import sys
import asyncio
from contextlib import contextmanager
from typing import Iterator, Optional

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.keys import Keys

from .colors import HIDE_CURSOR, RESET, SHOW_CURSOR


def key_name(key) -> str:
    """Return a plain string for a decoded key: the character or a key name."""
    if isinstance(key, Keys):
        return key.value
    return key


class DisplayTerminal:
    """Low-level terminal operations and I/O."""

    def __init__(self, stream=None, logger=None):
        """Initialize terminal state; output goes to stream (stdout by default)."""
        self._stream = stream if stream is not None else sys.stdout
        self._cursor_visible = True
        self._logger = logger

    def _is_terminal(self) -> bool:
        """Return True if the output stream is a terminal."""
        isatty = getattr(self._stream, "isatty", None)
        return bool(isatty and isatty())

    def _manage_cursor(self, show: bool) -> None:
        """Toggle cursor visibility based on 'show' flag."""
        if self._cursor_visible != show and self._is_terminal():
            self._cursor_visible = show
            self.write(SHOW_CURSOR if show else HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._manage_cursor(True)

    def hide_cursor(self) -> None:
        self._manage_cursor(False)

    def reset(self) -> None:
        """Restore default colors and a visible cursor."""
        self.write(RESET)
        self.show_cursor()

    def write(self, text: str = "", newline: bool = False) -> None:
        """Write text and flush; append newline if requested."""
        if not text and not newline:
            return
        self._stream.write(text)
        if newline:
            self._stream.write("\n")
        self._stream.flush()

    @contextmanager
    def key_events(
        self,
        queue: "asyncio.Queue[Optional[str]]",
        source: Optional[Input] = None,
    ) -> Iterator[Input]:
        """
        Forward decoded key presses to queue while the block runs.

        The terminal is put in raw mode; each key is handed off as soon as
        prompt_toolkit decodes it. None is queued once the input closes.
        Must be entered from within a running event loop.
        """
        source = source if source is not None else create_input()

        def keys_ready() -> None:
            for key_press in source.read_keys():
                queue.put_nowait(key_name(key_press.key))
            if source.closed:
                queue.put_nowait(None)

        with source.raw_mode(), source.attach(keys_ready):
            if self._logger:
                self._logger.debug("Key input attached")
            yield source
