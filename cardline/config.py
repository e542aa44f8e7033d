# config.py

from dataclasses import dataclass
from typing import Tuple

from .display.frame import MAX_ROWS


@dataclass
class DisplayConfig:
    """Settings for the display loop and the table it draws."""

    tick_interval: float = 0.1
    max_rows: int = MAX_ROWS
    quit_keys: Tuple[str, ...] = ("q", "c-c")
    show_legend: bool = True
    hide_cursor: bool = True
    deal_count: int = 12

    def __post_init__(self):
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        if self.max_rows <= 0:
            raise ValueError("max_rows must be positive")
        if self.deal_count < 0:
            raise ValueError("deal_count must not be negative")
