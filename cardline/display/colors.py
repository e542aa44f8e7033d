# display/colors.py

from enum import IntEnum
from typing import Tuple

ESC = "\033"
CLEAR_LINE = ESC + "[2K"
NEXT_LINE = "\n"
RESET = ESC + "[0m"
HIDE_CURSOR = ESC + "[?25l"
SHOW_CURSOR = ESC + "[?25h"


class Color(IntEnum):
    """Console colors, offset from 30 for foreground and 40 for background."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHT_GRAY = 7
    DEFAULT = 9
    DARK_GRAY = 60
    LIGHT_RED = 61
    LIGHT_GREEN = 62
    LIGHT_YELLOW = 63
    LIGHT_BLUE = 64
    LIGHT_MAGENTA = 65
    LIGHT_CYAN = 66
    WHITE = 67


ColorPair = Tuple[Color, Color]

DEFAULT_PAIR: ColorPair = (Color.DEFAULT, Color.DEFAULT)


def change_color(fg: Color, bg: Color) -> str:
    """Return the single combined escape setting both colors."""
    return f"{ESC}[{30 + fg};{40 + bg}m"


def cursor_up(lines: int) -> str:
    """Return the cursor-up escape, or nothing for a zero move."""
    if lines <= 0:
        return ""
    return f"{ESC}[{lines}A"
