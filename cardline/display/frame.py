# display/frame.py

from dataclasses import dataclass, field
from typing import List, Optional

from .colors import (
    CLEAR_LINE,
    DEFAULT_PAIR,
    NEXT_LINE,
    RESET,
    Color,
    ColorPair,
    change_color,
    cursor_up,
)

# the maximum number of rows in a frame
MAX_ROWS = 40


@dataclass(frozen=True)
class Cell:
    """One glyph and the color pair it is painted with."""
    glyph: str = " "
    colors: ColorPair = DEFAULT_PAIR


@dataclass
class Line:
    """A growable row of cells. Width never shrinks while a frame is built."""
    cells: List[Cell] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.cells)

    @property
    def text(self) -> str:
        return "".join(cell.glyph for cell in self.cells)

    def overwrite(self, col: int, glyphs: str, colors: ColorPair) -> None:
        """Overwrite cells starting at col, padding with blanks when needed."""
        if not glyphs:
            return
        end = col + len(glyphs)
        if end > len(self.cells):
            self.cells.extend(Cell() for _ in range(end - len(self.cells)))
        for offset, glyph in enumerate(glyphs):
            self.cells[col + offset] = Cell(glyph, colors)

    def render(self) -> str:
        """Render glyphs with a color escape at each color-run boundary."""
        out = []
        last_colors: Optional[ColorPair] = None
        for cell in self.cells:
            if cell.colors != last_colors:
                out.append(change_color(*cell.colors))
                last_colors = cell.colors
            out.append(cell.glyph)
        if last_colors is not None and last_colors != DEFAULT_PAIR:
            out.append(RESET)
        return "".join(out)


@dataclass
class Frame:
    """
    A block of text to render to the terminal.

    A frame is built once per render cycle by drawing into it, then diffed
    against the previously displayed frame with replace().
    """
    lines: List[Line] = field(default_factory=list)
    max_rows: int = MAX_ROWS

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def draw(
        self,
        text: str,
        col: int,
        row: int,
        fg: Optional[Color] = Color.DEFAULT,
        bg: Optional[Color] = Color.DEFAULT,
    ) -> None:
        """
        Draw a set of newline-delimited lines at the given coordinates.

        Rows past max_rows or above the top are dropped, as is anything left
        of column 0. Every touched cell is painted with (fg, bg); a color
        left as None is the default color.
        """
        colors = (
            Color.DEFAULT if fg is None else Color(fg),
            Color.DEFAULT if bg is None else Color(bg),
        )
        draw_lines = text.split("\n")
        self._ensure_row_count(row + len(draw_lines))
        for i, draw_line in enumerate(draw_lines):
            index = row + i
            if index < 0 or index >= len(self.lines):
                continue
            glyphs, start = draw_line, col
            if start < 0:
                glyphs, start = glyphs[-start:], 0
            self.lines[index].overwrite(start, glyphs, colors)

    @property
    def text(self) -> List[str]:
        """The plain glyphs of each line."""
        return [line.text for line in self.lines]

    def render(self) -> str:
        """Render the frame to a string that can be written to the terminal."""
        return "".join(
            CLEAR_LINE + line.render() + NEXT_LINE for line in self.lines
        )

    def reset(self) -> str:
        """Return a string that moves the cursor back above this frame."""
        return cursor_up(len(self.lines))

    def replace(self, previous: Optional["Frame"] = None) -> str:
        """
        Return a string that replaces a displayed frame with this one.

        When the previous frame was taller, its trailing lines are cleared and
        the cursor is moved back so it ends where it would have after a
        previous frame of this frame's height.
        """
        previous = previous if previous is not None else Frame()
        out = [previous.reset(), self.render()]
        extra = len(previous.lines) - len(self.lines)
        if extra > 0:
            out.append((CLEAR_LINE + NEXT_LINE) * extra)
            out.append(cursor_up(extra))
        return "".join(out)

    def _ensure_row_count(self, rows: int) -> None:
        for _ in range(len(self.lines), min(rows, self.max_rows)):
            self.lines.append(Line())
