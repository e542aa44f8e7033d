# display/__init__.py

from .colors import Color
from .frame import Cell, Frame, Line, MAX_ROWS
from .legend import Legend
from .terminal import DisplayTerminal

class Display:
    """
    Coordinates terminal display components.

    Component Hierarchy:
    DisplayTerminal (base) → Legend
    """
    def __init__(self, stream=None, logger=None):
        """Initialize components in dependency order."""
        self.terminal = DisplayTerminal(stream=stream, logger=logger)
        self.legend = Legend()

    def show_legend(self) -> None:
        """Write the key legend above the play area."""
        self.terminal.write(self.legend.format())

__all__ = ['Display', 'DisplayTerminal', 'Legend', 'Frame', 'Line', 'Cell', 'Color', 'MAX_ROWS']
