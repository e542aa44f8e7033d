# display/legend.py

from io import StringIO
from typing import List, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

DEFAULT_BINDINGS: List[Tuple[str, str]] = [
    ("d", "deal cards"),
    ("f", "flip dealt cards"),
    ("c", "collect dealt cards"),
    ("↑ ↓", "turn the loose card"),
    ("← →", "shrink / grow the loose card"),
    ("space", "next card face"),
    ("s", "select the loose card"),
    ("q", "quit"),
]


class Legend:
    """Formats the key bindings as a Rich panel shown above the table."""

    def __init__(self, bindings: Optional[List[Tuple[str, str]]] = None,
                 title: str = "cardline", width: int = 48):
        self.bindings = bindings if bindings is not None else list(DEFAULT_BINDINGS)
        self.title = title
        self.width = width
        self.console = Console(
            force_terminal=True,
            color_system="standard",
            file=StringIO(),
            highlight=False,
            width=width,
        )

    def format(self) -> str:
        """Return the panel as a string of styled terminal text."""
        grid = Table.grid(padding=(0, 2))
        grid.add_column(style="bold cyan", no_wrap=True)
        grid.add_column()
        for key, action in self.bindings:
            grid.add_row(key, action)

        with self.console.capture() as capture:
            self.console.print(
                Panel(
                    grid,
                    title=self.title,
                    title_align="left",
                    border_style="dim yellow",
                    padding=(0, 1),
                    width=self.width,
                )
            )
        return capture.get()
