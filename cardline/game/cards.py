# game/cards.py

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..display.colors import Color
from ..display.frame import Frame

# Possible values for the layer of a card; layers 0 or lower are never drawn
LAYER_TO_DEAL = -1
LAYER_NOT_DEALT = 0
LAYER_DEALT = 1
LAYER_DEALING = 2

MAX_SHRINK = 5
FRONT_TURN = 0
BACK_TURN = 4
FULL_TURN = 8

CARD_WIDTH = 5
CARD_HEIGHT = 5
DECK_SIZE = 81

FACE_COLORS = (Color.RED, Color.GREEN, Color.BLUE)

# symbol by (shape, fill)
SYMBOLS: Dict[Tuple[int, int], str] = {
    (0, 0): "△", (0, 1): "◮", (0, 2): "▲",
    (1, 0): "□", (1, 1): "◨", (1, 2): "■",
    (2, 0): "○", (2, 1): "◑", (2, 2): "●",
}

# outline by (shrink, narrowing); narrowing 0 is face-on, 2 is edge-on
OUTLINES: Dict[Tuple[int, int], str] = {
    (0, 0): "╭───╮\n│   │\n│   │\n│   │\n╰───╯",
    (0, 1): " ╭─╮\n │ │\n │ │\n │ │\n ╰─╯",
    (0, 2): "  ╷\n  │\n  │\n  │\n  ╵",
    (1, 0): "╭──╮\n│  │\n│  │\n╰──╯",
    (1, 1): " ╭─╮\n │ │\n │ │\n ╰─╯",
    (1, 2): " ╷\n │\n │\n ╵",
    (2, 0): "╭─╮\n│ │\n╰─╯",
    (2, 1): " ╷\n │\n ╵",
    (3, 0): "┌┐\n└┘",
    (3, 1): "╷\n╵",
    (4, 0): "▯",
    (4, 1): "│",
    (5, 0): "·",
}


@dataclass
class Card:
    """One card of the deck and the parameters its animations vary."""
    id: int = 0
    col: int = 0
    row: int = 0
    turn: int = FRONT_TURN    # 0 to 8, flip phase
    shrink: int = 0           # 0 to MAX_SHRINK
    selected: bool = False
    layer: int = LAYER_TO_DEAL

    def attributes(self) -> Tuple[int, int, int, int]:
        """Return (count, shape, fill, color); count is 1-based, the rest 0-2."""
        return (
            self.id % 3 + 1,
            self.id // 3 % 3,
            self.id // 9 % 3,
            self.id // 27 % 3,
        )

    @property
    def visible(self) -> bool:
        return self.layer > LAYER_NOT_DEALT

    def normalized_shrink_and_turn(self) -> Tuple[int, int]:
        return min(max(0, self.shrink), MAX_SHRINK), self.turn % FULL_TURN

    @property
    def face_up(self) -> bool:
        _, turn = self.normalized_shrink_and_turn()
        return turn <= 1 or turn >= 7

    @property
    def face_color(self) -> Color:
        return FACE_COLORS[self.attributes()[3]]

    def render(self, frame: Frame) -> None:
        """Render the card into the given frame."""
        outline_color = Color.LIGHT_CYAN if self.selected else Color.LIGHT_GRAY
        frame.draw(self.render_outline(), self.col, self.row, outline_color)
        shrink, turn = self.normalized_shrink_and_turn()
        if shrink:
            return
        if self.face_up:
            frame.draw(self.render_face(), self.col + 2, self.row + 1, self.face_color)
        elif 3 <= turn <= 5:
            frame.draw(self.render_back(), self.col + 2, self.row + 1, outline_color)

    def render_outline(self) -> str:
        shrink, turn = self.normalized_shrink_and_turn()
        # the flip is mirrored, turn 0 1 2 3 4 narrows 0 1 2 1 0
        turn %= 4
        narrowing = 4 - turn if turn > 2 else turn
        while (shrink, narrowing) not in OUTLINES:
            narrowing -= 1
        return OUTLINES[shrink, narrowing]

    def render_face(self) -> str:
        count, shape, fill, _ = self.attributes()
        symbol = SYMBOLS[shape, fill]
        if count == 1:
            return "\n" + symbol
        if count == 2:
            return symbol + "\n\n" + symbol
        return "\n".join([symbol] * 3)

    def render_back(self) -> str:
        return "\n?"


def new_deck() -> List[Card]:
    """Create a complete deck of cards, all waiting to be dealt."""
    return [Card(id=i) for i in range(DECK_SIZE)]
