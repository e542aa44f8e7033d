# game/table.py

from typing import Dict, List, Tuple

from ..animation import Animator
from ..display.colors import Color
from ..display.frame import MAX_ROWS, Frame
from . import effects
from .cards import (
    BACK_TURN,
    CARD_HEIGHT,
    CARD_WIDTH,
    LAYER_DEALT,
    LAYER_NOT_DEALT,
    MAX_SHRINK,
    Card,
    new_deck,
)

COLUMNS = 4
DECK_COL = 0
DECK_ROW = 0
TABLE_COL = CARD_WIDTH + 3
DEAL_STAGGER = 2


class Table:
    """
    The complete state of a game in progress.

    Holds the deck, the loose card the arrow keys play with, and the
    Animator that deals, flips and collects cards. Only the owning display
    loop calls into it.
    """

    def __init__(self, animator: Animator, deal_count: int = 12,
                 max_rows: int = MAX_ROWS, logger=None):
        self.animator = animator
        self.deal_count = deal_count
        self.max_rows = max_rows
        self.deck: List[Card] = new_deck()
        self.slots: Dict[int, Card] = {}
        rows = -(-deal_count // COLUMNS)
        self.loose = Card(id=0, col=DECK_COL, row=DECK_ROW + rows * (CARD_HEIGHT + 1),
                          layer=LAYER_DEALT)
        self.status_row = self.loose.row + CARD_HEIGHT + 1
        self.status = ""
        self._next_card = 0
        self._logger = logger

    @property
    def remaining(self) -> int:
        return len(self.deck) - self._next_card

    @property
    def dealt(self) -> List[Card]:
        """Cards that have landed in their slots."""
        return [card for card in self.slots.values() if card.layer == LAYER_DEALT]

    def slot_position(self, index: int) -> Tuple[int, int]:
        """Return the (col, row) of the index-th slot on the table."""
        col = TABLE_COL + (index % COLUMNS) * (CARD_WIDTH + 1)
        row = DECK_ROW + (index // COLUMNS) * (CARD_HEIGHT + 1)
        return col, row

    def free_slots(self) -> List[int]:
        return [
            index for index in range(self.deal_count)
            if index not in self.slots or self.slots[index].layer == LAYER_NOT_DEALT
        ]

    def input(self, key: str) -> bool:
        """Update the game state for one key and return whether anything changed."""
        card = self.loose
        if key == "up":
            card.turn += 1
        elif key == "down":
            card.turn = max(0, card.turn - 1)
        elif key == "left":
            card.shrink = min(card.shrink + 1, MAX_SHRINK)
        elif key == "right":
            card.shrink = max(0, card.shrink - 1)
        elif key == " ":
            card.id = (card.id + 1) % len(self.deck)
        elif key == "s":
            card.selected = not card.selected
        elif key == "d":
            return self.deal()
        elif key == "f":
            return self.flip_dealt()
        elif key == "c":
            return self.collect_dealt()
        else:
            return False
        return True

    def deal(self) -> bool:
        """Deal cards from the deck into every free slot."""
        dealt = 0
        for index in self.free_slots():
            if not self.remaining:
                break
            card = self.deck[self._next_card]
            self._next_card += 1
            card.col, card.row = DECK_COL, DECK_ROW
            self.slots[index] = card
            col, row = self.slot_position(index)
            self.animator.animate(
                effects.deal_face_up(card, col, row, delay=dealt * DEAL_STAGGER)
            )
            dealt += 1
        if not dealt:
            self.status = "nothing to deal"
        else:
            self.status = f"dealt {dealt}, {self.remaining} left"
            if self._logger:
                self._logger.debug(f"Dealing {dealt} cards, {self.remaining} left")
        return True

    def flip_dealt(self) -> bool:
        cards = self.dealt
        for card in cards:
            self.animator.animate(effects.flip(card))
        self.status = f"flipping {len(cards)}"
        return True

    def collect_dealt(self) -> bool:
        cards = self.dealt
        for card in cards:
            self.animator.animate(effects.collect(card))
        self.status = f"collecting {len(cards)}"
        return True

    def entities(self) -> List[Card]:
        """Return every drawable card in non-decreasing layer order."""
        cards = [card for card in self.deck if card.visible]
        if self.remaining:
            # the undealt pile is drawn as one face-down card
            cards.append(Card(id=self.deck[self._next_card].id, col=DECK_COL,
                              row=DECK_ROW, turn=BACK_TURN, layer=LAYER_DEALT))
        cards.append(self.loose)
        return sorted(cards, key=lambda card: card.layer)

    def render(self) -> Frame:
        """Render the current game state to a frame."""
        frame = Frame(max_rows=self.max_rows)
        for card in self.entities():
            if card.visible:
                card.render(frame)
        frame.draw(self.status, 0, self.status_row, Color.DARK_GRAY)
        return frame
