# game/effects.py

"""
Card animations.

Each builder returns an Animation whose action mutates only the card it was
built for. Actions are plain functions of the step index so they can be
exercised without an Animator.
"""

from ..animation import Animation
from .cards import (
    BACK_TURN,
    LAYER_DEALING,
    LAYER_DEALT,
    LAYER_NOT_DEALT,
    MAX_SHRINK,
    Card,
)


def pause(ticks: int) -> Animation:
    """Do nothing for the given number of ticks."""
    def action(step: int) -> bool:
        return step + 1 < ticks
    return Animation(action)


def deal(card: Card, col: int, row: int, steps: int = 6) -> Animation:
    """Slide a card from where it lies to (col, row) above the dealt cards."""
    steps = max(1, steps)
    start = {}

    def action(step: int) -> bool:
        if step == 0:
            start["col"], start["row"] = card.col, card.row
            card.layer = LAYER_DEALING
        progress = (step + 1) / steps
        card.col = start["col"] + round((col - start["col"]) * progress)
        card.row = start["row"] + round((row - start["row"]) * progress)
        if step + 1 < steps:
            return True
        card.layer = LAYER_DEALT
        return False

    return Animation(action)


def flip(card: Card) -> Animation:
    """Turn a card over through the four intermediate phases."""
    def action(step: int) -> bool:
        card.turn += 1
        return step + 1 < BACK_TURN
    return Animation(action)


def collect(card: Card) -> Animation:
    """Shrink a card away, then take it off the table."""
    def action(step: int) -> bool:
        if card.shrink < MAX_SHRINK:
            card.shrink += 1
            return True
        card.layer = LAYER_NOT_DEALT
        return False
    return Animation(action)


def deal_face_up(card: Card, col: int, row: int, delay: int = 0) -> Animation:
    """Deal a card face down, after an optional delay, then flip it."""
    card.turn = BACK_TURN
    chain = deal(card, col, row).then(flip(card))
    if delay > 0:
        chain = pause(delay).then(chain)
    return chain
