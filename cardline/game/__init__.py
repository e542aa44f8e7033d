# game/__init__.py

from .cards import Card, new_deck
from .table import Table

__all__ = ['Card', 'Table', 'new_deck']
