"""Top-level package for the Gin Rummy card counter."""

from . import cards, counter, encoding, melds, utils
from .cards import ALL_CARDS, Card, Rank, Suit
from .counter import CardCounter, CounterSnapshot, InvalidStateError

__all__ = [
    "ALL_CARDS",
    "Card",
    "CardCounter",
    "CounterSnapshot",
    "InvalidStateError",
    "Rank",
    "Suit",
    "cards",
    "counter",
    "encoding",
    "melds",
    "utils",
]
