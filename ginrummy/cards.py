"""Card abstractions and helpers for Gin Rummy."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from . import encoding


class Suit(str, Enum):
    """Enumeration of the four suits, in identifier order."""

    CLUBS = "C"
    HEARTS = "H"
    SPADES = "S"
    DIAMONDS = "D"

    @property
    def index(self) -> int:
        return encoding.SUIT_TO_IDX[self.value]


class Rank(str, Enum):
    """Enumeration of ranks, ace low."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def index(self) -> int:
        return encoding.RANK_TO_IDX[self.value]

    @property
    def points(self) -> int:
        """Deadwood value of a card of this rank."""

        return encoding.POINTS[self.index]


@dataclass(frozen=True, slots=True, order=True)
class Card:
    """Value object describing a physical card.

    Cards compare and sort by their identifier, so ``sorted`` groups them
    by suit and then by rank.
    """

    id: int = field(init=False, repr=False)
    rank: Rank = field(compare=False)
    suit: Suit = field(compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", encoding.card_id(self.rank.index, self.suit.index))

    @classmethod
    def from_id(cls, card_identifier: int) -> "Card":
        """Return the shared card for ``card_identifier``."""

        encoding.decode_id(card_identifier)
        return ALL_CARDS[card_identifier]

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a code such as ``"AS"``, ``"TC"`` or ``"10D"``."""

        return ALL_CARDS[encoding.parse_code(code)]

    @property
    def points(self) -> int:
        return self.rank.points

    @property
    def code(self) -> str:
        return self.rank.value + self.suit.value

    def __str__(self) -> str:
        return self.code


def _build_universe() -> tuple[Card, ...]:
    return tuple(
        Card(rank=rank, suit=suit)
        for suit in Suit
        for rank in Rank
    )


ALL_CARDS: tuple[Card, ...] = _build_universe()


def cards_from_codes(codes: Iterable[str]) -> list[Card]:
    """Return the cards named by ``codes``."""

    return [Card.from_code(code) for code in codes]


def parse_cards(text: str) -> list[Card]:
    """Return the cards in a whitespace separated string of codes."""

    return cards_from_codes(text.split())


def get_shuffle(seed: int | None = None) -> list[Card]:
    """Return a shuffled deck; the top of the deck is the last element."""

    deck = list(ALL_CARDS)
    random.Random(seed).shuffle(deck)
    return deck


def sort_cards(cards: Iterable[Card]) -> list[Card]:
    """Sort cards by rank, then suit, the usual order for showing a hand."""

    return sorted(cards, key=lambda c: (c.rank.index, c.suit.index))


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(card.code for card in cards)
