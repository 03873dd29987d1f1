"""Card identifier encoding utilities for Gin Rummy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable, Iterator

RANKS: Final[list[str]] = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "T", "J", "Q", "K"]
SUITS: Final[list[str]] = ["C", "H", "S", "D"]
RANK_TO_IDX: Final[dict[str, int]] = {rank: idx for idx, rank in enumerate(RANKS)}
SUIT_TO_IDX: Final[dict[str, int]] = {suit: idx for idx, suit in enumerate(SUITS)}
POINTS: Final[list[int]] = list(range(1, 11)) + [10, 10, 10]
NUM_RANKS: Final[int] = len(RANKS)
NUM_SUITS: Final[int] = len(SUITS)
NUM_CARDS: Final[int] = NUM_RANKS * NUM_SUITS
HAND_SIZE: Final[int] = 10
NUM_PLAYERS: Final[int] = 2


@dataclass(frozen=True, slots=True)
class CardDecoding:
    """Typed container describing a decoded card identifier."""

    rank_idx: int
    suit_idx: int


def _validate_card_identifier(card_identifier: int) -> None:
    if card_identifier < 0 or card_identifier >= NUM_CARDS:
        raise ValueError(f"card identifier {card_identifier} out of range")


def card_id(rank_idx: int, suit_idx: int) -> int:
    """Encode a rank and suit index into a card identifier."""

    if not 0 <= suit_idx < NUM_SUITS:
        raise ValueError("suit_idx out of range")
    if not 0 <= rank_idx < NUM_RANKS:
        raise ValueError("rank_idx out of range")
    return suit_idx * NUM_RANKS + rank_idx


def decode_id(card_identifier: int) -> CardDecoding:
    """Decode a card identifier into its rank and suit indices."""

    _validate_card_identifier(card_identifier)
    return CardDecoding(card_identifier % NUM_RANKS, card_identifier // NUM_RANKS)


def card_points(card_identifier: int) -> int:
    """Return the deadwood value of a card identifier."""

    return POINTS[decode_id(card_identifier).rank_idx]


def parse_code(code: str) -> int:
    """Return the identifier for a card code such as ``"QH"`` or ``"10D"``."""

    text = code.strip().upper()
    if text.startswith("10"):
        text = "T" + text[2:]
    if len(text) != 2 or text[0] not in RANK_TO_IDX or text[1] not in SUIT_TO_IDX:
        raise ValueError(f"invalid card code '{code}'")
    return card_id(RANK_TO_IDX[text[0]], SUIT_TO_IDX[text[1]])


def mask_from_cards(cards: Iterable[int]) -> int:
    """Return a bit-mask representing the provided card identifiers."""

    mask = 0
    for card_identifier in cards:
        _validate_card_identifier(card_identifier)
        mask |= 1 << card_identifier
    return mask


def iter_cards(mask: int) -> Iterator[int]:
    """Yield all card identifiers present in ``mask``."""

    for card_identifier in range(NUM_CARDS):
        if (mask >> card_identifier) & 1:
            yield card_identifier


def points_from_mask(mask: int) -> int:
    """Return the total deadwood value represented by ``mask``."""

    total = 0
    for card_identifier in iter_cards(mask):
        total += card_points(card_identifier)
    return total
