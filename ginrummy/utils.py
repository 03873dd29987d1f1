"""Helpers for Gin Rummy agents built on the meld solver."""

from __future__ import annotations

from typing import Iterable, Sequence

from . import encoding, melds
from .cards import Card


def is_gin(hand: Iterable[Card]) -> bool:
    """Return ``True`` if the melds in ``hand`` include all ``HAND_SIZE`` cards."""

    best_melds = melds.cards_to_best_meld_sets(hand)
    if not best_melds:
        return False
    return num_cards_in_melds(best_melds[0]) == encoding.HAND_SIZE


def num_cards_in_melds(meld_set: Sequence[Sequence[Card]]) -> int:
    return sum(len(meld) for meld in meld_set)


def get_best_melds(cards: Iterable[Card]) -> melds.MeldSet:
    """Return one of the meld sets with minimal deadwood, or ``[]``."""

    best_melds = melds.cards_to_best_meld_sets(cards)
    if not best_melds:
        return []
    return best_melds[0]
