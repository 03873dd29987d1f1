"""Meld enumeration and minimum-deadwood meld covers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from . import encoding
from .cards import Card

MIN_MELD_SIZE = 3

Meld = List[Card]
MeldSet = List[Meld]


@dataclass(frozen=True, slots=True)
class _MaskedMeld:
    mask: int
    cards: tuple[Card, ...]


def _runs_for_suit(cards: list[Card]) -> Iterable[tuple[Card, ...]]:
    by_rank = {card.rank.index: card for card in cards}
    rank_idx = 0
    while rank_idx < encoding.NUM_RANKS:
        if rank_idx not in by_rank:
            rank_idx += 1
            continue
        streak: list[Card] = []
        while rank_idx in by_rank:
            streak.append(by_rank[rank_idx])
            rank_idx += 1
        for start in range(len(streak) - MIN_MELD_SIZE + 1):
            for stop in range(start + MIN_MELD_SIZE, len(streak) + 1):
                yield tuple(streak[start:stop])


def _sets_for_rank(cards: list[Card]) -> Iterable[tuple[Card, ...]]:
    if len(cards) < MIN_MELD_SIZE:
        return
    ordered = sorted(cards)
    if len(ordered) == 4:
        yield tuple(ordered)
        for skip in range(4):
            yield tuple(card for idx, card in enumerate(ordered) if idx != skip)
    else:
        yield tuple(ordered)


def _masked_melds(cards: Iterable[Card]) -> list[_MaskedMeld]:
    by_suit: dict[int, list[Card]] = {}
    by_rank: dict[int, list[Card]] = {}
    for card in set(cards):
        by_suit.setdefault(card.suit.index, []).append(card)
        by_rank.setdefault(card.rank.index, []).append(card)

    found: list[tuple[Card, ...]] = []
    for rank_idx in sorted(by_rank):
        found.extend(_sets_for_rank(by_rank[rank_idx]))
    for suit_idx in sorted(by_suit):
        found.extend(_runs_for_suit(by_suit[suit_idx]))
    return [
        _MaskedMeld(encoding.mask_from_cards(card.id for card in meld), meld)
        for meld in found
    ]


def all_melds(cards: Iterable[Card]) -> list[Meld]:
    """Return every set and run contained in ``cards``.

    Sets are three or four cards of one rank; runs are three or more
    consecutive ranks of one suit with the ace low.
    """

    return [list(meld.cards) for meld in _masked_melds(cards)]


def deadwood_points(cards: Iterable[Card]) -> int:
    """Return the point total of ``cards`` counted as deadwood."""

    return sum(card.points for card in cards)


def cards_to_best_meld_sets(cards: Iterable[Card]) -> list[MeldSet]:
    """Return all meld sets leaving the least deadwood.

    Each meld set is a list of pairwise disjoint melds. The result is empty
    when ``cards`` hold no meld at all.
    """

    hand = list(set(cards))
    melds = _masked_melds(hand)
    if not melds:
        return []
    hand_mask = encoding.mask_from_cards(card.id for card in hand)

    best_deadwood = encoding.points_from_mask(hand_mask)
    best: list[tuple[int, ...]] = []

    def _search(start: int, used: int, chosen: tuple[int, ...]) -> None:
        nonlocal best_deadwood, best
        if chosen:
            deadwood = encoding.points_from_mask(hand_mask & ~used)
            if deadwood < best_deadwood:
                best_deadwood = deadwood
                best = [chosen]
            elif deadwood == best_deadwood:
                best.append(chosen)
        for idx in range(start, len(melds)):
            meld = melds[idx]
            if meld.mask & used:
                continue
            _search(idx + 1, used | meld.mask, chosen + (idx,))

    _search(0, 0, ())
    return [[list(melds[idx].cards) for idx in chosen] for chosen in best]


def deadwood(cards: Iterable[Card]) -> int:
    """Return the minimum deadwood left after melding ``cards``."""

    hand = list(set(cards))
    best_sets = cards_to_best_meld_sets(hand)
    if not best_sets:
        return deadwood_points(hand)
    melded = {card for meld in best_sets[0] for card in meld}
    return deadwood_points(card for card in hand if card not in melded)
