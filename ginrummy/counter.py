"""Card counting for a Gin Rummy agent.

The counter follows the public events of one deal and keeps track of where
every card might be from the point of view of a single player: its own hand,
the part of the opponent's hand that was seen being picked up, the cards
each side rejected, the discard pile and the cards nobody has seen yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Sequence

import numpy as np

from . import encoding
from .cards import ALL_CARDS, Card, format_cards

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from numpy.typing import NDArray
    from rich.console import RenderableType


class InvalidStateError(RuntimeError):
    """Raised when events are reported out of the order a deal allows."""


@dataclass(frozen=True, slots=True)
class CounterSnapshot:
    """Immutable copy of every view held by a :class:`CardCounter`."""

    my_number: int
    op_number: int
    my_hand: frozenset[Card]
    my_known_hand: frozenset[Card]
    my_rejects: frozenset[Card]
    op_known_hand: frozenset[Card]
    op_rejects: frozenset[Card]
    discard_pile: tuple[Card, ...]
    draw_pile_size: int
    unseen_cards: frozenset[Card]


OBSERVATION_ROWS: tuple[str, ...] = (
    "my_hand",
    "my_known_hand",
    "op_known_hand",
    "my_rejects",
    "op_rejects",
    "discard_pile",
    "unseen_cards",
)


class CardCounter:
    """Track card locations for one player over the course of a deal."""

    def __init__(self, hand_size: int = encoding.HAND_SIZE, universe: Sequence[Card] = ALL_CARDS) -> None:
        self.hand_size = hand_size
        self.universe = tuple(universe)
        self._ready = False

        self._my_number = 0
        self._my_hand: set[Card] = set()
        self._my_known_hand: set[Card] = set()  # cards the opponent saw me pick up
        self._my_rejects: set[Card] = set()

        self._op_number = 1
        self._op_known_hand: set[Card] = set()
        self._op_rejects: set[Card] = set()

        self._discard_pile: list[Card] = []
        self._draw_pile_size = 0
        self._unseen_cards: set[Card] = set()  # draw pile plus unknown opponent cards

    def reset(self, player_number: int, hand: Iterable[Card]) -> None:
        """Forget the previous deal and start tracking from ``hand``."""

        if player_number not in range(encoding.NUM_PLAYERS):
            raise ValueError(f"invalid player number {player_number}")

        self._my_number = player_number
        self._my_hand = set(hand)
        self._my_known_hand = set()
        self._my_rejects = set()

        self._op_number = (player_number + 1) % encoding.NUM_PLAYERS
        self._op_known_hand = set()
        self._op_rejects = set()

        self._discard_pile = []
        self._draw_pile_size = len(self.universe) - 2 * self.hand_size
        self._unseen_cards = {card for card in self.universe if card not in self._my_hand}
        self._ready = True

    def report_first_face_up_card(self, card: Card) -> None:
        """Record the card turned up from the draw pile to start the discards."""

        self._require_ready()
        if self._discard_pile:
            raise InvalidStateError(f"This isn't the first face up card: {card}")
        self._draw_pile_size -= 1
        self._discard_pile.append(card)
        self._unseen_cards.discard(card)

    def report_draw(self, player_number: int, drawn_card: Card | None) -> None:
        """Record that ``player_number`` drew a card.

        ``drawn_card`` is ``None`` when the opponent drew from the draw pile
        and the card was not shown.
        """

        self._require_ready()
        mine = self.is_me(player_number)
        if mine and drawn_card is None:
            raise ValueError("a draw by this player must name the drawn card")

        face_up = self._is_face_up_card(drawn_card)
        self._update_piles_and_rejects(mine, drawn_card, face_up)

        if drawn_card is None:
            return
        if mine:
            self._my_hand.add(drawn_card)
            if face_up:
                self._my_known_hand.add(drawn_card)
        else:
            self._op_known_hand.add(drawn_card)

    def report_discard(self, player_number: int, discarded_card: Card) -> None:
        """Record that ``player_number`` discarded ``discarded_card``."""

        self._require_ready()
        self._discard_pile.append(discarded_card)
        if self.is_me(player_number):
            self._my_rejects.add(discarded_card)
            self._my_hand.discard(discarded_card)
            self._my_known_hand.discard(discarded_card)
        else:
            self._op_rejects.add(discarded_card)
            self._op_known_hand.discard(discarded_card)
            self._unseen_cards.discard(discarded_card)

    # accessors
    @property
    def my_number(self) -> int:
        return self._my_number

    @property
    def op_number(self) -> int:
        return self._op_number

    @property
    def my_hand(self) -> frozenset[Card]:
        return frozenset(self._my_hand)

    @property
    def my_known_hand(self) -> frozenset[Card]:
        """Cards in my hand that the opponent watched me take."""

        return frozenset(self._my_known_hand)

    @property
    def my_rejects(self) -> frozenset[Card]:
        return frozenset(self._my_rejects)

    @property
    def op_known_hand(self) -> frozenset[Card]:
        return frozenset(self._op_known_hand)

    @property
    def op_rejects(self) -> frozenset[Card]:
        return frozenset(self._op_rejects)

    @property
    def discard_pile(self) -> tuple[Card, ...]:
        """The discard pile, bottom card first."""

        return tuple(self._discard_pile)

    @property
    def top_discard(self) -> Card | None:
        return self._discard_pile[-1] if self._discard_pile else None

    @property
    def draw_pile_size(self) -> int:
        return self._draw_pile_size

    @property
    def unseen_cards(self) -> frozenset[Card]:
        return frozenset(self._unseen_cards)

    def is_me(self, player_number: int) -> bool:
        return self._my_number == player_number

    def snapshot(self) -> CounterSnapshot:
        """Return an immutable copy of the current views."""

        return CounterSnapshot(
            my_number=self._my_number,
            op_number=self._op_number,
            my_hand=self.my_hand,
            my_known_hand=self.my_known_hand,
            my_rejects=self.my_rejects,
            op_known_hand=self.op_known_hand,
            op_rejects=self.op_rejects,
            discard_pile=self.discard_pile,
            draw_pile_size=self._draw_pile_size,
            unseen_cards=self.unseen_cards,
        )

    def observation(self) -> "NDArray[np.uint8]":
        """Encode the card views as a ``(7, NUM_CARDS)`` array of 0/1 flags.

        Rows follow :data:`OBSERVATION_ROWS`; columns are card identifiers.
        """

        views: list[Iterable[Card]] = [
            self._my_hand,
            self._my_known_hand,
            self._op_known_hand,
            self._my_rejects,
            self._op_rejects,
            self._discard_pile,
            self._unseen_cards,
        ]
        planes = np.zeros((len(OBSERVATION_ROWS), encoding.NUM_CARDS), dtype=np.uint8)
        for row, cards in enumerate(views):
            ids = [card.id for card in cards]
            if ids:
                planes[row, ids] = 1
        return planes

    def check_invariants(self) -> None:
        """Raise :class:`InvalidStateError` if the views contradict each other."""

        discards = set(self._discard_pile)
        if self._my_hand & discards:
            raise InvalidStateError("cards in hand are also on the discard pile")
        if self._unseen_cards & self._my_hand:
            raise InvalidStateError("cards in hand are marked unseen")
        if self._unseen_cards & discards:
            raise InvalidStateError("face-up cards are marked unseen")
        if not self._my_known_hand <= self._my_hand:
            raise InvalidStateError("known hand cards missing from hand")
        if self._draw_pile_size < 0:
            raise InvalidStateError(f"negative draw pile size {self._draw_pile_size}")

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}\n"
            f"  myHand:       {_codes(self._my_hand)}\n"
            f"  myKnownHand:  {_codes(self._my_known_hand)}\n"
            f"  myRejects:    {_codes(self._my_rejects)}\n"
            f"  opKnownHand:  {_codes(self._op_known_hand)}\n"
            f"  opRejects:    {_codes(self._op_rejects)}\n"
            f"  discardPile:  [{format_cards(self._discard_pile)}]\n"
            f"  drawPileSize: {self._draw_pile_size}\n>"
        )

    def __rich__(self) -> "RenderableType":
        from .render import render_counter  # Local import to avoid cycles

        return render_counter(self)

    # private utility methods
    def _require_ready(self) -> None:
        if not self._ready:
            raise InvalidStateError("reset() must be called before reporting events")

    def _is_face_up_card(self, card: Card | None) -> bool:
        return card is not None and bool(self._discard_pile) and card == self._discard_pile[-1]

    def _update_piles_and_rejects(self, mine: bool, drawn_card: Card | None, face_up: bool) -> None:
        """Take a face-up card off the discard pile, or count a blind draw.

        A blind draw passes over the face-up card, which becomes a reject of
        the drawing player.
        """

        if drawn_card is not None:
            self._unseen_cards.discard(drawn_card)
        if face_up:
            self._discard_pile.pop()
            return

        self._draw_pile_size -= 1
        if self._discard_pile:
            rejects = self._my_rejects if mine else self._op_rejects
            rejects.add(self._discard_pile[-1])


def _codes(cards: Iterable[Card]) -> str:
    return "{" + " ".join(card.code for card in sorted(cards)) + "}"
