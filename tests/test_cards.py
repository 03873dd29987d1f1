from __future__ import annotations

import pytest

from ginrummy import encoding
from ginrummy.cards import ALL_CARDS, Card, Rank, Suit, get_shuffle, parse_cards, sort_cards


def test_universe_has_one_card_per_identifier() -> None:
    assert len(ALL_CARDS) == encoding.NUM_CARDS
    assert [card.id for card in ALL_CARDS] == list(range(encoding.NUM_CARDS))
    assert len(set(ALL_CARDS)) == encoding.NUM_CARDS


def test_card_identity_follows_rank_and_suit() -> None:
    card = Card(rank=Rank.QUEEN, suit=Suit.SPADES)

    assert card == Card.from_code("QS")
    assert hash(card) == hash(Card.from_code("qs"))
    assert card.id == encoding.card_id(11, 2)
    assert Card.from_id(card.id) is ALL_CARDS[card.id]
    assert str(card) == "QS"


@pytest.mark.parametrize(
    ("code", "rank", "suit"),
    [("AC", Rank.ACE, Suit.CLUBS), ("10D", Rank.TEN, Suit.DIAMONDS), ("th", Rank.TEN, Suit.HEARTS)],
)
def test_from_code(code: str, rank: Rank, suit: Suit) -> None:
    card = Card.from_code(code)

    assert card.rank is rank
    assert card.suit is suit


@pytest.mark.parametrize("code", ["", "1C", "AX", "QSS"])
def test_from_code_rejects_garbage(code: str) -> None:
    with pytest.raises(ValueError):
        Card.from_code(code)


def test_from_id_out_of_range() -> None:
    with pytest.raises(ValueError):
        Card.from_id(encoding.NUM_CARDS)


def test_card_points() -> None:
    assert [card.points for card in parse_cards("AC 7H TS JD QC KH")] == [1, 7, 10, 10, 10, 10]
    assert encoding.points_from_mask(encoding.mask_from_cards([0, 1, 12])) == 13


def test_cards_are_immutable() -> None:
    card = Card.from_code("5H")

    with pytest.raises(AttributeError):
        card.rank = Rank.SIX  # type: ignore[misc]


def test_shuffle_is_seeded_permutation() -> None:
    deck = get_shuffle(7)

    assert deck == get_shuffle(7)
    assert sorted(deck) == list(ALL_CARDS)


def test_sort_cards_orders_by_rank_then_suit() -> None:
    cards = parse_cards("KD 2S 2C AH")

    assert [card.code for card in sort_cards(cards)] == ["AH", "2C", "2S", "KD"]
