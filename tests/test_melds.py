from __future__ import annotations

from ginrummy.cards import Card, parse_cards
from ginrummy.melds import all_melds, cards_to_best_meld_sets, deadwood, deadwood_points


def _as_sets(meld_sets: list[list[list[Card]]]) -> set[frozenset[frozenset[Card]]]:
    return {frozenset(frozenset(meld) for meld in meld_set) for meld_set in meld_sets}


def test_all_melds_detects_runs_and_sets() -> None:
    run = parse_cards("AH 2H 3H")
    sevens = parse_cards("7C 7H 7S")
    melds = [set(meld) for meld in all_melds(run + sevens + parse_cards("KD"))]

    assert set(run) in melds
    assert set(sevens) in melds
    assert len(melds) == 2


def test_four_of_a_kind_and_long_runs_yield_sub_melds() -> None:
    fours = all_melds(parse_cards("9C 9H 9S 9D"))
    run = all_melds(parse_cards("3S 4S 5S 6S"))

    assert len(fours) == 5
    # 3-4-5, 3-4-5-6, 4-5-6
    assert sorted(len(meld) for meld in run) == [3, 3, 4]


def test_runs_do_not_wrap_around() -> None:
    assert all_melds(parse_cards("QD KD AD")) == []


def test_best_meld_sets_minimise_deadwood() -> None:
    hand = parse_cards("7C 7H 7S 7D 8D 9D")

    best = cards_to_best_meld_sets(hand)

    assert _as_sets(best) == {
        frozenset({frozenset(parse_cards("7C 7H 7S")), frozenset(parse_cards("7D 8D 9D"))})
    }
    assert deadwood(hand) == 0


def test_best_meld_sets_keep_ties() -> None:
    # 5S can join the run or the set, both leave 5H/5C or 4S/6S unmelded.
    hand = parse_cards("4S 5S 6S 5H 5C")

    best = cards_to_best_meld_sets(hand)

    assert _as_sets(best) == {
        frozenset({frozenset(parse_cards("4S 5S 6S"))}),
        frozenset({frozenset(parse_cards("5S 5H 5C"))}),
    }
    assert deadwood(hand) == 10


def test_no_melds() -> None:
    hand = parse_cards("AC 5H 9S KD")

    assert cards_to_best_meld_sets(hand) == []
    assert deadwood(hand) == deadwood_points(hand) == 25
