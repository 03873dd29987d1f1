from __future__ import annotations

from rich.console import Console

from ginrummy.cards import Card, parse_cards
from ginrummy.counter import CardCounter
from ginrummy.render import format_card, format_cards


def test_format_card_uses_suit_symbol() -> None:
    assert format_card(Card.from_code("QH")) == "[red]Q♥[/red]"
    assert format_cards([]) == "—"


def test_counter_renders_with_rich() -> None:
    counter = CardCounter()
    counter.reset(0, parse_cards("AC 2C 3C 4H 5H 6H 7S 8S 9S TD"))
    counter.report_first_face_up_card(Card.from_code("KD"))
    console = Console(record=True, width=120)

    console.print(counter)

    text = console.export_text()
    assert "Card Counter" in text
    assert "Draw pile: 31 card(s)" in text
    assert "Unseen: 41 card(s)" in text
