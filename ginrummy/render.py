"""Rich rendering helpers for cards and card counters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from .cards import Card, sort_cards

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .counter import CardCounter

_SUIT_SYMBOLS = {
    "C": ("♣", "green"),
    "H": ("♥", "red"),
    "S": ("♠", "cyan"),
    "D": ("♦", "magenta"),
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    symbol, color = _SUIT_SYMBOLS.get(card.suit.value, (card.suit.value, "white"))
    return f"[{color}]{card.rank.value}{symbol}[/{color}]"


def format_cards(cards: Iterable[Card], *, ordered: bool = False) -> str:
    shown = list(cards) if ordered else sort_cards(cards)
    if not shown:
        return "—"
    return " ".join(format_card(card) for card in shown)


def render_counter(counter: "CardCounter", *, title: str = "Card Counter") -> RenderableType:
    """Return a Rich panel describing what ``counter`` knows."""

    views = Table(box=box.ROUNDED, expand=True)
    views.add_column("View", justify="left", style="bold")
    views.add_column("Count", justify="right")
    views.add_column("Cards", justify="left")
    rows = [
        ("My hand", counter.my_hand),
        ("My known hand", counter.my_known_hand),
        ("My rejects", counter.my_rejects),
        ("Opponent known hand", counter.op_known_hand),
        ("Opponent rejects", counter.op_rejects),
    ]
    for label, cards in rows:
        views.add_row(label, str(len(cards)), format_cards(cards))
    pile = counter.discard_pile
    views.add_row("Discard pile", str(len(pile)), format_cards(pile, ordered=True))

    grid = Table.grid(expand=True)
    grid.add_column(justify="left")
    grid.add_row(f"[cyan]Player[/cyan]: {counter.my_number}  [cyan]Opponent[/cyan]: {counter.op_number}")
    grid.add_row(f"[cyan]Draw pile[/cyan]: {counter.draw_pile_size} card(s)")
    grid.add_row(f"[cyan]Unseen[/cyan]: {len(counter.unseen_cards)} card(s)")

    return Panel(Group(grid, views), title=title, padding=(0, 1), border_style="cyan")
