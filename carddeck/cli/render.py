"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from rich import box
from rich.table import Table

from ..cards import SUITS, Card, Suit

_SUIT_SYMBOLS = {
    Suit.SPADE: ("♠", "cyan"),
    Suit.HEART: ("♥", "red"),
    Suit.DIAMOND: ("♦", "magenta"),
    Suit.CLUB: ("♣", "green"),
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card.is_joker:
        return f"[magenta]🃏{card.rank}[/magenta]"
    symbol, color = _SUIT_SYMBOLS[card.suit]
    rank_code = card.code[:-1]
    return f"[{color}]{rank_code}{symbol}[/{color}]"


def render_deck(cards: Sequence[Card], *, title: str = "Deck") -> Table:
    """Return a table listing every card with its position."""

    table = Table(title=f"{title} ({len(cards)} cards)", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Card", justify="center")
    table.add_column("Code", justify="left")
    table.add_column("Name", justify="left")
    for idx, card in enumerate(cards, start=1):
        table.add_row(str(idx), format_card(card), card.code, str(card))
    return table


def render_stats(cards: Sequence[Card]) -> Table:
    """Return a table counting cards per suit."""

    counts = Counter(card.suit for card in cards)
    table = Table(title="Suit Counts", box=box.SIMPLE_HEAVY)
    table.add_column("Suit", justify="left")
    table.add_column("Cards", justify="right")
    for suit in (*SUITS, Suit.JOKER):
        table.add_row(f"{suit.label}s" if suit is not Suit.JOKER else "Jokers", str(counts.get(suit, 0)))
    table.add_row("[bold]Total[/bold]", f"[bold]{len(cards)}[/bold]")
    return table
