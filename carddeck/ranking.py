"""Ranking keys and positional comparator factories."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Final, Sequence

from .cards import MAX_RANK, SUITS, Card

__all__ = [
    "JOKER_BASE",
    "Less",
    "LessFactory",
    "by_key",
    "by_rank_then_by_suit",
    "by_suit_then_by_rank",
    "rank_major_key",
    "sort_indices",
    "suit_major_key",
]

Less = Callable[[int, int], bool]
LessFactory = Callable[[Sequence[Card]], Less]

# Larger than any key a real card can produce under either ordering.
JOKER_BASE: Final[int] = len(SUITS) * int(MAX_RANK) + len(SUITS)


def suit_major_key(card: Card) -> int:
    """Spades before Diamonds before Clubs before Hearts, ranks ascending."""

    if card.is_joker:
        return JOKER_BASE + int(card.rank)
    return int(card.suit) * int(MAX_RANK) + int(card.rank)


def rank_major_key(card: Card) -> int:
    """All Aces first, then all Twos, and so on; suits break ties."""

    if card.is_joker:
        return JOKER_BASE + int(card.rank)
    return (int(card.rank) - 1) * len(SUITS) + int(card.suit)


def by_key(key: Callable[[Card], int]) -> LessFactory:
    """Return a comparator factory ordering cards by ``key``."""

    def factory(cards: Sequence[Card]) -> Less:
        def less(i: int, j: int) -> bool:
            return key(cards[i]) < key(cards[j])

        return less

    return factory


def by_suit_then_by_rank(cards: Sequence[Card]) -> Less:
    """Positional less-than over ``cards`` using the suit-major key."""

    return by_key(suit_major_key)(cards)


def by_rank_then_by_suit(cards: Sequence[Card]) -> Less:
    """Positional less-than over ``cards`` using the rank-major key."""

    return by_key(rank_major_key)(cards)


def sort_indices(length: int, less: Less) -> list[int]:
    """Return the positions ``0..length-1`` ordered by ``less``."""

    def compare(i: int, j: int) -> int:
        if less(i, j):
            return -1
        if less(j, i):
            return 1
        return 0

    return sorted(range(length), key=cmp_to_key(compare))
