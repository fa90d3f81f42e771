"""Composable deck transformations.

A transformation is anything callable as ``step(cards) -> cards``. Plain
functions and lambdas qualify, and so do the named variants defined here
(``SortBy``, ``Shuffle``, ``AddJokers``, ``FilterOut`` and ``Repeat``), which
additionally carry a ``label`` for logs. Steps built from a named order, a
named exclusion or a seed also ``describe()`` themselves as a pipeline token;
steps wrapping a caller's comparator, predicate or random source refuse to,
since the text form could not rebuild them.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Any, Callable, Protocol

import numpy as np

from .cards import Card, Suit
from .ranking import LessFactory, by_rank_then_by_suit, by_suit_then_by_rank, sort_indices

__all__ = [
    "AddJokers",
    "FilterOut",
    "InvalidCount",
    "Repeat",
    "Shuffle",
    "SortBy",
    "Transformation",
    "check_count",
    "decks",
    "default_sort",
    "filter_cards",
    "jokers",
    "shuffle",
    "shuffled",
    "sort",
]


class InvalidCount(ValueError):
    """Raised when a joker or deck count is negative."""


class Transformation(Protocol):
    def __call__(self, cards: list[Card]) -> list[Card]: ...


def check_count(name: str, n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an integer, got {type(n).__name__}")
    if n < 0:
        raise InvalidCount(f"{name} must be non-negative, got {n}")
    return n


def _time_seeded_rng() -> np.random.Generator:
    return np.random.default_rng(time.time_ns())


@dataclass(frozen=True, slots=True)
class SortBy:
    """Sort the cards in place using a positional comparator factory."""

    less: LessFactory
    name: str | None = None

    def __call__(self, cards: list[Card]) -> list[Card]:
        order = sort_indices(len(cards), self.less(cards))
        cards[:] = [cards[idx] for idx in order]
        return cards

    @property
    def label(self) -> str:
        return f"sort:{self.name or 'custom'}"

    def describe(self) -> str:
        if self.name is None:
            raise ValueError("a sort with a custom comparator cannot be described")
        return self.label


@dataclass(frozen=True, slots=True)
class Shuffle:
    """Permute the cards in place.

    ``rng`` may be any object exposing ``shuffle(list)`` (``random.Random``,
    ``numpy.random.Generator``). With ``seed`` set, a fresh ``random.Random``
    is created for every call so the permutation is reproducible. With
    neither, a generator seeded from the wall clock is created per call.
    """

    rng: Any = None
    seed: int | None = None

    def __call__(self, cards: list[Card]) -> list[Card]:
        if self.rng is not None:
            source = self.rng
        elif self.seed is not None:
            source = random.Random(self.seed)
        else:
            source = _time_seeded_rng()
        source.shuffle(cards)
        return cards

    @property
    def label(self) -> str:
        if self.rng is not None:
            return f"shuffle:<{type(self.rng).__name__}>"
        if self.seed is not None:
            return f"shuffle:{self.seed}"
        return "shuffle"

    def describe(self) -> str:
        if self.rng is not None:
            raise ValueError("a shuffle with an injected random source cannot be described")
        return self.label


@dataclass(frozen=True, slots=True)
class AddJokers:
    """Append ``n`` jokers told apart by ranks ``0..n-1``."""

    n: int

    def __post_init__(self) -> None:
        check_count("jokers", self.n)

    def __call__(self, cards: list[Card]) -> list[Card]:
        cards.extend(Card(suit=Suit.JOKER, rank=idx) for idx in range(self.n))
        return cards

    @property
    def label(self) -> str:
        return f"jokers:{self.n}"

    def describe(self) -> str:
        return self.label


@dataclass(frozen=True, slots=True)
class FilterOut:
    """Drop every card for which ``predicate`` is true, keeping order."""

    predicate: Callable[[Card], bool]
    name: str | None = None

    def __call__(self, cards: list[Card]) -> list[Card]:
        return [card for card in cards if not self.predicate(card)]

    @property
    def label(self) -> str:
        return f"exclude:{self.name or 'custom'}"

    def describe(self) -> str:
        if self.name is None:
            raise ValueError("a filter with a custom predicate cannot be described")
        return self.label


@dataclass(frozen=True, slots=True)
class Repeat:
    """Concatenate ``n`` copies of the input."""

    n: int

    def __post_init__(self) -> None:
        check_count("decks", self.n)

    def __call__(self, cards: list[Card]) -> list[Card]:
        combined: list[Card] = []
        for _ in range(self.n):
            combined.extend(cards)
        return combined

    @property
    def label(self) -> str:
        return f"decks:{self.n}"

    def describe(self) -> str:
        return self.label


def sort(less: LessFactory) -> SortBy:
    """Return a transformation sorting cards with ``less``."""

    if less is by_suit_then_by_rank:
        return SortBy(less, "suit")
    if less is by_rank_then_by_suit:
        return SortBy(less, "rank")
    return SortBy(less)


default_sort = SortBy(by_suit_then_by_rank, "suit")
shuffle = Shuffle()


def shuffled(rng: Any) -> Shuffle:
    """Return a shuffle step drawing from ``rng`` instead of the wall clock."""

    return Shuffle(rng=rng)


def jokers(n: int) -> AddJokers:
    return AddJokers(n)


def filter_cards(predicate: Callable[[Card], bool]) -> FilterOut:
    """Return a step excluding the cards ``predicate`` matches."""

    return FilterOut(predicate)


def decks(n: int) -> Repeat:
    return Repeat(n)
