"""Deck configuration and textual pipeline descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .cards import CODE_TO_RANK, CODE_TO_SUIT, RANK_CODES, Card, Rank, Suit
from .ranking import by_rank_then_by_suit, by_suit_then_by_rank
from .transforms import (
    AddJokers,
    FilterOut,
    Repeat,
    Shuffle,
    SortBy,
    Transformation,
    check_count,
)

__all__ = [
    "DeckConfig",
    "describe_pipeline",
    "exclude_rank",
    "exclude_suit",
    "parse_pipeline",
    "parse_rank",
    "parse_suit",
]

ORDERS = {
    "suit": by_suit_then_by_rank,
    "rank": by_rank_then_by_suit,
}


def parse_suit(text: str) -> Suit:
    """Parse ``"heart"``, ``"Hearts"`` or ``"H"`` into a real suit."""

    token = text.strip().upper()
    if token in CODE_TO_SUIT:
        return CODE_TO_SUIT[token]
    for suit in CODE_TO_SUIT.values():
        if token in (suit.name, f"{suit.name}S"):
            return suit
    raise ValueError(f"unknown suit '{text}'")


def parse_rank(text: str) -> Rank:
    """Parse ``"A"``, ``"ace"`` or ``"10"`` into a rank."""

    token = text.strip().upper()
    if token in CODE_TO_RANK:
        return CODE_TO_RANK[token]
    try:
        return Rank[token]
    except KeyError:
        raise ValueError(f"unknown rank '{text}'") from None


def exclude_suit(suit: Suit) -> FilterOut:
    def predicate(card: Card) -> bool:
        return card.suit is suit

    return FilterOut(predicate, suit.name.lower())


def exclude_rank(rank: Rank) -> FilterOut:
    def predicate(card: Card) -> bool:
        return not card.is_joker and card.rank == rank

    return FilterOut(predicate, RANK_CODES[rank])


@dataclass(frozen=True, slots=True)
class DeckConfig:
    """Declarative description of a deck variant."""

    jokers: int = 0
    decks: int = 1
    exclude_suits: tuple[Suit, ...] = ()
    exclude_ranks: tuple[Rank, ...] = ()
    order: str | None = None
    shuffle: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        check_count("jokers", self.jokers)
        check_count("decks", self.decks)
        for suit in self.exclude_suits:
            if not isinstance(suit, Suit) or suit is Suit.JOKER:
                raise ValueError(f"exclude_suits expects real suits, got {suit!r}")
        for rank in self.exclude_ranks:
            if not isinstance(rank, Rank):
                raise ValueError(f"exclude_ranks expects ranks, got {rank!r}")
        if self.order is not None and self.order not in ORDERS:
            raise ValueError(f"unknown order '{self.order}'; expected one of {sorted(ORDERS)}")

    def steps(self) -> list[Transformation]:
        """Return the steps in build order: filters, jokers, copies, sort, shuffle."""

        steps: list[Transformation] = []
        steps.extend(exclude_suit(suit) for suit in self.exclude_suits)
        steps.extend(exclude_rank(rank) for rank in self.exclude_ranks)
        if self.jokers:
            steps.append(AddJokers(self.jokers))
        if self.decks != 1:
            steps.append(Repeat(self.decks))
        if self.order is not None:
            steps.append(SortBy(ORDERS[self.order], self.order))
        if self.shuffle:
            steps.append(Shuffle(seed=self.seed))
        return steps


def _parse_count(name: str, argument: str) -> int:
    try:
        value = int(argument)
    except ValueError:
        raise ValueError(f"{name} expects an integer, got '{argument}'") from None
    return check_count(name, value)


def _parse_exclusion(argument: str) -> FilterOut:
    try:
        return exclude_suit(parse_suit(argument))
    except ValueError:
        pass
    try:
        return exclude_rank(parse_rank(argument))
    except ValueError:
        raise ValueError(f"exclude expects a suit or rank, got '{argument}'") from None


def _parse_token(token: str) -> Transformation:
    name, _, argument = token.partition(":")
    name = name.strip().lower()
    argument = argument.strip()
    if name == "jokers":
        return AddJokers(_parse_count("jokers", argument))
    if name == "decks":
        return Repeat(_parse_count("decks", argument))
    if name == "sort":
        order = argument.lower() or "suit"
        if order not in ORDERS:
            raise ValueError(f"unknown order '{argument}'")
        return SortBy(ORDERS[order], order)
    if name == "shuffle":
        if not argument:
            return Shuffle()
        try:
            return Shuffle(seed=int(argument))
        except ValueError:
            raise ValueError(f"shuffle seed must be an integer, got '{argument}'") from None
    if name == "exclude":
        return _parse_exclusion(argument)
    raise ValueError(f"unknown pipeline step '{token}'")


def parse_pipeline(text: str) -> list[Transformation]:
    """Parse ``"exclude:heart, jokers:2, sort:rank, shuffle:7"`` into steps."""

    return [_parse_token(token) for token in text.split(",") if token.strip()]


def describe_pipeline(steps: Iterable[Transformation]) -> str:
    """Render steps back into the comma-separated form ``parse_pipeline`` reads."""

    tokens: list[str] = []
    for step in steps:
        describe = getattr(step, "describe", None)
        if not callable(describe):
            raise ValueError(f"step {step!r} cannot be described")
        tokens.append(describe())
    return ",".join(tokens)
