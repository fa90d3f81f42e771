"""Card abstractions and helpers for carddeck."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final, Iterator


class Suit(IntEnum):
    """Card suits in generation order, plus the Joker sentinel."""

    SPADE = 0
    DIAMOND = 1
    CLUB = 2
    HEART = 3
    JOKER = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Rank(IntEnum):
    """Playing ranks. Ordinal 0 is reserved and never assigned to a real card."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        return self.name.capitalize()


SUITS: Final[tuple[Suit, ...]] = (Suit.SPADE, Suit.DIAMOND, Suit.CLUB, Suit.HEART)
MIN_RANK: Final[Rank] = Rank.ACE
MAX_RANK: Final[Rank] = Rank.KING

RANK_CODES: Final[dict[Rank, str]] = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}
SUIT_CODES: Final[dict[Suit, str]] = {
    Suit.SPADE: "S",
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
    Suit.HEART: "H",
}
CODE_TO_RANK: Final[dict[str, Rank]] = {code: rank for rank, code in RANK_CODES.items()}
CODE_TO_SUIT: Final[dict[str, Suit]] = {code: suit for suit, code in SUIT_CODES.items()}
JOKER_CODE: Final[str] = "JOKER"


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a single card.

    Joker cards carry a plain integer ``rank`` that only tells jokers apart;
    it has no playing meaning.
    """

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            raise ValueError(f"invalid suit: {self.suit!r}")
        if isinstance(self.rank, bool) or not isinstance(self.rank, int):
            raise ValueError(f"rank must be an integer, got {self.rank!r}")
        if self.suit is Suit.JOKER:
            if self.rank < 0:
                raise ValueError(f"invalid joker index: {self.rank!r}")
        elif not MIN_RANK <= self.rank <= MAX_RANK:
            raise ValueError(f"invalid rank: {self.rank!r}")

    @property
    def is_joker(self) -> bool:
        """Return ``True`` when the card represents a Joker."""

        return self.suit is Suit.JOKER

    @property
    def code(self) -> str:
        """Compact code such as ``"AS"``, ``"10H"`` or ``"JOKER#1"``."""

        if self.is_joker:
            return f"{JOKER_CODE}#{int(self.rank)}"
        return f"{RANK_CODES[Rank(self.rank)]}{SUIT_CODES[self.suit]}"

    @classmethod
    def from_code(cls, code: str) -> "Card":
        text = code.strip().upper()
        if text.startswith(JOKER_CODE):
            parts = text.split("#")
            if len(parts) != 2 or parts[0] != JOKER_CODE or not parts[1].isdigit():
                raise ValueError(f"invalid card code '{code}'")
            return cls(Suit.JOKER, int(parts[1]))
        rank_code, suit_code = text[:-1], text[-1:]
        if rank_code not in CODE_TO_RANK or suit_code not in CODE_TO_SUIT:
            raise ValueError(f"invalid card code '{code}'")
        return cls(CODE_TO_SUIT[suit_code], CODE_TO_RANK[rank_code])

    def __str__(self) -> str:
        if self.is_joker:
            return self.suit.label
        return f"{Rank(self.rank).label} of {self.suit.label}s"


def iter_standard_deck() -> Iterator[Card]:
    """Yield the 52 standard cards, suit by suit, ranks ascending."""

    for suit in SUITS:
        for rank in range(MIN_RANK, MAX_RANK + 1):
            yield Card(suit=suit, rank=Rank(rank))
