"""Top-level package for the carddeck deck-construction library."""

from . import builder, cards, config, ranking, transforms
from .builder import build, new
from .cards import MAX_RANK, MIN_RANK, SUITS, Card, Rank, Suit
from .config import DeckConfig, describe_pipeline, parse_pipeline
from .ranking import by_rank_then_by_suit, by_suit_then_by_rank
from .transforms import (
    AddJokers,
    FilterOut,
    InvalidCount,
    Repeat,
    Shuffle,
    SortBy,
    Transformation,
    decks,
    default_sort,
    filter_cards,
    jokers,
    shuffle,
    shuffled,
    sort,
)

__all__ = [
    "AddJokers",
    "Card",
    "DeckConfig",
    "FilterOut",
    "InvalidCount",
    "MAX_RANK",
    "MIN_RANK",
    "Rank",
    "Repeat",
    "SUITS",
    "Shuffle",
    "SortBy",
    "Suit",
    "Transformation",
    "build",
    "builder",
    "by_rank_then_by_suit",
    "by_suit_then_by_rank",
    "cards",
    "config",
    "decks",
    "default_sort",
    "describe_pipeline",
    "filter_cards",
    "jokers",
    "new",
    "parse_pipeline",
    "ranking",
    "shuffle",
    "shuffled",
    "sort",
    "transforms",
]
