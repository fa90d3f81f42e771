"""Deck assembly from the canonical card order plus a list of steps."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .cards import Card, iter_standard_deck
from .transforms import Transformation

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .config import DeckConfig

__all__ = ["build", "new"]

logger = logging.getLogger(__name__)


def _label(step: Transformation) -> str:
    label = getattr(step, "label", None)
    if isinstance(label, str):
        return label
    return getattr(step, "__name__", type(step).__name__)


def new(*transforms: Transformation) -> list[Card]:
    """Return a fresh deck with ``transforms`` applied in the given order.

    Without transforms the 52 standard cards come back in generation order:
    Spades, Diamonds, Clubs, Hearts, each Ace through King. No sort is
    applied.
    """

    cards = list(iter_standard_deck())
    for step in transforms:
        cards = step(cards)
        logger.debug("applied %s -> %d card(s)", _label(step), len(cards))
    return cards


def build(config: "DeckConfig") -> list[Card]:
    """Build a deck from a :class:`~carddeck.config.DeckConfig`."""

    return new(*config.steps())
