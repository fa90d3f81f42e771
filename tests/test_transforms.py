from __future__ import annotations

import random
from collections import Counter
from typing import List

import numpy as np
import pytest

from carddeck.builder import new
from carddeck.cards import SUITS, Card, Rank, Suit
from carddeck.ranking import by_key, by_rank_then_by_suit, suit_major_key
from carddeck.transforms import (
    AddJokers,
    FilterOut,
    InvalidCount,
    Repeat,
    Shuffle,
    SortBy,
    decks,
    default_sort,
    filter_cards,
    jokers,
    shuffle,
    shuffled,
    sort,
)


class ReverseShuffle:
    def shuffle(self, seq: List[Card]) -> None:
        seq.reverse()


def _suit_major_sorted(cards: list[Card]) -> list[Card]:
    return sorted(cards, key=suit_major_key)


def test_default_sort_restores_suit_major_order() -> None:
    cards = new(shuffled(random.Random(3)))

    result = default_sort(cards)

    assert result == new()
    assert [suit_major_key(card) for card in result] == sorted(suit_major_key(card) for card in result)


def test_default_sort_is_idempotent() -> None:
    once = new(shuffled(random.Random(11)), default_sort)
    twice = default_sort(list(once))

    assert twice == once


def test_sort_sorts_in_place() -> None:
    cards = new(shuffled(ReverseShuffle()))

    result = default_sort(cards)

    assert result is cards


def test_rank_then_suit_groups_ranks() -> None:
    cards = new(sort(by_rank_then_by_suit))

    for idx, rank in enumerate(Rank):
        group = cards[idx * 4 : idx * 4 + 4]
        assert {card.rank for card in group} == {rank}
        assert [card.suit for card in group] == list(SUITS)


def test_custom_sort_order() -> None:
    descending = sort(by_key(lambda card: -suit_major_key(card)))

    cards = new(descending)

    assert cards == list(reversed(new()))
    assert descending.label == "sort:custom"
    with pytest.raises(ValueError):
        descending.describe()


def test_jokers_sort_last_with_builtin_orders() -> None:
    cards = new(jokers(2), shuffled(random.Random(5)), sort(by_rank_then_by_suit))

    assert cards[-2:] == [Card(Suit.JOKER, 0), Card(Suit.JOKER, 1)]
    assert not any(card.is_joker for card in cards[:-2])


def test_jokers_appends_distinct_jokers() -> None:
    cards = new(jokers(3))

    assert len(cards) == 55
    joker_cards = [card for card in cards if card.suit is Suit.JOKER]
    assert len(joker_cards) == 3
    assert sorted(card.rank for card in joker_cards) == [0, 1, 2]
    assert cards[:52] == new()


def test_zero_jokers_is_a_no_op() -> None:
    assert new(jokers(0)) == new()


def test_filter_excludes_matching_cards_and_keeps_order() -> None:
    before = new()

    cards = filter_cards(lambda card: card.suit is Suit.HEART)(list(before))

    assert len(cards) == 39
    assert all(card.suit is not Suit.HEART for card in cards)
    assert cards == [card for card in before if card.suit is not Suit.HEART]


def test_filter_extremes() -> None:
    assert new(filter_cards(lambda card: True)) == []
    assert new(filter_cards(lambda card: False)) == new()


def test_decks_concatenates_copies() -> None:
    cards = new(decks(3))

    assert len(cards) == 156
    counts = Counter(cards)
    assert set(counts.values()) == {3}
    assert len(counts) == 52
    assert cards[52:104] == new()


def test_decks_edge_counts() -> None:
    source = new()

    assert decks(0)(source) == []
    single = decks(1)(source)
    assert single == source
    assert single is not source


def test_shuffle_produces_a_permutation() -> None:
    original = new()

    cards = shuffle(new())

    assert len(cards) == 52
    assert _suit_major_sorted(cards) == _suit_major_sorted(original)


def test_injected_source_is_reproducible() -> None:
    first = new(shuffled(random.Random(42)))
    second = new(shuffled(random.Random(42)))

    assert first == second
    assert first != new()
    assert Counter(first) == Counter(new())


def test_seeded_shuffle_repeats_on_every_call() -> None:
    step = Shuffle(seed=7)

    assert step(new()) == step(new())
    assert step.describe() == "shuffle:7"


def test_shuffle_uses_rng_shuffle() -> None:
    cards = new(shuffled(ReverseShuffle()))

    assert cards == list(reversed(new()))


def test_numpy_generator_as_source() -> None:
    cards = new(shuffled(np.random.default_rng(1)))

    assert _suit_major_sorted(cards) == new()


@pytest.mark.parametrize("factory", [jokers, decks])
def test_negative_counts_are_rejected(factory) -> None:
    with pytest.raises(InvalidCount):
        factory(-1)


@pytest.mark.parametrize("value", [1.5, "2", True])
def test_non_integer_counts_are_rejected(value: object) -> None:
    with pytest.raises(TypeError):
        jokers(value)  # type: ignore[arg-type]


def test_invalid_count_is_a_value_error() -> None:
    assert issubclass(InvalidCount, ValueError)


def test_named_steps_describe_themselves() -> None:
    assert AddJokers(2).describe() == "jokers:2"
    assert Repeat(4).describe() == "decks:4"
    assert default_sort.describe() == "sort:suit"
    assert sort(by_rank_then_by_suit).describe() == "sort:rank"
    assert shuffle.describe() == "shuffle"
    assert FilterOut(lambda card: False, "heart").describe() == "exclude:heart"
    assert isinstance(default_sort, SortBy)


def test_labels_name_caller_supplied_steps() -> None:
    assert filter_cards(lambda card: False).label == "exclude:custom"
    assert shuffled(random.Random(1)).label == "shuffle:<Random>"
    assert Shuffle(seed=3).label == "shuffle:3"
