"""Unit tests for cards, the deck and randomness helpers."""

from collections import Counter

import pytest

from unohand.engine import Card, CardType, Color, create_initial_deck, deal_cards, shuffle_deck
from unohand.engine.deck import (
    DECK_SIZE,
    deal_card,
    filter_deck,
    is_colored_card,
    is_numbered_card,
    is_wild_card,
)
from unohand.engine.randomness import seeded_randomizer, seeded_shuffler, standard_shuffler


def test_create_deck_size() -> None:
    assert len(create_initial_deck()) == DECK_SIZE == 108


def test_create_deck_composition() -> None:
    counts = Counter(create_initial_deck())
    for color in Color:
        assert counts[Card(CardType.NUMBERED, color, 0)] == 1
        for number in range(1, 10):
            assert counts[Card(CardType.NUMBERED, color, number)] == 2
        for card_type in (CardType.SKIP, CardType.REVERSE, CardType.DRAW):
            assert counts[Card(card_type, color)] == 2
    assert counts[Card(CardType.WILD)] == 4
    assert counts[Card(CardType.WILD_DRAW)] == 4


def test_shuffle_is_permutation() -> None:
    deck = create_initial_deck()
    shuffled = shuffle_deck(deck, seeded_shuffler(3))
    assert Counter(shuffled) == Counter(deck)
    assert shuffled != deck


def test_shuffle_reproducible() -> None:
    deck = create_initial_deck()
    assert shuffle_deck(deck, seeded_shuffler(123)) == shuffle_deck(deck, seeded_shuffler(123))
    assert shuffle_deck(deck, seeded_shuffler(123)) != shuffle_deck(deck, seeded_shuffler(124))


def test_standard_shuffler_keeps_cards() -> None:
    deck = create_initial_deck()
    assert Counter(shuffle_deck(deck, standard_shuffler)) == Counter(deck)


def test_shuffle_rejects_lossy_shuffler() -> None:
    with pytest.raises(ValueError, match="Shuffler returned"):
        shuffle_deck(create_initial_deck(), lambda cards: list(cards)[1:])


def test_deal_cards_splits_pile() -> None:
    deck = create_initial_deck()
    dealt, rest = deal_cards(deck, 7)
    assert dealt == deck[:7]
    assert rest == deck[7:]


def test_deal_cards_short_pile() -> None:
    pile = create_initial_deck()[:3]
    dealt, rest = deal_cards(pile, 5)
    assert len(dealt) == 3
    assert rest == ()


def test_deal_card() -> None:
    pile = create_initial_deck()[:2]
    card, rest = deal_card(pile)
    assert card == pile[0]
    assert rest == pile[1:]
    assert deal_card(()) == (None, ())


def test_deck_predicates() -> None:
    deck = create_initial_deck()
    assert len(filter_deck(deck, is_wild_card)) == 8
    assert len(filter_deck(deck, is_colored_card)) == 100
    assert len(filter_deck(deck, is_numbered_card)) == 76


def test_seeded_randomizer_in_range() -> None:
    first, second = seeded_randomizer(9), seeded_randomizer(9)
    values = [first(4) for _ in range(50)]
    assert all(0 <= v < 4 for v in values)
    assert values == [second(4) for _ in range(50)]


class TestCard:
    def test_numbered_needs_number(self) -> None:
        with pytest.raises(ValueError, match="Invalid card number"):
            Card(CardType.NUMBERED, Color.RED)
        with pytest.raises(ValueError, match="Invalid card number"):
            Card(CardType.NUMBERED, Color.RED, 10)

    def test_action_card_needs_color(self) -> None:
        with pytest.raises(ValueError, match="must have a color"):
            Card(CardType.SKIP)

    def test_only_numbered_cards_have_numbers(self) -> None:
        with pytest.raises(ValueError, match="Only numbered cards"):
            Card(CardType.DRAW, Color.BLUE, 2)

    def test_wild_color_round_trip(self) -> None:
        wild = Card(CardType.WILD_DRAW)
        played = wild.with_color(Color.GREEN)
        assert played.color is Color.GREEN
        assert played.reset() == wild
        assert Card(CardType.SKIP, Color.RED).reset() == Card(CardType.SKIP, Color.RED)

    def test_cannot_color_colored_card(self) -> None:
        with pytest.raises(ValueError):
            Card(CardType.REVERSE, Color.RED).with_color(Color.BLUE)

    def test_str(self) -> None:
        assert str(Card(CardType.NUMBERED, Color.RED, 5)) == "red_5"
        assert str(Card(CardType.SKIP, Color.BLUE)) == "blue_skip"
        assert str(Card(CardType.WILD_DRAW)) == "wild_draw"
        assert str(Card(CardType.WILD, Color.YELLOW)) == "yellow_wild"
