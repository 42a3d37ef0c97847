"""Deck creation, shuffling and dealing.

Piles are tuples of cards with position 0 on top: the next card to deal, or
the most recently discarded one.
"""

from typing import Callable, Optional, Tuple

from unohand.engine.card import ACTION_TYPES, Card, CardType, Color
from unohand.engine.randomness import Shuffler, standard_shuffler

Pile = Tuple[Card, ...]

DECK_SIZE = 108


def create_initial_deck() -> Pile:
    """Create a standard 108-card UNO deck, unshuffled.

    - 4 colors × (one 0, two each of 1-9): 76 cards
    - 4 colors × two each of Skip, Reverse, Draw: 24 cards
    - 4 Wild, 4 Wild Draw: 8 cards
    """
    cards = []

    for color in Color:
        cards.append(Card(CardType.NUMBERED, color, 0))
        for number in range(1, 10):
            cards.append(Card(CardType.NUMBERED, color, number))
            cards.append(Card(CardType.NUMBERED, color, number))

    for color in Color:
        for card_type in ACTION_TYPES:
            cards.append(Card(card_type, color))
            cards.append(Card(card_type, color))

    for card_type in (CardType.WILD, CardType.WILD_DRAW):
        cards.extend(Card(card_type) for _ in range(4))

    return tuple(cards)


def shuffle_deck(pile: Pile, shuffler: Shuffler = standard_shuffler) -> Pile:
    """Return a permutation of ``pile`` produced by ``shuffler``."""
    shuffled = tuple(shuffler(list(pile)))
    if len(shuffled) != len(pile):
        raise ValueError(
            f"Shuffler returned {len(shuffled)} cards for a pile of {len(pile)}"
        )
    return shuffled


def deal_card(pile: Pile) -> Tuple[Optional[Card], Pile]:
    if not pile:
        return None, pile
    return pile[0], pile[1:]


def deal_cards(pile: Pile, count: int) -> Tuple[Pile, Pile]:
    """Split off the first ``count`` cards; fewer when the pile runs short."""
    count = max(count, 0)
    return pile[:count], pile[count:]


def filter_deck(pile: Pile, predicate: Callable[[Card], bool]) -> Pile:
    return tuple(card for card in pile if predicate(card))


def is_numbered_card(card: Card) -> bool:
    return card.type is CardType.NUMBERED and card.number is not None


def is_colored_card(card: Card) -> bool:
    return not card.is_wild


def is_wild_card(card: Card) -> bool:
    return card.is_wild
