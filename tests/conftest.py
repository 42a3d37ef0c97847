"""Shared helpers for building rigged decks and hands."""

from collections import Counter
from typing import Optional, Sequence

import pytest

from unohand.engine import Card, CardType, Color, Hand, create_initial_deck


def num(color: Color, number: int) -> Card:
    return Card(CardType.NUMBERED, color, number)


def act(card_type: CardType, color: Color) -> Card:
    return Card(card_type, color)


WILD = Card(CardType.WILD)
WILD_DRAW = Card(CardType.WILD_DRAW)


def keep_order(cards):
    return list(cards)


def stacked(*cards: Card):
    """Shuffler that puts ``cards`` on top, in order, the first time it is called.

    Later calls (reshuffles, recycling) leave the pile as it is.
    """
    calls = []

    def shuffle(pile):
        pile = list(pile)
        if calls:
            return pile
        calls.append(True)
        for card in cards:
            pile.remove(card)
        return list(cards) + pile

    return shuffle


def deal(hands: Sequence[Sequence[Card]], top: Card):
    """Shuffler that deals ``hands`` seat by seat and turns up ``top``."""
    return stacked(*[card for cards in hands for card in cards], top)


def make_hand(
    hands: Sequence[Sequence[Card]],
    top: Card,
    current_color: Optional[Color] = None,
    player_in_turn: int = 0,
    direction: int = 1,
    players: Optional[Sequence[str]] = None,
) -> Hand:
    """Build a hand mid-round. The draw pile holds the rest of the deck in catalog order."""
    used = Counter(card for cards in hands for card in cards)
    used[top.reset()] += 1
    draw_pile = []
    for card in create_initial_deck():
        if used[card]:
            used[card] -= 1
        else:
            draw_pile.append(card)
    players = tuple(players or "ABCDEFGHIJ"[: len(hands)])
    return Hand(
        players=players,
        dealer=0,
        player_in_turn=player_in_turn,
        hands=tuple(tuple(cards) for cards in hands),
        draw_pile=tuple(draw_pile),
        discard_pile=(top,),
        direction=direction,
        current_color=current_color or top.color,
        uno_calls=(False,) * len(hands),
        shuffler=keep_order,
    )


@pytest.fixture
def fillers():
    """Distinct-enough green and blue numbered cards for padding hands."""
    return [num(color, n) for color in (Color.GREEN, Color.BLUE) for n in range(1, 10) for _ in range(2)]
