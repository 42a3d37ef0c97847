"""Game engine for one UNO hand."""

from unohand.engine.card import Card, CardType, Color
from unohand.engine.deck import create_initial_deck, deal_cards, shuffle_deck
from unohand.engine.hand import Hand, PlayerView
from unohand.engine.randomness import (
    Randomizer,
    Shuffler,
    seeded_randomizer,
    seeded_shuffler,
    standard_randomizer,
    standard_shuffler,
)
from unohand.engine.rules import (
    Action,
    PlayCard,
    DrawCard,
    can_play,
    can_play_any,
    card_score,
    catch_uno_failure,
    check_uno_failure,
    create_hand,
    draw,
    get_legal_actions,
    has_ended,
    play,
    say_uno,
    score,
    top_of_discard,
    winner,
)

__all__ = [
    "Card",
    "CardType",
    "Color",
    "create_initial_deck",
    "deal_cards",
    "shuffle_deck",
    "Hand",
    "PlayerView",
    "Randomizer",
    "Shuffler",
    "seeded_randomizer",
    "seeded_shuffler",
    "standard_randomizer",
    "standard_shuffler",
    "Action",
    "PlayCard",
    "DrawCard",
    "can_play",
    "can_play_any",
    "card_score",
    "catch_uno_failure",
    "check_uno_failure",
    "create_hand",
    "draw",
    "get_legal_actions",
    "has_ended",
    "play",
    "say_uno",
    "score",
    "top_of_discard",
    "winner",
]
