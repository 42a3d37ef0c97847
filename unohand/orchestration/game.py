"""Match state: a sequence of hands played until someone reaches the target score."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple

from unohand.engine import rules
from unohand.engine.card import Color
from unohand.engine.errors import (
    InvalidPlayerCount,
    InvalidTargetScore,
    NoActiveHand,
    NotPlayersTurn,
    PlayerIndexOutOfBounds,
)
from unohand.engine.hand import Hand
from unohand.engine.randomness import (
    Randomizer,
    Shuffler,
    standard_randomizer,
    standard_shuffler,
)

logger = logging.getLogger(__name__)

DEFAULT_TARGET_SCORE = 500


@dataclass(frozen=True)
class Game:
    """Immutable match state. ``current_hand`` is None once the match is won.

    ``last_hand`` keeps the most recently finished hand for reporting.
    """

    players: Tuple[str, ...]
    scores: Tuple[int, ...]
    target_score: int
    dealer: int
    current_hand: Optional[Hand]
    winner: Optional[int] = None
    cards_per_player: int = rules.DEFAULT_CARDS_PER_PLAYER
    shuffler: Shuffler = field(default=standard_shuffler, compare=False, repr=False)
    hands_played: int = 0
    last_hand: Optional[Hand] = field(default=None, compare=False, repr=False)


def create_game(
    players: Sequence[str] = ("A", "B"),
    target_score: int = DEFAULT_TARGET_SCORE,
    randomizer: Randomizer = standard_randomizer,
    shuffler: Shuffler = standard_shuffler,
    cards_per_player: int = rules.DEFAULT_CARDS_PER_PLAYER,
) -> Game:
    """Pick a random first dealer and deal the first hand."""
    players = tuple(players)
    if target_score <= 0:
        raise InvalidTargetScore(f"Target score must be greater than 0, got {target_score}")
    if not rules.MIN_PLAYERS <= len(players) <= rules.MAX_PLAYERS:
        raise InvalidPlayerCount(
            f"A game needs {rules.MIN_PLAYERS} to {rules.MAX_PLAYERS} players, got {len(players)}"
        )

    dealer = randomizer(len(players))
    logger.debug("New game for %s, %s deals first", ", ".join(players), players[dealer])
    return Game(
        players=players,
        scores=(0,) * len(players),
        target_score=target_score,
        dealer=dealer,
        current_hand=rules.create_hand(players, dealer, shuffler, cards_per_player),
        cards_per_player=cards_per_player,
        shuffler=shuffler,
    )


def _active_hand(game: Game) -> Hand:
    if game.current_hand is None:
        raise NoActiveHand("No active hand")
    return game.current_hand


def _check_turn(hand: Hand, player_index: int) -> None:
    if hand.player_in_turn != player_index:
        raise NotPlayersTurn(f"It is not player {player_index}'s turn")


def _settle(game: Game, hand: Hand) -> Game:
    game = replace(game, current_hand=hand)
    if rules.has_ended(hand):
        return end_hand(game)
    return game


def start_new_hand(game: Game) -> Game:
    """Deal the next hand with the dealer moved one seat to the left."""
    dealer = (game.dealer + 1) % len(game.players)
    return replace(
        game,
        dealer=dealer,
        current_hand=rules.create_hand(
            game.players, dealer, game.shuffler, game.cards_per_player
        ),
    )


def end_hand(game: Game) -> Game:
    """Score the finished hand and either end the match or deal the next hand."""
    hand = _active_hand(game)
    hand_winner = rules.winner(hand)
    if hand_winner is None:
        raise NoActiveHand("Current hand has not ended")

    points = rules.score(hand)
    scores = list(game.scores)
    scores[hand_winner] += points
    game = replace(
        game,
        scores=tuple(scores),
        hands_played=game.hands_played + 1,
        last_hand=hand,
    )
    logger.debug(
        "%s won hand %d for %d points (total %d)",
        game.players[hand_winner],
        game.hands_played,
        points,
        scores[hand_winner],
    )

    if scores[hand_winner] >= game.target_score:
        logger.debug("%s won the game", game.players[hand_winner])
        return replace(game, winner=hand_winner, current_hand=None)
    return start_new_hand(game)


def play(
    game: Game,
    player_index: int,
    card_index: int,
    color: Optional[Color] = None,
) -> Game:
    hand = _active_hand(game)
    _check_turn(hand, player_index)
    return _settle(game, rules.play(hand, card_index, color))


def draw(game: Game, player_index: int) -> Game:
    hand = _active_hand(game)
    _check_turn(hand, player_index)
    return _settle(game, rules.draw(hand))


def say_uno(game: Game, player_index: int) -> Game:
    hand = _active_hand(game)
    return replace(game, current_hand=rules.say_uno(hand, player_index))


def catch_uno_failure(game: Game, accuser: int, accused: int) -> Game:
    hand = _active_hand(game)
    caught = rules.catch_uno_failure(hand, accuser, accused)
    if caught is hand:
        return game
    return replace(game, current_hand=caught)


def get_player(game: Game, player_index: int) -> str:
    if not is_valid_player(game, player_index):
        raise PlayerIndexOutOfBounds(f"Player index {player_index} out of bounds")
    return game.players[player_index]


def get_score(game: Game, player_index: int) -> int:
    if not is_valid_player(game, player_index):
        raise PlayerIndexOutOfBounds(f"Player index {player_index} out of bounds")
    return game.scores[player_index]


def is_game_over(game: Game) -> bool:
    return game.winner is not None


def is_valid_player(game: Game, player_index: int) -> bool:
    return 0 <= player_index < len(game.players)


def is_player_turn(game: Game, player_index: int) -> bool:
    return game.current_hand is not None and game.current_hand.player_in_turn == player_index


def get_winning_player(game: Game) -> Optional[str]:
    return game.players[game.winner] if game.winner is not None else None


def get_leading_player(game: Game) -> str:
    """Name of the player with the highest score; the lowest seat wins ties."""
    best = max(game.scores)
    return game.players[game.scores.index(best)]


def get_player_ranking(game: Game) -> list[str]:
    ranked = sorted(zip(game.players, game.scores), key=lambda entry: -entry[1])
    return [name for name, _ in ranked]
