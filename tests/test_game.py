"""Unit tests for the match sequencer."""

import pytest

from unohand.engine import CardType, Color
from unohand.engine.errors import (
    InvalidPlayerCount,
    InvalidTargetScore,
    NoActiveHand,
    NotPlayersTurn,
    PlayerIndexOutOfBounds,
)
from unohand.orchestration import game as match

from conftest import WILD, act, deal, num


def _quick_win_game(target_score: int):
    """A (seat 0) can go out in two plays for 57 points; B dealt."""
    shuffler = deal(
        [[act(CardType.SKIP, Color.RED), num(Color.RED, 3)], [WILD, num(Color.RED, 7)]],
        num(Color.RED, 5),
    )
    return match.create_game(
        ["A", "B"],
        target_score=target_score,
        randomizer=lambda n: 1,
        shuffler=shuffler,
        cards_per_player=2,
    )


def test_create_game() -> None:
    game = _quick_win_game(500)
    assert game.players == ("A", "B")
    assert game.scores == (0, 0)
    assert game.dealer == 1
    assert game.current_hand.dealer == 1
    assert game.current_hand.player_in_turn == 0
    assert not match.is_game_over(game)


def test_invalid_target_score() -> None:
    with pytest.raises(InvalidTargetScore):
        match.create_game(["A", "B"], target_score=0)


def test_invalid_player_count() -> None:
    with pytest.raises(InvalidPlayerCount):
        match.create_game(["A"])
    with pytest.raises(InvalidPlayerCount):
        match.create_game([str(i) for i in range(11)])


def test_not_players_turn() -> None:
    game = _quick_win_game(500)
    with pytest.raises(NotPlayersTurn):
        match.play(game, 1, 0)
    with pytest.raises(NotPlayersTurn):
        match.draw(game, 1)


def test_hand_end_scores_and_rotates_dealer() -> None:
    game = _quick_win_game(500)
    game = match.say_uno(game, 0)
    game = match.play(game, 0, 0)
    game = match.play(game, 0, 0)

    assert game.scores == (57, 0)
    assert game.hands_played == 1
    assert game.dealer == 0
    assert game.current_hand.dealer == 0
    assert game.current_hand.player_in_turn is not None
    assert game.last_hand.hands[0] == ()
    assert not match.is_game_over(game)


def test_reaching_target_ends_match() -> None:
    game = _quick_win_game(50)
    game = match.play(game, 0, 0)
    game = match.play(game, 0, 0)

    assert match.is_game_over(game)
    assert game.winner == 0
    assert game.current_hand is None
    assert match.get_winning_player(game) == "A"
    with pytest.raises(NoActiveHand):
        match.draw(game, 0)
    with pytest.raises(NoActiveHand):
        match.say_uno(game, 0)


def test_catch_forwarded() -> None:
    shuffler = deal(
        [[num(Color.RED, 3), num(Color.RED, 4)], [num(Color.BLUE, 1), num(Color.BLUE, 2)]],
        num(Color.RED, 5),
    )
    game = match.create_game(["A", "B"], randomizer=lambda n: 1, shuffler=shuffler, cards_per_player=2)
    game = match.play(game, 0, 0)

    caught = match.catch_uno_failure(game, 1, 0)
    assert len(caught.current_hand.hands[0]) == 5
    assert match.catch_uno_failure(caught, 1, 0) is caught


def test_draw_forwarded() -> None:
    game = _quick_win_game(500)
    after = match.draw(game, 0)
    assert len(after.current_hand.hands[0]) == 3


def test_player_queries() -> None:
    game = _quick_win_game(500)
    assert match.get_player(game, 1) == "B"
    assert match.get_score(game, 0) == 0
    assert match.is_valid_player(game, 1)
    assert not match.is_valid_player(game, 2)
    assert match.is_player_turn(game, 0)
    assert not match.is_player_turn(game, 1)
    with pytest.raises(PlayerIndexOutOfBounds):
        match.get_player(game, 2)
    with pytest.raises(PlayerIndexOutOfBounds):
        match.get_score(game, -1)


def test_leader_and_ranking() -> None:
    game = _quick_win_game(500)
    game = match.play(game, 0, 0)
    game = match.play(game, 0, 0)
    assert match.get_leading_player(game) == "A"
    assert match.get_player_ranking(game) == ["A", "B"]
    assert match.get_winning_player(game) is None
