"""Single match runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Optional

from unohand.engine import PlayerView, get_legal_actions
from unohand.engine.randomness import seeded_randomizer, seeded_shuffler
from unohand.engine.rules import DEFAULT_CARDS_PER_PLAYER, DrawCard, PlayCard
from unohand.orchestration import game as match
from unohand.orchestration.game import DEFAULT_TARGET_SCORE, Game

if TYPE_CHECKING:
    from unohand.agent.protocol import AgentProtocol
    from unohand.engine.hand import Hand

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Result of a completed (or abandoned) match."""

    winner: Optional[str]
    scores: Dict[str, int]
    hands_played: int
    num_actions: int


class MatchRunner:
    """Runs a UNO match to completion, one action at a time.

    ``on_hand_end`` is called with each finished hand, e.g. to print its history.
    """

    def __init__(
        self,
        agents: dict[str, "AgentProtocol"],
        seed: Optional[int] = None,
        target_score: int = DEFAULT_TARGET_SCORE,
        cards_per_player: int = DEFAULT_CARDS_PER_PLAYER,
        max_actions: int = 10000,
        on_hand_end: Optional[Callable[["Hand"], None]] = None,
    ):
        self._agents = agents
        self._seed = seed
        self._target_score = target_score
        self._cards_per_player = cards_per_player
        self._max_actions = max_actions
        self._on_hand_end = on_hand_end

    def run(self) -> MatchResult:
        """Run the match and return the result."""
        names = list(self._agents.keys())
        state = match.create_game(
            names,
            target_score=self._target_score,
            randomizer=seeded_randomizer(self._seed),
            shuffler=seeded_shuffler(self._seed),
            cards_per_player=self._cards_per_player,
        )
        num_actions = 0

        while not match.is_game_over(state) and num_actions < self._max_actions:
            hands_played = state.hands_played
            state = self._take_turn(state, names)
            num_actions += 1
            if state.hands_played != hands_played:
                if self._on_hand_end is not None:
                    self._on_hand_end(state.last_hand)
            else:
                state = self._offer_accusations(state, names)

        if not match.is_game_over(state):
            logger.warning("Match abandoned after %d actions", num_actions)

        return MatchResult(
            winner=match.get_winning_player(state),
            scores=dict(zip(names, state.scores)),
            hands_played=state.hands_played,
            num_actions=num_actions,
        )

    def _take_turn(self, state: Game, names: list[str]) -> Game:
        hand = state.current_hand
        player = hand.player_in_turn
        agent = self._agents[names[player]]
        legal = get_legal_actions(hand)
        view = PlayerView.from_state(hand, player)
        action = agent.get_action(view, legal, player)

        if action is None:
            action = next(a for a in legal if isinstance(a, DrawCard))

        if isinstance(action, PlayCard):
            if len(hand.hands[player]) == 2 and agent.wants_to_say_uno(view):
                state = match.say_uno(state, player)
            return match.play(state, player, action.card_index, action.color)
        return match.draw(state, player)

    def _offer_accusations(self, state: Game, names: list[str]) -> Game:
        """Give every other seat, in seat order, one chance to catch a missed UNO."""
        hand = state.current_hand
        if not hand.is_accusation_window_open:
            return state
        accused = hand.previous_player
        for index, name in enumerate(names):
            if index == accused:
                continue
            view = PlayerView.from_state(hand, index)
            if self._agents[name].wants_to_accuse(view, accused):
                return match.catch_uno_failure(state, index, accused)
        return state
