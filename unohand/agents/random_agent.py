"""Random agent - plays a random legal card, draws only when it has to."""

import random
from typing import Optional

from unohand.engine import Action, PlayerView
from unohand.engine.rules import PlayCard


class RandomAgent:
    """Agent that picks uniformly among legal plays.

    ``forget_uno_rate`` is the probability of not calling UNO when it should.
    """

    def __init__(self, name: str, seed: Optional[int] = None, forget_uno_rate: float = 0.0):
        if not 0.0 <= forget_uno_rate <= 1.0:
            raise ValueError(f"forget_uno_rate must be between 0 and 1, got {forget_uno_rate}")
        self._name = name
        self._rng = random.Random(seed)
        self._forget_uno_rate = forget_uno_rate

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_index: int,
    ) -> Action | None:
        if not legal_actions:
            return None

        # Prefer playing over drawing to make game progress
        play_actions = [a for a in legal_actions if isinstance(a, PlayCard)]
        if play_actions:
            return self._rng.choice(play_actions)
        return legal_actions[-1]

    def wants_to_say_uno(self, player_view: PlayerView) -> bool:
        return self._rng.random() >= self._forget_uno_rate

    def wants_to_accuse(self, player_view: PlayerView, accused: int) -> bool:
        # A wrong accusation costs nothing
        return player_view.num_cards_per_player[accused] == 1
