"""Tournament - run many matches and aggregate results."""

import random
from collections import defaultdict
from typing import Any

from unohand.engine.rules import DEFAULT_CARDS_PER_PLAYER
from unohand.orchestration.game import DEFAULT_TARGET_SCORE
from unohand.orchestration.match_runner import MatchRunner


def run_tournament(
    agents: dict[str, Any],
    num_matches: int = 100,
    seed: int | None = None,
    target_score: int = DEFAULT_TARGET_SCORE,
    cards_per_player: int = DEFAULT_CARDS_PER_PLAYER,
) -> dict[str, int]:
    """Run ``num_matches`` matches between the same agents.

    Seating is reversed every other match so nobody always sits first.

    Returns:
        Dict mapping player name to number of matches won.
    """
    names = list(agents.keys())
    wins: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for m in range(num_matches):
        order = names if m % 2 == 0 else list(reversed(names))
        ordered_agents = {name: agents[name] for name in order}
        runner = MatchRunner(
            ordered_agents,
            seed=rng.randint(0, 2**31 - 1),
            target_score=target_score,
            cards_per_player=cards_per_player,
        )
        result = runner.run()
        if result.winner:
            wins[result.winner] += 1

    return dict(wins)
