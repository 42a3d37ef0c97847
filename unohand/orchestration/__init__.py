"""Match orchestration."""

from unohand.orchestration.game import Game, create_game
from unohand.orchestration.match_runner import MatchResult, MatchRunner
from unohand.orchestration.tournament import run_tournament

__all__ = ["Game", "create_game", "MatchResult", "MatchRunner", "run_tournament"]
