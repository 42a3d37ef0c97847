"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from unohand.config import Settings

app = typer.Typer(help="Simulate UNO matches between random agents")


def _settings() -> Settings:
    try:
        return Settings.from_env()
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level)
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level: {level}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _build_agents(
    players: Optional[str],
    settings: Settings,
    seed: Optional[int],
    forget_uno_rate: float,
) -> dict[str, "RandomAgent"]:
    from unohand.agents.random_agent import RandomAgent

    names = (
        [p.strip() for p in players.split(",") if p.strip()]
        if players
        else list(settings.players)
    )
    if len(set(names)) != len(names):
        raise typer.BadParameter(f"Player names must be unique: {', '.join(names)}")
    try:
        return {
            name: RandomAgent(name, seed=None if seed is None else seed + i, forget_uno_rate=forget_uno_rate)
            for i, name in enumerate(names)
        }
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


@app.command()
def play(
    players: Optional[str] = typer.Option(
        None,
        "--players",
        "-p",
        help="Comma-separated player names (default: UNO_PLAYERS or A,B)",
    ),
    target_score: Optional[int] = typer.Option(None, "--target-score", "-t", help="Points needed to win"),
    cards_per_player: Optional[int] = typer.Option(None, "--cards-per-player", "-c", help="Cards dealt per hand"),
    forget_uno_rate: Optional[float] = typer.Option(
        None, "--forget-uno-rate", help="Chance an agent forgets to call UNO"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print each hand's history"),
) -> None:
    """Run a single UNO match."""
    from unohand.engine.errors import UnoError
    from unohand.engine.rules import score, winner
    from unohand.orchestration.match_runner import MatchRunner

    settings = _settings()
    _configure_logging(settings.log_level)
    seed = seed if seed is not None else settings.seed
    agents = _build_agents(
        players,
        settings,
        seed,
        forget_uno_rate if forget_uno_rate is not None else settings.forget_uno_rate,
    )

    def report(hand) -> None:
        typer.echo("\n".join(hand.history))
        typer.echo(f"-> {hand.players[winner(hand)]} scores {score(hand)}\n")

    runner = MatchRunner(
        agents,
        seed=seed,
        target_score=target_score if target_score is not None else settings.target_score,
        cards_per_player=cards_per_player if cards_per_player is not None else settings.cards_per_player,
        on_hand_end=report if verbose else None,
    )
    try:
        result = runner.run()
    except UnoError as e:
        raise typer.BadParameter(str(e)) from e

    typer.echo(f"Winner: {result.winner or 'None (abandoned)'}")
    typer.echo(f"Hands: {result.hands_played}")
    typer.echo(f"Actions: {result.num_actions}")
    for name, points in sorted(result.scores.items(), key=lambda x: -x[1]):
        typer.echo(f"  {name}: {points}")


@app.command()
def tournament(
    players: Optional[str] = typer.Option(None, "--players", "-p", help="Comma-separated player names"),
    matches: int = typer.Option(100, "--matches", "-g", help="Number of matches"),
    target_score: Optional[int] = typer.Option(None, "--target-score", "-t", help="Points needed to win"),
    forget_uno_rate: Optional[float] = typer.Option(
        None, "--forget-uno-rate", help="Chance an agent forgets to call UNO"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Run a tournament."""
    from unohand.engine.errors import UnoError
    from unohand.orchestration.tournament import run_tournament

    settings = _settings()
    _configure_logging(settings.log_level)
    seed = seed if seed is not None else settings.seed
    agents = _build_agents(
        players,
        settings,
        seed,
        forget_uno_rate if forget_uno_rate is not None else settings.forget_uno_rate,
    )
    try:
        wins = run_tournament(
            agents,
            num_matches=matches,
            seed=seed,
            target_score=target_score if target_score is not None else settings.target_score,
            cards_per_player=settings.cards_per_player,
        )
    except UnoError as e:
        raise typer.BadParameter(str(e)) from e

    typer.echo("Tournament results:")
    for name in agents:
        typer.echo(f"  {name}: {wins.get(name, 0)} wins")


if __name__ == "__main__":
    app()
