"""Settings read from the environment (and a ``.env`` file, if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from unohand.engine.rules import DEFAULT_CARDS_PER_PLAYER
from unohand.orchestration.game import DEFAULT_TARGET_SCORE


def _int(environ: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    raw = environ.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Defaults for the CLI. Every field maps to an ``UNO_*`` variable."""

    players: tuple[str, ...] = ("A", "B")
    target_score: int = DEFAULT_TARGET_SCORE
    cards_per_player: int = DEFAULT_CARDS_PER_PLAYER
    seed: Optional[int] = None
    forget_uno_rate: float = 0.2
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (default: ``os.environ`` after loading ``.env``)."""
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        players = tuple(
            p.strip() for p in environ.get("UNO_PLAYERS", "").split(",") if p.strip()
        ) or cls.players

        raw_rate = environ.get("UNO_FORGET_UNO_RATE", "").strip()
        try:
            forget_uno_rate = float(raw_rate) if raw_rate else cls.forget_uno_rate
        except ValueError:
            raise ValueError(f"UNO_FORGET_UNO_RATE must be a number, got {raw_rate!r}") from None

        return cls(
            players=players,
            target_score=_int(environ, "UNO_TARGET_SCORE", cls.target_score),
            cards_per_player=_int(environ, "UNO_CARDS_PER_PLAYER", cls.cards_per_player),
            seed=_int(environ, "UNO_SEED", None),
            forget_uno_rate=forget_uno_rate,
            log_level=environ.get("UNO_LOG_LEVEL", cls.log_level).strip().upper() or cls.log_level,
        )
