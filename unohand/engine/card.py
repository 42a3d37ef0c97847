"""Card, Color and CardType types for UNO."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"


class CardType(str, Enum):
    """Card kinds. Dispatch on these is always an exhaustive if/elif chain."""

    NUMBERED = "numbered"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW = "draw"
    WILD = "wild"
    WILD_DRAW = "wild_draw"


WILD_TYPES = (CardType.WILD, CardType.WILD_DRAW)
ACTION_TYPES = (CardType.SKIP, CardType.REVERSE, CardType.DRAW)


@dataclass(frozen=True)
class Card:
    """A UNO card.

    Numbered cards carry a color and a number 0-9. Skip, reverse and draw
    cards carry a color only. Wild cards are colorless in the deck and in
    players' hands; the copy put on the discard pile carries the color chosen
    by the player who played it.
    """

    type: CardType
    color: Optional[Color] = None
    number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.type is CardType.NUMBERED:
            if self.number is None or not 0 <= self.number <= 9:
                raise ValueError(f"Invalid card number: {self.number}")
        elif self.number is not None:
            raise ValueError(f"Only numbered cards have a number, got {self.type.value}")
        if self.type not in WILD_TYPES and self.color is None:
            raise ValueError("Non-wild cards must have a color")

    @property
    def is_wild(self) -> bool:
        return self.type in WILD_TYPES

    def with_color(self, color: Color) -> "Card":
        """Return the discard-pile copy of a wild card with its chosen color."""
        if not self.is_wild:
            raise ValueError(f"Cannot assign a color to {self}")
        return replace(self, color=color)

    def reset(self) -> "Card":
        """Return the card as it sits in the deck (wild cards lose their color)."""
        if self.is_wild and self.color is not None:
            return replace(self, color=None)
        return self

    def __str__(self) -> str:
        if self.type is CardType.NUMBERED:
            return f"{self.color.value}_{self.number}"
        if self.color is None:
            return self.type.value
        return f"{self.color.value}_{self.type.value}"
