"""Hand state for one round of UNO."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from unohand.engine.card import Card, Color
from unohand.engine.deck import Pile
from unohand.engine.randomness import Shuffler, standard_shuffler


@dataclass(frozen=True)
class Hand:
    """Immutable state of one round, from the deal until someone runs out of cards.

    Every rule in ``unohand.engine.rules`` takes a Hand and returns a new one.
    """

    players: Tuple[str, ...]
    dealer: int
    player_in_turn: Optional[int]  # None once the round is over
    hands: Tuple[Tuple[Card, ...], ...]  # per seat, insertion order
    draw_pile: Pile  # top is first
    discard_pile: Pile  # top is first, never empty
    direction: int  # 1 = clockwise, -1 = counter-clockwise
    current_color: Color
    uno_calls: Tuple[bool, ...]
    previous_player: Optional[int] = None
    is_accusation_window_open: bool = False
    shuffler: Shuffler = field(default=standard_shuffler, compare=False, repr=False)
    history: Tuple[str, ...] = ()  # Log of events

    @property
    def player_count(self) -> int:
        return len(self.players)

    def top_discard(self) -> Card:
        """Return the top card on the discard pile."""
        return self.discard_pile[0]

    def total_cards(self) -> int:
        return (
            sum(len(cards) for cards in self.hands)
            + len(self.draw_pile)
            + len(self.discard_pile)
        )


@dataclass
class PlayerView:
    """Filtered hand state visible to a single seat.

    Contains only that seat's cards and public info.
    """

    player_index: int
    players: Tuple[str, ...]
    my_hand: Tuple[Card, ...]
    top_discard: Card
    current_color: Color
    player_in_turn: Optional[int]
    direction: int
    num_cards_per_player: Tuple[int, ...]
    uno_calls: Tuple[bool, ...]
    previous_player: Optional[int]
    is_accusation_window_open: bool
    draw_pile_size: int
    history: Tuple[str, ...]  # Recent events

    @classmethod
    def from_state(cls, hand: Hand, player_index: int) -> "PlayerView":
        """Create a view of ``hand`` for one seat, hiding the other seats' cards."""
        return cls(
            player_index=player_index,
            players=hand.players,
            my_hand=hand.hands[player_index],
            top_discard=hand.top_discard(),
            current_color=hand.current_color,
            player_in_turn=hand.player_in_turn,
            direction=hand.direction,
            num_cards_per_player=tuple(len(cards) for cards in hand.hands),
            uno_calls=hand.uno_calls,
            previous_player=hand.previous_player,
            is_accusation_window_open=hand.is_accusation_window_open,
            draw_pile_size=len(hand.draw_pile),
            history=hand.history[-10:],  # Last 10 events
        )
