"""Agent protocol - interface that seats in a simulated match implement."""

from typing import Protocol

from unohand.engine import Action, PlayerView


class AgentProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_index: int,
    ) -> Action | None:
        """Choose an action given the player view and legal actions.

        Args:
            player_view: Filtered view with only this seat's cards and public info.
            legal_actions: List of valid actions to choose from.
            player_index: This agent's seat.

        Returns:
            One of the legal actions, or None to draw.
        """
        ...

    def wants_to_say_uno(self, player_view: PlayerView) -> bool:
        """Called before this seat plays while holding two cards."""
        ...

    def wants_to_accuse(self, player_view: PlayerView, accused: int) -> bool:
        """Called after another seat's play while the accusation window is open."""
        ...
