"""Built-in agents."""

from unohand.agents.random_agent import RandomAgent

__all__ = ["RandomAgent"]
