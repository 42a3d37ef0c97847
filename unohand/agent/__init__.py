"""Agent interface."""

from unohand.agent.protocol import AgentProtocol

__all__ = ["AgentProtocol"]
