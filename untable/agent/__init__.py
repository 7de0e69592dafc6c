"""Agent interface."""

from untable.agent.protocol import AgentProtocol

__all__ = ["AgentProtocol"]
