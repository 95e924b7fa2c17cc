"""Built-in agents."""

from taki.agents.human_agent import HumanAgent
from taki.agents.random_agent import RandomAgent

__all__ = ["HumanAgent", "RandomAgent"]
