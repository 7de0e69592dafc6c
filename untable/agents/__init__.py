"""Built-in agents."""

from untable.agents.human_agent import HumanAgent
from untable.agents.llm_agent import LLMAgent
from untable.agents.scripted_agent import ScriptedAgent, choose_color_by_hand

__all__ = ["HumanAgent", "LLMAgent", "ScriptedAgent", "choose_color_by_hand"]
