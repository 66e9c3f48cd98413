"""Agent modules."""

from .base_agent import BaseAgent
from .greedy_agent import GreedyAgent
from .human_agent import HumanAgent, MoveFormatError, parse_move
from ..registry import list_agents, register_agent

if "human" not in list_agents():
    register_agent("human", HumanAgent)
if "greedy" not in list_agents():
    register_agent("greedy", GreedyAgent)

__all__ = ["BaseAgent", "GreedyAgent", "HumanAgent", "MoveFormatError", "parse_move"]
