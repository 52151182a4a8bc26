from typing import Optional
from .agent import Agent
from .simple import RandomAgent
from .human import HumanAgent
from .minimax import MinimaxAgent

AGENT_NAMES = ["human", "random", "minimax"]


def make_agent(name: str, seed: Optional[int] = None) -> Agent:
    """ build an agent from its command-line name; seed only applies to random agents """
    key = name.lower()
    if key == "human":
        return HumanAgent()
    elif key == "random":
        return RandomAgent(seed=seed)
    elif key == "minimax":
        return MinimaxAgent()
    raise ValueError(f"Invalid agent choice: {name}")


__all__ = ["Agent", "RandomAgent", "HumanAgent", "MinimaxAgent", "AGENT_NAMES", "make_agent"]
