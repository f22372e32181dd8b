"""AI agents for Othello."""

from othellomc.ai.base import Agent
from othellomc.ai.config import (
    AgentConfig,
    AgentConfigBase,
    GreedyAgentConfig,
    MonteCarloAgentConfig,
    RandomAgentConfig,
)
from othellomc.ai.greedy_agent import GreedyAgent
from othellomc.ai.montecarlo_agent import MonteCarloAgent
from othellomc.ai.random_agent import RandomAgent

__all__ = [
    "Agent",
    "AgentConfig",
    "AgentConfigBase",
    "GreedyAgent",
    "GreedyAgentConfig",
    "MonteCarloAgent",
    "MonteCarloAgentConfig",
    "RandomAgent",
    "RandomAgentConfig",
]
