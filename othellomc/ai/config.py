"""Agent configuration with discriminated union pattern.

Each config type inherits from AgentConfigBase and implements ``build()``.
Pydantic dispatches on the ``variant`` field.

Example YAML:
    agents:
      random:
        variant: random
      greedy:
        variant: greedy
      mc_strong:
        variant: montecarlo
        search:
          level: strong
          budget:
            max_iterations: 200
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import Field

from othellomc.config.base import StrictBaseModel
from othellomc.mcts.config import SearchConfig

if TYPE_CHECKING:
    from othellomc.ai.base import Agent


class AgentConfigBase(StrictBaseModel):
    """Base class for agent configurations."""

    @abstractmethod
    def build(self, seed: int | None = None) -> Agent:
        """Build the agent from this configuration.

        Args:
            seed: Seed for the agent's random source, if it has one.
        """
        ...


class RandomAgentConfig(AgentConfigBase):
    """Configuration for random agent."""

    variant: Literal["random"] = "random"

    def build(self, seed: int | None = None) -> Agent:
        from othellomc.ai.random_agent import RandomAgent

        return RandomAgent(seed=seed)


class GreedyAgentConfig(AgentConfigBase):
    """Configuration for greedy agent."""

    variant: Literal["greedy"] = "greedy"

    def build(self, seed: int | None = None) -> Agent:
        from othellomc.ai.greedy_agent import GreedyAgent

        return GreedyAgent()


class MonteCarloAgentConfig(AgentConfigBase):
    """Configuration for Monte-Carlo agent."""

    variant: Literal["montecarlo"] = "montecarlo"
    search: SearchConfig = Field(default_factory=SearchConfig)

    def build(self, seed: int | None = None) -> Agent:
        from othellomc.ai.montecarlo_agent import MonteCarloAgent

        return MonteCarloAgent(self.search, seed=seed)


AgentConfig = Annotated[
    RandomAgentConfig | GreedyAgentConfig | MonteCarloAgentConfig,
    Field(discriminator="variant"),
]
