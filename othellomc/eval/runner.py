"""Multi-game evaluation runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import Field

from othellomc.ai.config import AgentConfig  # noqa: TC001
from othellomc.config.base import StrictBaseModel
from othellomc.eval.game import GameResult, play_game
from othellomc.game.board import CellState

if TYPE_CHECKING:
    from othellomc.ai.base import Agent

logger = logging.getLogger(__name__)


@dataclass
class EvalResult:
    """Aggregated results from multiple games.

    Attributes:
        n_games: Total games played.
        agent1_wins: Games won by agent 1.
        agent2_wins: Games won by agent 2.
        draws: Games ending in a draw.
        agent1_avg_stones: Average final stone count for agent 1.
        agent2_avg_stones: Average final stone count for agent 2.
        games: List of individual game results.
    """

    n_games: int
    agent1_wins: int
    agent2_wins: int
    draws: int
    agent1_avg_stones: float
    agent2_avg_stones: float
    games: list[GameResult]

    @property
    def agent1_win_rate(self) -> float:
        """Win rate for agent 1 (excluding draws)."""
        decided = self.agent1_wins + self.agent2_wins
        return self.agent1_wins / decided if decided > 0 else 0.5

    def summary(self, agent1_name: str = "Agent1", agent2_name: str = "Agent2") -> str:
        """Human-readable summary."""
        lines = [
            f"Evaluation: {agent1_name} vs {agent2_name}",
            f"Games: {self.n_games}",
            f"{agent1_name} wins: {self.agent1_wins} ({self.agent1_wins / self.n_games:.1%})",
            f"{agent2_name} wins: {self.agent2_wins} ({self.agent2_wins / self.n_games:.1%})",
            f"Draws: {self.draws} ({self.draws / self.n_games:.1%})",
            f"Avg stones: {agent1_name}={self.agent1_avg_stones:.1f}, "
            f"{agent2_name}={self.agent2_avg_stones:.1f}",
        ]
        return "\n".join(lines)


def evaluate(
    agent1: Agent,
    agent2: Agent,
    n_games: int = 10,
    *,
    alternate_sides: bool = True,
) -> EvalResult:
    """Evaluate two agents across multiple games.

    Args:
        agent1: First agent.
        agent2: Second agent.
        n_games: Number of games to play. Must be positive.
        alternate_sides: If True, agents swap colors every other game
            (agent 1 plays black in even-indexed games).

    Returns:
        EvalResult with aggregated statistics.
    """
    if n_games <= 0:
        raise ValueError(f"n_games must be positive, got {n_games}")

    games: list[GameResult] = []
    agent1_wins = 0
    agent2_wins = 0
    draws = 0
    agent1_stones = 0
    agent2_stones = 0

    for i in range(n_games):
        agent1_color = CellState.WHITE if alternate_sides and i % 2 == 1 else CellState.BLACK
        if agent1_color == CellState.BLACK:
            result = play_game(agent1, agent2)
            mine, theirs = result.black_count, result.white_count
        else:
            result = play_game(agent2, agent1)
            mine, theirs = result.white_count, result.black_count
        games.append(result)

        agent1_stones += mine
        agent2_stones += theirs
        if result.winner is None:
            draws += 1
            outcome = "Draw"
        elif result.winner == agent1_color:
            agent1_wins += 1
            outcome = agent1.name
        else:
            agent2_wins += 1
            outcome = agent2.name

        logger.info(
            f"Game {i + 1}/{n_games}: {agent1.name}({agent1_color.name.lower()}) "
            f"{mine}-{theirs} in {result.moves} moves - {outcome}"
        )

    return EvalResult(
        n_games=n_games,
        agent1_wins=agent1_wins,
        agent2_wins=agent2_wins,
        draws=draws,
        agent1_avg_stones=agent1_stones / n_games,
        agent2_avg_stones=agent2_stones / n_games,
        games=games,
    )


class MatchConfig(StrictBaseModel):
    """Head-to-head match configuration.

    Example YAML:
        agent1:
          variant: montecarlo
          search:
            level: strong
        agent2:
          variant: random
        n_games: 10
    """

    agent1: AgentConfig
    agent2: AgentConfig
    n_games: int = Field(default=10, gt=0)
    alternate_sides: bool = True
    seed: int = 0


def run_match(config: MatchConfig) -> tuple[EvalResult, Agent, Agent]:
    """Build both agents from ``config`` and evaluate them against each other."""
    agent1 = config.agent1.build(seed=config.seed)
    agent2 = config.agent2.build(seed=config.seed + 1)
    result = evaluate(agent1, agent2, config.n_games, alternate_sides=config.alternate_sides)
    return result, agent1, agent2
