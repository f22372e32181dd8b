"""Monte-Carlo agent for Othello games."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from othellomc.ai.base import Agent
from othellomc.mcts.config import SearchConfig
from othellomc.mcts.search import MonteCarloSearch

if TYPE_CHECKING:
    from othellomc.game.board import Board, CellState, Coord
    from othellomc.mcts.result import SearchResult


class MonteCarloAgent(Agent):
    """Agent that picks moves with the budgeted two-ply Monte-Carlo search.

    Attributes:
        config: Search configuration (budget, level, draw credit).
        last_result: SearchResult of the most recent decision, for display.
    """

    def __init__(self, config: SearchConfig | None = None, seed: int | None = None) -> None:
        """Initialize the agent.

        Args:
            config: Search configuration. Defaults to a strong search with the
                default budget.
            seed: Seed for the rollout random source.
        """
        self.config = config if config is not None else SearchConfig()
        self._search = MonteCarloSearch(self.config, np.random.default_rng(seed))
        self.last_result: SearchResult | None = None

    def get_move(self, board: Board, player: CellState, candidates: list[Coord]) -> Coord:
        self.last_result = self._search.search(board, player, candidates)
        return self.last_result.move

    def reset(self) -> None:
        self.last_result = None

    @property
    def name(self) -> str:
        budget = self.config.budget
        return f"MC-{self.config.level}({budget.max_iterations})"
