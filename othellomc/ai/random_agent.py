"""Random agent for Othello games."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from othellomc.ai.base import Agent

if TYPE_CHECKING:
    from othellomc.game.board import Board, CellState, Coord


class RandomAgent(Agent):
    """Agent that picks uniformly among the legal moves."""

    def __init__(self, seed: int | None = None) -> None:
        self.rng = np.random.default_rng(seed)

    def get_move(self, board: Board, player: CellState, candidates: list[Coord]) -> Coord:
        return candidates[int(self.rng.integers(len(candidates)))]

    @property
    def name(self) -> str:
        return "Random"
