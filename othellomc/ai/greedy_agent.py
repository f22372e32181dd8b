"""Greedy agent that maximizes immediate captures."""

from __future__ import annotations

from typing import TYPE_CHECKING

from othellomc.ai.base import Agent
from othellomc.game.rules import reverse_stones

if TYPE_CHECKING:
    from othellomc.game.board import Board, CellState, Coord


class GreedyAgent(Agent):
    """Agent that always plays the move flipping the most stones.

    Tie-breaking: the first such move in row-major order.
    """

    def get_move(self, board: Board, player: CellState, candidates: list[Coord]) -> Coord:
        return max(candidates, key=lambda c: reverse_stones(board, c, player, only_count=True))

    @property
    def name(self) -> str:
        return "Greedy"
