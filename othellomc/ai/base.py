"""Base class for Othello agents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from othellomc.game.board import Board, CellState, Coord


class Agent(ABC):
    """Base class for Othello agents.

    Agents receive the current position and the legal moves and return one
    of those moves. They are only asked to move when ``candidates`` is
    non-empty; passes are handled by the game.
    """

    @abstractmethod
    def get_move(self, board: Board, player: CellState, candidates: list[Coord]) -> Coord:
        """Select a move.

        Args:
            board: Current position. DO NOT modify this.
            player: Color we play.
            candidates: Legal moves for ``player`` in row-major order (non-empty).

        Returns:
            One of ``candidates``.
        """
        ...

    def reset(self) -> None:
        """Reset agent state for a new game.

        Default implementation does nothing.
        """
        return  # noqa: B027

    @property
    def name(self) -> str:
        """Human-readable name for this agent."""
        return self.__class__.__name__
