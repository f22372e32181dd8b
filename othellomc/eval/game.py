"""Single game execution for Othello agents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from othellomc.game.board import INITIAL_PLAYER, CellState
from othellomc.game.state import GameState

if TYPE_CHECKING:
    from othellomc.ai.base import Agent
    from othellomc.game.board import Board


@dataclass
class GameResult:
    """Result of a single game.

    Attributes:
        black_count: Black stones at the end.
        white_count: White stones at the end.
        moves: Stones placed during the game.
        passes: Forced passes during the game.
        winner: Winning color, or None for a draw.
    """

    black_count: int
    white_count: int
    moves: int
    passes: int
    winner: CellState | None


def play_game(
    black: Agent,
    white: Agent,
    *,
    board: Board | None = None,
    first_player: CellState = INITIAL_PLAYER,
) -> GameResult:
    """Play a single game between two agents.

    Args:
        black: Agent playing black.
        white: Agent playing white.
        board: Starting position (default: standard opening).
        first_player: Side to move first.

    Returns:
        GameResult with final counts and winner.

    Raises:
        ValueError: If an agent returns a move that is not a candidate.
    """
    black.reset()
    white.reset()

    state = GameState(board, first_player)
    agents = {CellState.BLACK: black, CellState.WHITE: white}

    while not state.is_game_over:
        agent = agents[state.player]
        move = agent.get_move(state.board, state.player, list(state.candidates))
        if not state.play(move):
            raise ValueError(f"{agent.name} returned illegal move {tuple(move)}")

    counts = state.counts
    return GameResult(
        black_count=counts.black,
        white_count=counts.white,
        moves=state.move_count,
        passes=state.pass_count,
        winner=state.winner,
    )
