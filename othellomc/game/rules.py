"""Othello rules: captures, legal moves, turn advancement.

The capture primitive scans outward from the placed cell in each of the
8 directions, collecting a contiguous run of opponent stones. The run is
committed (flipped) only if it is closed by one of the mover's own stones.
Counting and mutating modes share the same scan, so the count reported by
``only_count=True`` always equals the number of stones a real placement
would flip. The scan itself runs in the JIT kernels of ``numba_ops``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from othellomc.game.board import (
    BOARD_SIZE,
    CellState,
    Coord,
    StoneCounts,
    copy_board,
    count_stones,
    in_bounds,
    opponent,
)
from othellomc.game.numba_ops import candidate_indices, reverse_stones_kernel

if TYPE_CHECKING:
    from othellomc.game.board import Board


def reverse_stones(board: Board, coord: Coord, player: CellState, only_count: bool = False) -> int:
    """Flip every opponent run captured by placing ``player`` at ``coord``.

    The stone at ``coord`` itself is not placed; see ``place_stone``.

    Args:
        board: Board to scan (mutated unless ``only_count``).
        coord: Target cell. Must be empty, otherwise nothing is captured.
        player: Color of the mover.
        only_count: If True, count captures without mutating ``board``.

    Returns:
        Total number of stones flipped (or that would be flipped) over all
        8 directions. The move is legal iff this is positive.
    """
    row, col = coord
    if not in_bounds(row, col):
        return 0
    return int(
        reverse_stones_kernel(
            board, int(row), int(col), int(player), int(opponent(player)), bool(only_count)
        )
    )


def is_legal_move(board: Board, coord: Coord, player: CellState) -> bool:
    return reverse_stones(board, coord, player, only_count=True) > 0


def get_candidates(board: Board, player: CellState) -> list[Coord]:
    """All legal moves for ``player``, in row-major scan order."""
    indices = candidate_indices(board, int(player), int(opponent(player)))
    return [Coord(int(i) // BOARD_SIZE, int(i) % BOARD_SIZE) for i in indices]


def place_stone(board: Board, coord: Coord, player: CellState) -> int:
    """Capture and place in-place on a board the caller owns.

    Returns:
        Number of stones flipped. 0 means the move was illegal and the board
        was left untouched.
    """
    flipped = reverse_stones(board, coord, player)
    if flipped > 0:
        board[coord[0], coord[1]] = player
    return flipped


def apply_move(board: Board, coord: Coord, player: CellState) -> Board:
    """Copy-on-write capturing placement.

    Returns a new board with the move applied, or ``board`` itself
    (unchanged) if the move is not legal.
    """
    if not is_legal_move(board, coord, player):
        return board
    new_board = copy_board(board)
    place_stone(new_board, coord, player)
    return new_board


def determine_winner(board: Board) -> CellState | None:
    """Color with strictly more stones, or None for a draw."""
    counts = count_stones(board)
    if counts.black > counts.white:
        return CellState.BLACK
    if counts.white > counts.black:
        return CellState.WHITE
    return None


@dataclass(frozen=True)
class ToMove:
    """Game continues with ``player`` to move.

    Attributes:
        player: Side to move next.
        candidates: Legal moves for ``player`` in row-major order.
        passed: True if the other side had no move and was skipped.
    """

    player: CellState
    candidates: list[Coord] = field(default_factory=list)
    passed: bool = False


@dataclass(frozen=True)
class GameOver:
    """Neither side has a legal move.

    Attributes:
        counts: Final stone counts.
        winner: Winning color, or None for a draw.
    """

    counts: StoneCounts
    winner: CellState | None


TurnState = ToMove | GameOver


def advance_turn(board: Board, last_player: CellState) -> TurnState:
    """Decide who moves after ``last_player`` has played on ``board``.

    The opponent moves if they have any candidate. Otherwise the opponent
    passes and ``last_player`` moves again. If neither side can move, the
    game is over.
    """
    next_player = opponent(last_player)
    candidates = get_candidates(board, next_player)
    if candidates:
        return ToMove(player=next_player, candidates=candidates)

    candidates = get_candidates(board, last_player)
    if candidates:
        return ToMove(player=last_player, candidates=candidates, passed=True)

    return GameOver(counts=count_stones(board), winner=determine_winner(board))
