"""Board model for 8x8 Othello.

A board is a plain ``(8, 8)`` int8 numpy array in row-major order, indexed
``board[row, col]``. Cell values are always one of the three ``CellState``
members. Boards have value semantics: use ``copy_board`` before any
destructive operation whose result must coexist with the original, and
``boards_equal`` to compare.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence

BOARD_SIZE = 8

Board = np.ndarray


class CellState(IntEnum):
    """State of a single cell.

    BLACK and WHITE double as player identifiers.
    """

    EMPTY = 0
    BLACK = 1
    WHITE = 2


INITIAL_PLAYER = CellState.BLACK


class Coord(NamedTuple):
    """A (row, col) cell coordinate."""

    row: int
    col: int


@dataclass(frozen=True)
class StoneCounts:
    """Stone counts derived from a board.

    Attributes:
        black: Number of black stones.
        white: Number of white stones.
    """

    black: int
    white: int

    @property
    def total(self) -> int:
        return self.black + self.white

    @property
    def empty(self) -> int:
        return BOARD_SIZE * BOARD_SIZE - self.total

    def of(self, player: CellState) -> int:
        """Count for one color."""
        if player == CellState.BLACK:
            return self.black
        if player == CellState.WHITE:
            return self.white
        raise ValueError(f"Not a stone color: {player!r}")


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def opponent(player: CellState) -> CellState:
    """Return the other stone color."""
    if player == CellState.BLACK:
        return CellState.WHITE
    if player == CellState.WHITE:
        return CellState.BLACK
    raise ValueError(f"Not a stone color: {player!r}")


def create_empty_board() -> Board:
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)


def create_initial_board() -> Board:
    """Standard starting position: white on the main diagonal of the center."""
    board = create_empty_board()
    mid = BOARD_SIZE // 2
    board[mid - 1, mid - 1] = CellState.WHITE
    board[mid - 1, mid] = CellState.BLACK
    board[mid, mid - 1] = CellState.BLACK
    board[mid, mid] = CellState.WHITE
    return board


def copy_board(board: Board) -> Board:
    """Return an independent copy with identical cell values."""
    return board.copy()


def boards_equal(a: Board, b: Board) -> bool:
    return bool(np.array_equal(a, b))


def count_stones(board: Board) -> StoneCounts:
    """Count black and white stones with a full scan of the board."""
    black = int(np.count_nonzero(board == CellState.BLACK))
    white = int(np.count_nonzero(board == CellState.WHITE))
    return StoneCounts(black=black, white=white)


_CHAR_TO_CELL = {
    ".": CellState.EMPTY,
    "-": CellState.EMPTY,
    "B": CellState.BLACK,
    "X": CellState.BLACK,
    "W": CellState.WHITE,
    "O": CellState.WHITE,
}


def board_from_rows(rows: Sequence[str]) -> Board:
    """Build a board from 8 strings of 8 characters.

    ``.`` or ``-`` is empty, ``B``/``X`` is black, ``W``/``O`` is white.
    Whitespace inside a row is ignored.

    Example:
        board_from_rows([
            "........",
            "........",
            "........",
            "...WB...",
            "...BW...",
            "........",
            "........",
            "........",
        ])
    """
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")

    board = create_empty_board()
    for r, raw in enumerate(rows):
        row = "".join(raw.split()).upper()
        if len(row) != BOARD_SIZE:
            raise ValueError(f"Row {r} has {len(row)} cells, expected {BOARD_SIZE}: {raw!r}")
        for c, ch in enumerate(row):
            if ch not in _CHAR_TO_CELL:
                raise ValueError(f"Unknown cell character {ch!r} at ({r}, {c})")
            board[r, c] = _CHAR_TO_CELL[ch]
    return board
