"""Numba JIT-compiled kernels for the capture scan hot path.

Boards are ``(8, 8)`` int8 arrays. Players are passed as plain ints
(1 = black, 2 = white) together with the opponent's value.
"""

from __future__ import annotations

import numpy as np
from numba import njit  # type: ignore[import-untyped]

DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

_DR = np.array([d[0] for d in DIRECTIONS], dtype=np.int64)
_DC = np.array([d[1] for d in DIRECTIONS], dtype=np.int64)


@njit(cache=True)
def reverse_stones_kernel(
    board: np.ndarray,
    row: int,
    col: int,
    player: int,
    opp: int,
    only_count: bool,
) -> int:
    """Count (and optionally flip) the stones captured by a placement at (row, col).

    For each direction the scan walks outward over opponent stones. If the
    run is closed by ``player``'s stone, its length is added to the total
    and, unless ``only_count``, the run is flipped on a second pass.

    Returns:
        Total captured stones; 0 if (row, col) is occupied.
    """
    size = board.shape[0]
    if board[row, col] != 0:
        return 0

    total = 0
    for d in range(8):
        dr = _DR[d]
        dc = _DC[d]
        r = row + dr
        c = col + dc
        run = 0
        while 0 <= r < size and 0 <= c < size and board[r, c] == opp:
            run += 1
            r += dr
            c += dc

        if run == 0 or not (0 <= r < size and 0 <= c < size) or board[r, c] != player:
            continue

        if not only_count:
            r = row + dr
            c = col + dc
            for _ in range(run):
                board[r, c] = player
                r += dr
                c += dc
        total += run

    return total


@njit(cache=True)
def candidate_indices(board: np.ndarray, player: int, opp: int) -> np.ndarray:
    """Flat indices (row * size + col) of all legal moves, in row-major order."""
    size = board.shape[0]
    out = np.empty(size * size, dtype=np.int64)
    n = 0
    for row in range(size):
        for col in range(size):
            if board[row, col] != 0:
                continue
            if reverse_stones_kernel(board, row, col, player, opp, True) > 0:
                out[n] = row * size + col
                n += 1
    return out[:n]
