"""Shared board fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from othellomc.game.board import Board, board_from_rows, create_initial_board


@pytest.fixture
def initial_board() -> Board:
    """Standard opening position."""
    return create_initial_board()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source."""
    return np.random.default_rng(1234)


@pytest.fixture
def white_must_pass_board() -> Board:
    """Black can move, White cannot.

    Black has (0, 2) and (7, 2). After Black plays (0, 2) White still has
    no move, so Black moves again.
    """
    return board_from_rows(
        [
            "BW......",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "BW......",
        ]
    )


@pytest.fixture
def black_wins_in_one_board() -> Board:
    """Black's only move captures White's only stone and ends the game."""
    return board_from_rows(
        [
            "BW......",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
        ]
    )


@pytest.fixture
def drawn_board() -> Board:
    """No legal moves for either side, one stone each."""
    return board_from_rows(
        [
            "B......W",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
        ]
    )


@pytest.fixture
def endgame_board() -> Board:
    """Nearly full board with a handful of empty cells left."""
    return board_from_rows(
        [
            "BBBBBBBB",
            "BWWWWWWB",
            "BWBBBBWB",
            "BWB..BWB",
            "BWBW.BWB",
            "BWBBBBWB",
            "BWWWWWWB",
            "BBBBBBB.",
        ]
    )
