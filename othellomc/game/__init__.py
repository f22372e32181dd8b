"""Othello board model and rule engine."""

from othellomc.game.board import (
    BOARD_SIZE,
    INITIAL_PLAYER,
    Board,
    CellState,
    Coord,
    StoneCounts,
    board_from_rows,
    boards_equal,
    copy_board,
    count_stones,
    create_empty_board,
    create_initial_board,
    in_bounds,
    opponent,
)
from othellomc.game.numba_ops import DIRECTIONS
from othellomc.game.rules import (
    GameOver,
    ToMove,
    TurnState,
    advance_turn,
    apply_move,
    determine_winner,
    get_candidates,
    is_legal_move,
    place_stone,
    reverse_stones,
)
from othellomc.game.state import GameState

__all__ = [
    "BOARD_SIZE",
    "DIRECTIONS",
    "INITIAL_PLAYER",
    "Board",
    "CellState",
    "Coord",
    "GameOver",
    "GameState",
    "StoneCounts",
    "ToMove",
    "TurnState",
    "advance_turn",
    "apply_move",
    "board_from_rows",
    "boards_equal",
    "copy_board",
    "count_stones",
    "create_empty_board",
    "create_initial_board",
    "determine_winner",
    "get_candidates",
    "in_bounds",
    "is_legal_move",
    "opponent",
    "place_stone",
    "reverse_stones",
]
