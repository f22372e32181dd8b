"""Tests for the rule engine: captures, candidates, turn advancement."""

from __future__ import annotations

import numpy as np
import pytest

from othellomc.game.board import (
    CellState,
    Coord,
    StoneCounts,
    board_from_rows,
    boards_equal,
    copy_board,
    count_stones,
    create_empty_board,
)
from othellomc.game.rules import (
    GameOver,
    ToMove,
    advance_turn,
    apply_move,
    determine_winner,
    get_candidates,
    is_legal_move,
    place_stone,
    reverse_stones,
)

BLACK = CellState.BLACK
WHITE = CellState.WHITE


@pytest.fixture
def multi_direction_board() -> np.ndarray:
    """Black at (3, 3) captures in three directions at once."""
    return board_from_rows(
        [
            "B..B..B.",
            ".W.W.W..",
            "..WWW...",
            "BWW.WWWB",
            "..W.W...",
            ".W..W...",
            "B...B...",
            "........",
        ]
    )


class TestReverseStones:
    """Tests for the capture primitive."""

    def test_occupied_cell_captures_nothing(self, initial_board: np.ndarray) -> None:
        """Placing on an occupied cell is a no-op reporting zero captures."""
        before = copy_board(initial_board)
        assert reverse_stones(initial_board, Coord(3, 3), BLACK) == 0
        assert boards_equal(initial_board, before)

    def test_out_of_bounds_captures_nothing(self, initial_board: np.ndarray) -> None:
        assert reverse_stones(initial_board, Coord(8, 0), BLACK, only_count=True) == 0
        assert reverse_stones(initial_board, Coord(-1, 3), BLACK, only_count=True) == 0

    def test_opening_capture(self, initial_board: np.ndarray) -> None:
        """Black at (2, 3) flips exactly the white stone at (3, 3)."""
        flipped = reverse_stones(initial_board, Coord(2, 3), BLACK)
        assert flipped == 1
        assert initial_board[3, 3] == BLACK
        # The placed stone itself is not written by reverse_stones
        assert initial_board[2, 3] == CellState.EMPTY

    def test_only_count_does_not_mutate(self, multi_direction_board: np.ndarray) -> None:
        before = copy_board(multi_direction_board)
        count = reverse_stones(multi_direction_board, Coord(3, 3), BLACK, only_count=True)
        assert count > 0
        assert boards_equal(multi_direction_board, before)

    def test_only_count_matches_real_flips(self, multi_direction_board: np.ndarray) -> None:
        """Counting mode reports exactly the number of cells a real capture changes."""
        before = copy_board(multi_direction_board)
        counted = reverse_stones(multi_direction_board, Coord(3, 3), BLACK, only_count=True)
        flipped = reverse_stones(multi_direction_board, Coord(3, 3), BLACK)
        changed = int(np.count_nonzero(multi_direction_board != before))
        assert counted == flipped == changed

    def test_multi_direction_capture(self, multi_direction_board: np.ndarray) -> None:
        """Runs closed by black are flipped; runs ending at an edge or gap are not."""
        flipped = reverse_stones(multi_direction_board, Coord(3, 3), BLACK)
        captured = [
            (2, 2), (1, 1),          # up-left
            (2, 3), (1, 3),          # up
            (2, 4), (1, 5),          # up-right
            (3, 2), (3, 1),          # left
            (3, 4), (3, 5), (3, 6),  # right
            (4, 2), (5, 1),          # down-left
        ]  # fmt: skip
        for cell in captured:
            assert multi_direction_board[cell] == BLACK, cell
        # Down-right run ends at an empty cell
        assert multi_direction_board[4, 4] == WHITE
        assert multi_direction_board[5, 4] == WHITE
        assert flipped == len(captured) == 13

    def test_run_ending_at_edge_is_not_captured(self) -> None:
        board = board_from_rows(["..WWWWWW"] + ["........"] * 7)
        assert reverse_stones(board, Coord(0, 1), BLACK, only_count=True) == 0

    def test_run_ending_at_empty_is_not_captured(self) -> None:
        board = board_from_rows(["..WW.B.."] + ["........"] * 7)
        assert reverse_stones(board, Coord(0, 1), BLACK, only_count=True) == 0

    def test_adjacent_own_stone_captures_nothing(self) -> None:
        """A direction starting with the mover's own stone has no run to capture."""
        board = board_from_rows([".BW....."] + ["........"] * 7)
        assert reverse_stones(board, Coord(0, 0), BLACK, only_count=True) == 0


class TestGetCandidates:
    """Tests for legal-move enumeration."""

    def test_opening_moves_for_black(self, initial_board: np.ndarray) -> None:
        """The four standard opening moves, in row-major order."""
        assert get_candidates(initial_board, BLACK) == [
            Coord(2, 3),
            Coord(3, 2),
            Coord(4, 5),
            Coord(5, 4),
        ]

    def test_opening_moves_for_white(self, initial_board: np.ndarray) -> None:
        assert get_candidates(initial_board, WHITE) == [
            Coord(2, 4),
            Coord(3, 5),
            Coord(4, 2),
            Coord(5, 3),
        ]

    def test_does_not_mutate(self, initial_board: np.ndarray) -> None:
        before = copy_board(initial_board)
        get_candidates(initial_board, BLACK)
        assert boards_equal(initial_board, before)

    def test_empty_board_has_no_candidates(self) -> None:
        assert get_candidates(create_empty_board(), BLACK) == []

    def test_every_candidate_is_legal(self, endgame_board: np.ndarray) -> None:
        for player in (BLACK, WHITE):
            for coord in get_candidates(endgame_board, player):
                assert is_legal_move(endgame_board, coord, player)


class TestApplyMove:
    """Tests for placement."""

    def test_opening_scenario(self, initial_board: np.ndarray) -> None:
        """Black (2, 3): one flip, counts 4-1, White to move next."""
        new_board = apply_move(initial_board, Coord(2, 3), BLACK)
        assert new_board[2, 3] == BLACK
        assert new_board[3, 3] == BLACK
        assert count_stones(new_board) == StoneCounts(black=4, white=1)

        state = advance_turn(new_board, BLACK)
        assert isinstance(state, ToMove)
        assert state.player == WHITE
        assert not state.passed

    def test_copy_on_write(self, initial_board: np.ndarray) -> None:
        """The input board is left untouched."""
        before = copy_board(initial_board)
        new_board = apply_move(initial_board, Coord(2, 3), BLACK)
        assert new_board is not initial_board
        assert boards_equal(initial_board, before)

    def test_illegal_move_returns_same_board(self, initial_board: np.ndarray) -> None:
        before = copy_board(initial_board)
        result = apply_move(initial_board, Coord(0, 0), BLACK)
        assert result is initial_board
        assert boards_equal(initial_board, before)

    def test_occupied_cell_is_illegal(self, initial_board: np.ndarray) -> None:
        assert apply_move(initial_board, Coord(3, 3), BLACK) is initial_board

    def test_stone_count_strictly_increases(self, endgame_board: np.ndarray) -> None:
        """Total grows by 1 + flips, and flips >= 1."""
        before = count_stones(endgame_board).total
        for coord in get_candidates(endgame_board, BLACK):
            flips = reverse_stones(endgame_board, coord, BLACK, only_count=True)
            after = count_stones(apply_move(endgame_board, coord, BLACK))
            assert flips >= 1
            assert after.total == before + 1
            assert after.black == count_stones(endgame_board).black + 1 + flips

    def test_place_stone_in_place(self, initial_board: np.ndarray) -> None:
        assert place_stone(initial_board, Coord(5, 4), BLACK) == 1
        assert initial_board[5, 4] == BLACK
        assert initial_board[4, 4] == BLACK

    def test_place_stone_illegal_is_noop(self, initial_board: np.ndarray) -> None:
        before = copy_board(initial_board)
        assert place_stone(initial_board, Coord(0, 0), BLACK) == 0
        assert boards_equal(initial_board, before)


class TestAdvanceTurn:
    """Tests for the turn state machine."""

    def test_forced_pass_keeps_turn(self, white_must_pass_board: np.ndarray) -> None:
        """White has no candidates but Black does: Black moves again."""
        state = advance_turn(white_must_pass_board, BLACK)
        assert isinstance(state, ToMove)
        assert state.player == BLACK
        assert state.passed
        assert state.candidates == [Coord(0, 2), Coord(7, 2)]

    def test_game_over_when_nobody_can_move(self, drawn_board: np.ndarray) -> None:
        state = advance_turn(drawn_board, BLACK)
        assert isinstance(state, GameOver)
        assert state.counts == StoneCounts(black=1, white=1)
        assert state.winner is None

    def test_game_over_winner_by_count(self, black_wins_in_one_board: np.ndarray) -> None:
        board = apply_move(black_wins_in_one_board, Coord(0, 2), BLACK)
        state = advance_turn(board, BLACK)
        assert isinstance(state, GameOver)
        assert state.winner == BLACK
        assert state.counts == StoneCounts(black=3, white=0)


class TestDetermineWinner:
    """Tests for winner determination."""

    @pytest.mark.parametrize(
        ("row", "expected"),
        [
            ("BB.....W", BLACK),
            ("B....WW.", WHITE),
            ("B......W", None),
        ],
    )
    def test_strict_count_comparison(self, row: str, expected: CellState | None) -> None:
        board = board_from_rows([row] + ["........"] * 7)
        assert determine_winner(board) == expected
