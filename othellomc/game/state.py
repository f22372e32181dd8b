"""Mutable game state driven by an external caller (UI, agents, tests)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from othellomc.game.board import (
    INITIAL_PLAYER,
    CellState,
    Coord,
    StoneCounts,
    count_stones,
    create_initial_board,
)
from othellomc.game.rules import GameOver, ToMove, advance_turn, apply_move, get_candidates

if TYPE_CHECKING:
    from othellomc.game.board import Board

logger = logging.getLogger(__name__)


class GameState:
    """The current position and whose turn it is.

    States are ``ToMove(player)`` and game over. ``play`` is the only
    transition; it never raises on bad input. Placing on a non-candidate
    cell, or after the game is over, is ignored and returns False.

    Attributes:
        board: Current board. Replaced (never mutated) on each move.
        player: Side to move. Meaningless once the game is over.
        candidates: Legal moves for ``player``; empty once the game is over.
        move_count: Number of stones placed since the start.
        pass_count: Number of forced passes so far.
    """

    def __init__(self, board: Board | None = None, player: CellState = INITIAL_PLAYER) -> None:
        self.reset(board, player)

    def reset(self, board: Board | None = None, player: CellState = INITIAL_PLAYER) -> None:
        """Start over from ``board`` (default: the standard opening)."""
        self.board: Board = create_initial_board() if board is None else board.copy()
        self.player = player
        self.candidates: list[Coord] = get_candidates(self.board, player)
        self.move_count = 0
        self.pass_count = 0
        self._game_over: GameOver | None = None

        # A position handed in mid-game may start with a pass or already be finished
        if not self.candidates:
            self._advance(last_player=player)
            if not self.is_game_over:
                # The side named to move had to pass
                self.pass_count += 1

    @property
    def is_game_over(self) -> bool:
        return self._game_over is not None

    @property
    def counts(self) -> StoneCounts:
        return count_stones(self.board)

    @property
    def winner(self) -> CellState | None:
        """Winner once the game is over; None while playing or on a draw."""
        return self._game_over.winner if self._game_over is not None else None

    def is_candidate(self, coord: Coord) -> bool:
        return Coord(*coord) in self.candidates

    def play(self, coord: Coord) -> bool:
        """Place a stone for the side to move.

        Returns:
            True if the move was applied, False if it was rejected.
        """
        coord = Coord(*coord)
        if self.is_game_over or coord not in self.candidates:
            logger.debug(f"Rejected move {tuple(coord)} for {self.player.name}")
            return False

        mover = self.player
        self.board = apply_move(self.board, coord, mover)
        self.move_count += 1
        self._advance(last_player=mover)
        return True

    def _advance(self, last_player: CellState) -> None:
        match advance_turn(self.board, last_player):
            case ToMove(player=player, candidates=candidates, passed=passed):
                self.player = player
                self.candidates = candidates
                if passed:
                    self.pass_count += 1
                    logger.debug(f"{player.name} moves again (opponent passes)")
            case GameOver() as over:
                self.candidates = []
                self._game_over = over
                logger.debug(
                    f"Game over: black={over.counts.black} white={over.counts.white} "
                    f"winner={over.winner.name if over.winner else 'draw'}"
                )
