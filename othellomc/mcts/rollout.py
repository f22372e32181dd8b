"""Random self-play rollouts, the unit of evaluation for the search."""

from __future__ import annotations

from typing import TYPE_CHECKING

from othellomc.game.board import CellState, count_stones, opponent
from othellomc.game.rules import get_candidates, place_stone
from othellomc.mcts.errors import SearchInvariantError

if TYPE_CHECKING:
    import numpy as np

    from othellomc.game.board import Board


def score_outcome(board: Board, player: CellState, draw_credit: float = 0.0) -> float:
    """Score a finished board from ``player``'s perspective.

    Returns:
        1.0 for a win, 0.0 for a loss, ``draw_credit`` for a draw.
    """
    counts = count_stones(board)
    mine = counts.of(player)
    theirs = counts.of(opponent(player))
    if mine > theirs:
        return 1.0
    if mine < theirs:
        return 0.0
    return draw_credit


def rollout(
    board: Board,
    to_move: CellState,
    player: CellState,
    rng: np.random.Generator,
    draw_credit: float = 0.0,
) -> float:
    """Play uniformly random moves until neither side can move.

    ``board`` is consumed: it is mutated in place and must be a working
    copy owned by the caller.

    Args:
        board: Position to play out. Mutated.
        to_move: Side to move first.
        player: Side being evaluated.
        rng: Random source for move choice.
        draw_credit: Score for a drawn game.

    Returns:
        Outcome score for ``player`` (see ``score_outcome``).

    Raises:
        SearchInvariantError: If a chosen candidate captures nothing, or the
            game outlasts the number of empty cells it started with.
    """
    max_moves = int((board == CellState.EMPTY).sum())
    moves = 0

    while True:
        candidates = get_candidates(board, to_move)
        if not candidates:
            # Forced pass
            to_move = opponent(to_move)
            candidates = get_candidates(board, to_move)
            if not candidates:
                return score_outcome(board, player, draw_credit)

        if moves >= max_moves:
            raise SearchInvariantError(
                f"Rollout exceeded {max_moves} moves with candidates still available"
            )

        coord = candidates[int(rng.integers(len(candidates)))]
        if place_stone(board, coord, to_move) == 0:
            raise SearchInvariantError(
                f"Candidate {tuple(coord)} for {to_move.name} captured no stones"
            )
        moves += 1
        to_move = opponent(to_move)
