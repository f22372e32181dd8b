"""Budgeted two-ply Monte-Carlo move selection.

For every candidate move the search looks one reply deeper: it plays the
candidate, enumerates the replies of whoever moves next (the opponent, or the
mover again if the opponent must pass), and runs random rollouts from each
(candidate, reply) position. One iteration gives every pair exactly one
rollout, so all tallies stay comparable. The budget is checked between
iterations only; rollouts are never truncated.

Per-candidate tallies are reduced to an effective score (min over opponent
replies for the strong policy, i.e. assume the opponent answers well), and
the candidate with the best effective score is chosen. Ties go to the first
candidate in row-major order.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from othellomc.game.board import copy_board, opponent
from othellomc.game.rules import get_candidates, place_stone
from othellomc.mcts.config import SearchConfig
from othellomc.mcts.errors import SearchInvariantError
from othellomc.mcts.result import SearchResult
from othellomc.mcts.rollout import rollout, score_outcome

if TYPE_CHECKING:
    from othellomc.game.board import Board, CellState, Coord
    from othellomc.mcts.config import Reducer

logger = logging.getLogger(__name__)

_REDUCERS = {"min": np.min, "max": np.max}
_SELECTORS = {"min": np.argmin, "max": np.argmax}


@dataclass
class _CandidateStats:
    """Per-candidate search state.

    Attributes:
        move: The candidate move.
        board: Position after the candidate was played. Never mutated.
        reply_player: Side to move after the candidate, or None if terminal.
        replies: Second-level moves for ``reply_player``.
        replies_by_opponent: False when the opponent must pass and the
            replies are the mover's own.
        tallies: Accumulated rollout scores, one per reply (a single slot
            when the candidate ends the game).
        terminal_score: Fixed outcome score if the candidate ends the game.
    """

    move: Coord
    board: Board
    reply_player: CellState | None
    replies: list[Coord]
    replies_by_opponent: bool
    tallies: np.ndarray
    terminal_score: float = 0.0


class MonteCarloSearch:
    """Two-ply Monte-Carlo search under a time / iteration budget.

    Attributes:
        config: Budget, difficulty level and draw credit.
        rng: Random source for rollouts. Inject a seeded generator for
            reproducible decisions.
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else SearchConfig()
        self.rng = rng if rng is not None else np.random.default_rng()

    def search(
        self,
        board: Board,
        player: CellState,
        candidates: list[Coord],
        cancel: threading.Event | None = None,
    ) -> SearchResult:
        """Choose a move for ``player`` among ``candidates``.

        Args:
            board: Current position. Not modified.
            player: Side to decide for.
            candidates: Legal moves for ``player`` in row-major order.
            cancel: When set, the search stops after the current iteration.

        Returns:
            SearchResult with the chosen move and its win tally.

        Raises:
            SearchInvariantError: If ``candidates`` is empty or contains an
                illegal move.
        """
        if not candidates:
            raise SearchInvariantError(f"Search invoked for {player.name} with no candidates")

        stats = [self._expand(board, player, move) for move in candidates]
        budget = self.config.budget
        draw_credit = self.config.draw_credit

        start = time.perf_counter()
        iterations = 0
        rollouts = 0
        while iterations < budget.max_iterations and time.perf_counter() - start < budget.max_time:
            if cancel is not None and cancel.is_set():
                logger.debug(f"Search for {player.name} cancelled after {iterations} iterations")
                break
            for s in stats:
                rollouts += self._run_iteration(s, player, draw_credit)
            iterations += 1
        elapsed = time.perf_counter() - start

        scores = self._aggregate(stats)
        selection = self.config.resolved_aggregation.selection
        best = int(_SELECTORS[selection](scores))

        result = SearchResult(
            move=stats[best].move,
            win_count=float(scores[best]),
            game_count=iterations,
            candidates=[s.move for s in stats],
            scores=scores,
            rollouts=rollouts,
            elapsed=elapsed,
        )
        logger.debug(
            f"{player.name} picks {tuple(result.move)}: {result.summary()} "
            f"({rollouts} rollouts, {elapsed:.2f}s)"
        )
        return result

    def _expand(self, board: Board, player: CellState, move: Coord) -> _CandidateStats:
        after = copy_board(board)
        if place_stone(after, move, player) == 0:
            raise SearchInvariantError(f"Candidate {tuple(move)} is not legal for {player.name}")

        # Same forced-pass rule as the game itself
        reply_player = opponent(player)
        replies = get_candidates(after, reply_player)
        if not replies:
            reply_player = player
            replies = get_candidates(after, reply_player)

        if not replies:
            return _CandidateStats(
                move=move,
                board=after,
                reply_player=None,
                replies=[],
                replies_by_opponent=False,
                tallies=np.zeros(1),
                terminal_score=score_outcome(after, player, self.config.draw_credit),
            )

        return _CandidateStats(
            move=move,
            board=after,
            reply_player=reply_player,
            replies=replies,
            replies_by_opponent=reply_player != player,
            tallies=np.zeros(len(replies)),
        )

    def _run_iteration(self, stats: _CandidateStats, player: CellState, draw_credit: float) -> int:
        """Give every reply of one candidate a single rollout. Returns rollouts played."""
        if stats.reply_player is None:
            stats.tallies[0] += stats.terminal_score
            return 0

        for j, reply in enumerate(stats.replies):
            work = copy_board(stats.board)
            place_stone(work, reply, stats.reply_player)
            stats.tallies[j] += rollout(
                work,
                opponent(stats.reply_player),
                player,
                self.rng,
                draw_credit,
            )
        return len(stats.replies)

    def _aggregate(self, stats: list[_CandidateStats]) -> np.ndarray:
        aggregation = self.config.resolved_aggregation
        scores = np.empty(len(stats))
        for i, s in enumerate(stats):
            reducer: Reducer = (
                aggregation.opponent_reply if s.replies_by_opponent else aggregation.own_reply
            )
            scores[i] = _REDUCERS[reducer](s.tallies)
        return scores


def select_move_by_ai(
    board: Board,
    player: CellState,
    candidates: list[Coord],
    config: SearchConfig | None = None,
    rng: np.random.Generator | None = None,
    cancel: threading.Event | None = None,
) -> SearchResult:
    """Run one blocking Monte-Carlo decision."""
    return MonteCarloSearch(config, rng).search(board, player, candidates, cancel)


async def select_move_by_ai_async(
    board: Board,
    player: CellState,
    candidates: list[Coord],
    config: SearchConfig | None = None,
    rng: np.random.Generator | None = None,
    *,
    yield_delay: float = 0.1,
) -> SearchResult:
    """Run one Monte-Carlo decision without blocking the event loop.

    Snapshots the board, yields to the host (so it can show a busy indicator),
    then runs the budgeted search in a worker thread on the snapshot.
    Cancelling the awaiting task raises ``asyncio.CancelledError`` in the
    caller and signals the worker, which stops after its current iteration.
    The partial result is discarded.

    Args:
        board: Current position. Not modified.
        player: Side to decide for.
        candidates: Legal moves for ``player``.
        config: Search configuration.
        rng: Random source for rollouts.
        yield_delay: Seconds to sleep before starting the search.
    """
    private = copy_board(board)
    cancel = threading.Event()
    await asyncio.sleep(yield_delay)
    try:
        return await asyncio.to_thread(
            select_move_by_ai, private, player, list(candidates), config, rng, cancel
        )
    except asyncio.CancelledError:
        cancel.set()
        raise
