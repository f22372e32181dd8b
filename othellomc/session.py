"""Interactive game session with an asynchronous AI opponent.

The session is what a UI drives: it owns the GameState, knows which colors
are AI-controlled, and runs AI decisions as an asyncio unit of work. While a
decision is outstanding the session is ``thinking`` and rejects every human
move, so the board cannot change under the search.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from othellomc.game.board import INITIAL_PLAYER, CellState, Coord
from othellomc.game.state import GameState
from othellomc.mcts.config import SearchConfig
from othellomc.mcts.result import SearchResult
from othellomc.mcts.search import select_move_by_ai_async

if TYPE_CHECKING:
    from othellomc.game.board import Board

logger = logging.getLogger(__name__)

THINKING_MESSAGE = "AI is thinking..."


def _empty_result() -> SearchResult:
    return SearchResult(move=Coord(-1, -1), win_count=0.0, game_count=0)


class GameSession:
    """A game between humans and/or AI players.

    Attributes:
        state: Current game state.
        config: Search configuration used for AI turns.
        ai_players: Colors controlled by the AI.
        results: Latest SearchResult per color. Reset to an empty tally when
            that color is played by a human.
        yield_delay: Seconds the AI yields to the host before searching.
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        *,
        ai_players: set[CellState] | None = None,
        seed: int | None = None,
        yield_delay: float = 0.1,
    ) -> None:
        self.state = GameState()
        self.config = config if config is not None else SearchConfig()
        self.ai_players: set[CellState] = set(ai_players or ())
        self.yield_delay = yield_delay
        self.rng = np.random.default_rng(seed)
        self.results: dict[CellState, SearchResult] = {
            CellState.BLACK: _empty_result(),
            CellState.WHITE: _empty_result(),
        }
        self._thinking = False

    @property
    def thinking(self) -> bool:
        """True while an AI decision is outstanding."""
        return self._thinking

    @property
    def lock_message(self) -> str | None:
        """Busy indicator text for the host, or None when idle."""
        return THINKING_MESSAGE if self._thinking else None

    @property
    def ai_to_move(self) -> bool:
        return not self.state.is_game_over and self.state.player in self.ai_players

    def set_ai(self, color: CellState, enabled: bool) -> None:
        """Hand ``color`` to the AI or back to a human."""
        if enabled:
            self.ai_players.add(color)
        else:
            self.ai_players.discard(color)

    def reset(self, board: Board | None = None, player: CellState = INITIAL_PLAYER) -> None:
        """Start a new game. Ignored while the AI is thinking."""
        if self._thinking:
            return
        self.state.reset(board, player)

    def play(self, coord: Coord) -> bool:
        """Human move. Rejected while the AI is thinking or on an AI turn.

        Returns:
            True if the move was applied.
        """
        if self._thinking or self.ai_to_move:
            return False
        return self.state.play(coord)

    async def run_ai_turn(self) -> SearchResult | None:
        """Let the AI play one move if it is the AI's turn.

        Returns:
            The SearchResult behind the move, or None if no AI was to move.
        """
        if self._thinking or self.state.is_game_over:
            return None
        if self.state.player not in self.ai_players:
            self.results[self.state.player] = _empty_result()
            return None

        player = self.state.player
        self._thinking = True
        try:
            result = await select_move_by_ai_async(
                self.state.board,
                player,
                self.state.candidates,
                self.config,
                self.rng,
                yield_delay=self.yield_delay,
            )
        finally:
            self._thinking = False

        self.results[player] = result
        self.state.play(result.move)
        logger.info(f"AI {player.name} played {tuple(result.move)}: {result.summary()}")
        return result

    async def run_until_human(self) -> list[SearchResult]:
        """Play AI turns until a human is to move or the game is over."""
        results: list[SearchResult] = []
        while self.ai_to_move:
            result = await self.run_ai_turn()
            if result is None:
                break
            results.append(result)
        return results
