"""Search result returned by the Monte-Carlo move selector."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from othellomc.game.board import Coord


@dataclass
class SearchResult:
    """Outcome of one AI decision.

    Fields:
        move: Chosen coordinate.
        win_count: Effective score of the chosen move (the aggregated rollout
            tally behind the choice).
        game_count: Completed search iterations. Every (candidate, reply)
            pair received exactly this many rollouts.
        candidates: Candidates considered, in row-major order.
        scores: Effective score per candidate, aligned with ``candidates``.
        rollouts: Total rollouts played across all pairs.
        elapsed: Wall-clock seconds spent searching.
    """

    move: Coord
    win_count: float
    game_count: int
    candidates: list[Coord] = field(default_factory=list)
    scores: np.ndarray = field(default_factory=lambda: np.zeros(0))
    rollouts: int = 0
    elapsed: float = 0.0

    @property
    def win_rate(self) -> float | None:
        """Fraction ``win_count / game_count``, or None before any iteration."""
        if self.game_count == 0:
            return None
        return self.win_count / self.game_count

    def format_win_rate(self) -> str:
        """Percentage with two decimals, or "-" when nothing was searched."""
        rate = self.win_rate
        return "-" if rate is None else f"{100 * rate:.2f}"

    def summary(self) -> str:
        return f"{self.win_count:g} / {self.game_count} = {self.format_win_rate()} %"
