"""Round-robin tournament for comparing Othello agents."""

from __future__ import annotations

import itertools
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass

from pydantic import Field

from othellomc.ai.config import AgentConfig  # noqa: TC001
from othellomc.config.base import StrictBaseModel
from othellomc.eval.game import play_game
from othellomc.game.board import CellState

logger = logging.getLogger(__name__)


class TournamentConfig(StrictBaseModel):
    """Round-robin tournament configuration.

    Example YAML:
        games_per_matchup: 10
        workers: 4
        seed: 0
        agents:
          random:
            variant: random
          mc_strong:
            variant: montecarlo
            search:
              budget: {max_iterations: 20}
    """

    agents: dict[str, AgentConfig]
    games_per_matchup: int = Field(gt=0)
    workers: int = Field(default=4, gt=0)
    seed: int = 0


@dataclass
class MatchupResult:
    """Result of one matchup (A vs B over N games)."""

    agent_a: str
    agent_b: str
    wins_a: int
    draws: int
    wins_b: int
    avg_stones_a: float
    avg_stones_b: float

    @property
    def games(self) -> int:
        return self.wins_a + self.draws + self.wins_b

    def flipped(self) -> MatchupResult:
        """Same matchup seen from B's side."""
        return MatchupResult(
            agent_a=self.agent_b,
            agent_b=self.agent_a,
            wins_a=self.wins_b,
            draws=self.draws,
            wins_b=self.wins_a,
            avg_stones_a=self.avg_stones_b,
            avg_stones_b=self.avg_stones_a,
        )


@dataclass
class TournamentResult:
    """Full tournament results."""

    matchups: list[MatchupResult]
    agent_names: list[str]

    def get_matchup(self, a: str, b: str) -> MatchupResult | None:
        """Matchup for a vs b, from a's perspective."""
        for m in self.matchups:
            if m.agent_a == a and m.agent_b == b:
                return m
            if m.agent_a == b and m.agent_b == a:
                return m.flipped()
        return None

    def _matrix(self, title: str, cell_fn) -> str:
        col_width = max([10, *(len(name) for name in self.agent_names)])
        lines = [title, "=" * 50]

        header = " " * (col_width + 2)
        for name in self.agent_names:
            header += f"{name:>{col_width}}  "
        lines.append(header)

        for row_name in self.agent_names:
            row = f"{row_name:<{col_width}}  "
            for col_name in self.agent_names:
                if row_name == col_name:
                    cell = "-"
                else:
                    m = self.get_matchup(row_name, col_name)
                    cell = cell_fn(m) if m else "?"
                row += f"{cell:>{col_width}}  "
            lines.append(row)

        return "\n".join(lines)

    def wdl_table(self) -> str:
        """Format W/D/L matrix as string."""
        return self._matrix(
            "Tournament Results (W/D/L from row's perspective)",
            lambda m: f"{m.wins_a}/{m.draws}/{m.wins_b}",
        )

    def stones_table(self) -> str:
        """Format average final stone counts as string."""
        return self._matrix(
            "Average Stones (row / col)",
            lambda m: f"{m.avg_stones_a:.1f}/{m.avg_stones_b:.1f}",
        )

    def standings_table(self) -> str:
        """Overall standings sorted by points (1 per win, 0.5 per draw)."""
        stats: dict[str, dict[str, float]] = {
            name: {"wins": 0, "draws": 0, "losses": 0, "stones": 0.0, "games": 0}
            for name in self.agent_names
        }

        for name, other in itertools.permutations(self.agent_names, 2):
            m = self.get_matchup(name, other)
            if m is None:
                continue
            s = stats[name]
            s["wins"] += m.wins_a
            s["draws"] += m.draws
            s["losses"] += m.wins_b
            s["stones"] += m.avg_stones_a * m.games
            s["games"] += m.games

        for s in stats.values():
            s["points"] = s["wins"] + 0.5 * s["draws"]
            s["avg_stones"] = s["stones"] / s["games"] if s["games"] > 0 else 0.0

        ranked = sorted(
            self.agent_names,
            key=lambda n: (stats[n]["points"], stats[n]["wins"]),
            reverse=True,
        )

        lines = ["Standings", "=" * 60]
        lines.append(f"{'Rank':<6}{'Agent':<20}{'W':>6}{'D':>6}{'L':>6}{'Pts':>7}{'AvgStones':>11}")
        lines.append("-" * 60)
        for i, name in enumerate(ranked, 1):
            s = stats[name]
            lines.append(
                f"{i:<6}{name:<20}{s['wins']:>6.0f}{s['draws']:>6.0f}{s['losses']:>6.0f}"
                f"{s['points']:>7.1f}{s['avg_stones']:>11.1f}"
            )

        return "\n".join(lines)


@dataclass
class _GameTask:
    """Internal task for parallel game execution."""

    agent_a_name: str
    agent_b_name: str
    game_idx: int
    seed: int
    swap_sides: bool


@dataclass
class _GameOutcome:
    """Internal result from a single game, from agent A's perspective."""

    agent_a_name: str
    agent_b_name: str
    winner: int  # 0=draw, 1=agent_a won, 2=agent_b won
    stones_a: int
    stones_b: int


def _run_single_game(task: _GameTask, agents: dict[str, AgentConfig]) -> _GameOutcome:
    """Build fresh agents and play one game.

    Agents are built per game so that no random source or search state is
    shared between worker threads.
    """
    agent_a = agents[task.agent_a_name].build(seed=task.seed)
    agent_b = agents[task.agent_b_name].build(seed=task.seed + 1)

    if task.swap_sides:
        result = play_game(agent_b, agent_a)
        color_a = CellState.WHITE
        stones_a, stones_b = result.white_count, result.black_count
    else:
        result = play_game(agent_a, agent_b)
        color_a = CellState.BLACK
        stones_a, stones_b = result.black_count, result.white_count

    if result.winner is None:
        winner = 0
    elif result.winner == color_a:
        winner = 1
    else:
        winner = 2

    return _GameOutcome(
        agent_a_name=task.agent_a_name,
        agent_b_name=task.agent_b_name,
        winner=winner,
        stones_a=stones_a,
        stones_b=stones_b,
    )


def run_tournament(config: TournamentConfig) -> TournamentResult:
    """Execute a round-robin tournament.

    Every pair of configured agents plays ``games_per_matchup`` games,
    alternating colors.

    Args:
        config: Tournament configuration.

    Returns:
        TournamentResult with all matchup results.
    """
    agent_names = list(config.agents.keys())
    matchup_pairs = list(itertools.combinations(agent_names, 2))

    tasks: list[_GameTask] = []
    for agent_a_name, agent_b_name in matchup_pairs:
        for game_idx in range(config.games_per_matchup):
            tasks.append(
                _GameTask(
                    agent_a_name=agent_a_name,
                    agent_b_name=agent_b_name,
                    game_idx=game_idx,
                    seed=config.seed + 2 * len(tasks),
                    swap_sides=game_idx % 2 == 1,
                )
            )

    logger.info(f"Running {len(tasks)} games ({len(matchup_pairs)} matchups)")
    logger.info(f"Agents: {', '.join(agent_names)}")

    outcomes: list[_GameOutcome] = []
    with ThreadPoolExecutor(max_workers=config.workers) as executor:
        futures = [executor.submit(_run_single_game, task, config.agents) for task in tasks]
        for future in as_completed(futures):
            outcomes.append(future.result())
            if len(outcomes) % 10 == 0:
                logger.info(f"Completed {len(outcomes)}/{len(tasks)} games")

    matchups: list[MatchupResult] = []
    for agent_a_name, agent_b_name in matchup_pairs:
        games = [
            o for o in outcomes if o.agent_a_name == agent_a_name and o.agent_b_name == agent_b_name
        ]
        matchups.append(
            MatchupResult(
                agent_a=agent_a_name,
                agent_b=agent_b_name,
                wins_a=sum(1 for g in games if g.winner == 1),
                draws=sum(1 for g in games if g.winner == 0),
                wins_b=sum(1 for g in games if g.winner == 2),
                avg_stones_a=sum(g.stones_a for g in games) / len(games) if games else 0.0,
                avg_stones_b=sum(g.stones_b for g in games) / len(games) if games else 0.0,
            )
        )

    return TournamentResult(matchups=matchups, agent_names=agent_names)
