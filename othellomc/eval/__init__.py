"""Evaluation utilities for Othello agents."""

from othellomc.eval.game import GameResult, play_game
from othellomc.eval.runner import EvalResult, MatchConfig, evaluate, run_match
from othellomc.eval.tournament import (
    MatchupResult,
    TournamentConfig,
    TournamentResult,
    run_tournament,
)

__all__ = [
    "EvalResult",
    "GameResult",
    "MatchConfig",
    "MatchupResult",
    "TournamentConfig",
    "TournamentResult",
    "evaluate",
    "play_game",
    "run_match",
    "run_tournament",
]
