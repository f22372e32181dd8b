"""Monte-Carlo move selection: rollouts, budgeted search, results."""

from othellomc.mcts.config import (
    STRONG_AGGREGATION,
    WEAK_AGGREGATION,
    AggregationPolicy,
    SearchBudget,
    SearchConfig,
)
from othellomc.mcts.errors import SearchInvariantError
from othellomc.mcts.result import SearchResult
from othellomc.mcts.rollout import rollout, score_outcome
from othellomc.mcts.search import MonteCarloSearch, select_move_by_ai, select_move_by_ai_async

__all__ = [
    "STRONG_AGGREGATION",
    "WEAK_AGGREGATION",
    "AggregationPolicy",
    "MonteCarloSearch",
    "SearchBudget",
    "SearchConfig",
    "SearchInvariantError",
    "SearchResult",
    "rollout",
    "score_outcome",
    "select_move_by_ai",
    "select_move_by_ai_async",
]
