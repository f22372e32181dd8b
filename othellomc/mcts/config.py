"""Monte-Carlo search configuration.

Example YAML:
    budget:
      max_time: 3.0
      max_iterations: 10000
    level: strong
    draw_credit: 0.0

The aggregation direction can be overridden explicitly:
    level: weak
    aggregation:
      opponent_reply: max
      own_reply: max
      selection: min
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from othellomc.config.base import StrictBaseModel

DEFAULT_MAX_TIME = 3.0  # seconds
DEFAULT_MAX_ITERATIONS = 10000

Reducer = Literal["min", "max"]


class SearchBudget(StrictBaseModel):
    """Upper bounds on one decision. Whichever is reached first stops the search.

    Both bounds must be positive; invalid values are rejected here rather
    than replaced by defaults inside the search loop.
    """

    max_time: float = Field(default=DEFAULT_MAX_TIME, gt=0)
    max_iterations: int = Field(default=DEFAULT_MAX_ITERATIONS, gt=0)


class AggregationPolicy(StrictBaseModel):
    """How rollout tallies are reduced to a single move choice.

    Attributes:
        opponent_reply: Reducer over a candidate's tallies when the replies
            belong to the opponent.
        own_reply: Reducer over a candidate's tallies when the opponent had to
            pass and the replies are the mover's own.
        selection: Whether the chosen candidate has the max or min effective score.
    """

    opponent_reply: Reducer
    own_reply: Reducer
    selection: Reducer


# Assume adversarial replies, pick the best worst case
STRONG_AGGREGATION = AggregationPolicy(opponent_reply="min", own_reply="max", selection="max")
# Full inversion of the strong policy, for an easier opponent
WEAK_AGGREGATION = AggregationPolicy(opponent_reply="max", own_reply="min", selection="min")


class SearchConfig(StrictBaseModel):
    """Configuration for the two-ply Monte-Carlo move selector.

    Attributes:
        budget: Time / iteration ceiling.
        level: Difficulty preset selecting the aggregation policy.
        draw_credit: Score credited for a drawn rollout (0.0 or 0.5 are the
            usual choices).
        aggregation: Explicit aggregation, overriding ``level`` when set.
    """

    budget: SearchBudget = Field(default_factory=SearchBudget)
    level: Literal["strong", "weak"] = "strong"
    draw_credit: float = Field(default=0.0, ge=0.0, le=1.0)
    aggregation: AggregationPolicy | None = None

    @property
    def resolved_aggregation(self) -> AggregationPolicy:
        if self.aggregation is not None:
            return self.aggregation
        return STRONG_AGGREGATION if self.level == "strong" else WEAK_AGGREGATION
