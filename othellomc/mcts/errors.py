"""Errors raised by the search."""

from __future__ import annotations


class SearchInvariantError(RuntimeError):
    """Internal state tracking is inconsistent.

    Raised when the search is asked to move with no legal candidates, or a
    rollout reaches a state that cannot occur on a correctly tracked board.
    This signals a bug, not a recoverable condition.
    """
