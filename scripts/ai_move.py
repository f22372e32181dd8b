#!/usr/bin/env python3
"""Ask the Monte-Carlo AI for a move in a given position.

Reads a board as 8 lines of 8 characters ('.', 'B', 'W') from a file, or
uses the opening position.

Usage:
    python scripts/ai_move.py --player black
    python scripts/ai_move.py --board position.txt --player white --level weak --seconds 2
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import numpy as np

from othellomc.game import CellState, board_from_rows, create_initial_board, get_candidates
from othellomc.mcts import SearchBudget, SearchConfig, select_move_by_ai_async

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """argparse type: integer >= 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected an integer >= 1, got {value}")
    return number


def main() -> None:
    parser = argparse.ArgumentParser(description="Pick a move with the Monte-Carlo AI.")
    parser.add_argument("--board", type=Path, default=None, help="Board file (8 rows)")
    parser.add_argument("--player", choices=["black", "white"], default="black")
    parser.add_argument("--level", choices=["strong", "weak"], default="strong")
    parser.add_argument("--seconds", type=positive_int, default=3, help="Max thinking time")
    parser.add_argument("--iterations", type=positive_int, default=10000, help="Max iterations")
    parser.add_argument("--draw-credit", type=float, default=0.0)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    if args.board is not None:
        if not args.board.exists():
            logger.error(f"Board file not found: {args.board}")
            sys.exit(1)
        rows = [line for line in args.board.read_text().splitlines() if line.strip()]
        board = board_from_rows(rows)
    else:
        board = create_initial_board()

    player = CellState[args.player.upper()]
    candidates = get_candidates(board, player)
    if not candidates:
        logger.error(f"{player.name} has no legal move in this position")
        sys.exit(1)

    config = SearchConfig(
        budget=SearchBudget(max_time=args.seconds, max_iterations=args.iterations),
        level=args.level,
        draw_credit=args.draw_credit,
    )
    result = asyncio.run(
        select_move_by_ai_async(
            board, player, candidates, config, np.random.default_rng(args.seed), yield_delay=0.0
        )
    )

    print(f"{player.name} plays (row={result.move.row}, col={result.move.col})")
    print(f"Win rate: {result.summary()}")
    for move, score in zip(result.candidates, result.scores, strict=True):
        print(f"  ({move.row}, {move.col}): {score:g}")


if __name__ == "__main__":
    main()
