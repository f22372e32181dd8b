#!/usr/bin/env python3
"""Run a round-robin tournament from a YAML config.

Usage:
    python scripts/run_tournament.py configs/tournament.yaml
    python scripts/run_tournament.py configs/tournament.yaml workers=8 games_per_matchup=10
    python scripts/run_tournament.py configs/tournament.yaml agents.mc_strong.search.level=weak
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from othellomc.config.loader import load_config, split_config_path
from othellomc.eval.tournament import TournamentConfig, run_tournament

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Round-robin between configured Othello agents.")
    parser.add_argument("config", type=str, help="Config path, e.g. 'configs/tournament.yaml'")
    parser.add_argument("overrides", nargs="*", help="Hydra overrides, e.g. workers=8")
    args = parser.parse_args()

    config_dir, config_name = split_config_path(args.config)
    if not (Path(config_dir) / f"{config_name}.yaml").exists():
        logger.error(f"Config file not found: {args.config}")
        sys.exit(1)

    config = load_config(
        TournamentConfig, config_dir, config_name, overrides=args.overrides or None
    )
    logger.info(
        f"{len(config.agents)} agents, {config.games_per_matchup} games per matchup, "
        f"{config.workers} workers"
    )

    result = run_tournament(config)

    for table in (result.standings_table(), result.wdl_table(), result.stones_table()):
        print()
        print(table)


if __name__ == "__main__":
    main()
