#!/usr/bin/env python3
"""Play a head-to-head match between two configured agents.

Usage:
    python scripts/play_match.py configs/match.yaml
    python scripts/play_match.py configs/match.yaml agent1.search.level=weak n_games=10
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from othellomc.config.loader import load_config, split_config_path
from othellomc.eval.runner import MatchConfig, run_match

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Play a match between two Othello agents.")
    parser.add_argument("config", type=str, help="Config path, e.g. 'configs/match.yaml'")
    parser.add_argument("overrides", nargs="*", help="Hydra overrides, e.g. n_games=10")
    args = parser.parse_args()

    config_dir, config_name = split_config_path(args.config)
    if not (Path(config_dir) / f"{config_name}.yaml").exists():
        logger.error(f"Config file not found: {args.config}")
        sys.exit(1)

    config = load_config(MatchConfig, config_dir, config_name, overrides=args.overrides or None)
    result, agent1, agent2 = run_match(config)

    print()
    print(result.summary(agent1.name, agent2.name))


if __name__ == "__main__":
    main()
