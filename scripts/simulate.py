"""
Random self-play simulation for Blokus.

Plays complete games with RandomAgent for every seat and reports, per game,
the returns, the number of actions and the average legal_actions() time.

Usage:
    PYTHONPATH=. python scripts/simulate.py
    PYTHONPATH=. python scripts/simulate.py --games 10 --seed 7
    PYTHONPATH=. python scripts/simulate.py --rows 10 --cols 10 --naive-movegen
    PYTHONPATH=. python scripts/simulate.py --config game.yaml --record-out last_game.json
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from agents.random_agent import RandomAgent
from schemas.game_config import GameConfig
from spiel.registry import build_default_registry
from spiel.serialization import serialize_game_and_state
from utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def play_game(game, agent: RandomAgent) -> Dict[str, Any]:
    """
    Play one game to the end.

    Returns:
        Dictionary with the final state, returns, action count and timing
    """
    state = game.new_initial_state()
    movegen_seconds = 0.0
    movegen_calls = 0

    while not state.is_terminal():
        start = time.perf_counter()
        legal_actions = state.legal_actions()
        movegen_seconds += time.perf_counter() - start
        movegen_calls += 1

        action = agent.select_action(state, legal_actions)
        state.apply_action(action)

    return {
        "state": state,
        "returns": state.returns(),
        "scores": state.scores(),
        "num_actions": state.move_number(),
        "avg_movegen_ms": movegen_seconds * 1000.0 / max(movegen_calls, 1),
    }


def build_config(args: argparse.Namespace) -> GameConfig:
    """Config file first, then command-line overrides."""
    base: Dict[str, Any] = {}
    if args.config:
        base = GameConfig.from_file(args.config).model_dump()
    overrides = {"rows": args.rows, "cols": args.cols}
    if args.naive_movegen:
        overrides["use_frontier_movegen"] = False
    base.update({k: v for k, v in overrides.items() if v is not None})
    return GameConfig.from_dict(base)


def main(argv: Optional[List[str]] = None) -> List[Dict[str, Any]]:
    """Main function for the simulation script."""
    parser = argparse.ArgumentParser(description="Blokus random self-play simulation")
    parser.add_argument("--games", type=int, default=1,
                        help="Number of games to play")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for the agent")
    parser.add_argument("--rows", type=int, default=None,
                        help="Board rows (overrides config file)")
    parser.add_argument("--cols", type=int, default=None,
                        help="Board columns (overrides config file)")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML or JSON game config file")
    parser.add_argument("--naive-movegen", action="store_true",
                        help="Use the full-scan move generator instead of frontier pruning")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    parser.add_argument("--log-dir", type=str, default=None,
                        help="Also write logs to <log-dir>/simulate.log")
    parser.add_argument("--record-out", type=str, default=None,
                        help="Write the last game as a JSON record to this path")

    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level), Path(args.log_dir) if args.log_dir else None)

    config = build_config(args)
    registry = build_default_registry()
    game = registry.load_game("blokus", **config.model_dump())
    agent = RandomAgent(seed=args.seed)
    logger.info(f"Simulating {args.games} game(s) of {game}")

    results = []
    for game_index in range(args.games):
        result = play_game(game, agent)
        results.append(result)
        print(
            f"Game {game_index + 1}: returns={result['returns']} scores={result['scores']} "
            f"actions={result['num_actions']} avg_legal_actions_ms={result['avg_movegen_ms']:.3f}"
        )

    if args.record_out and results:
        record_path = Path(args.record_out)
        record_path.parent.mkdir(parents=True, exist_ok=True)
        record_path.write_text(serialize_game_and_state(game, results[-1]["state"]), encoding="utf-8")
        print(f"Last game record saved to {record_path}")

    return results


if __name__ == "__main__":
    main()
