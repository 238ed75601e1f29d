"""Soak-test the engine with random input.

Run with::

    PYTHONPATH=src python examples/soak_run.py

Every frame of every run is checked against the board and piece invariants;
the first violation aborts with its traceback.  Pass ``--help`` to see options.
"""

from __future__ import annotations

import argparse
import logging
import random

from blockfall.config import GameConfig, RotationPolicy
from blockfall.game_state import GameState
from blockfall.headless import RandomInput, SimulationResult, simulate


LOGGER = logging.getLogger(__name__)


def run_once(seed: int, frames: int, config: GameConfig) -> SimulationResult:
    state = GameState(config=config, rng=random.Random(seed))
    state.reset_game()
    return simulate(
        state,
        frames,
        inputs=RandomInput(random.Random(seed + 1)),
        check=True,
    )


def log_result(result: SimulationResult, *, index: int, seed: int) -> str:
    message = (
        f"frames={result.frames}, pieces={result.pieces}, resets={result.resets}"
    )
    LOGGER.info("Run %d (seed %d): %s", index, seed, message)
    return message


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--runs", type=int, default=5, help="Number of simulations to run.")
    parser.add_argument("--frames", type=int, default=20_000, help="Frames per simulation.")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first run.")
    parser.add_argument(
        "--unchecked-rotation",
        action="store_true",
        help="Soak the unchecked rotation policy (expected to break invariants).",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level for summaries.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    policy = RotationPolicy.UNCHECKED if args.unchecked_rotation else RotationPolicy.REJECT
    config = GameConfig(rotation_policy=policy)
    for index in range(args.runs):
        seed = args.seed + index
        log_result(run_once(seed, args.frames, config), index=index, seed=seed)


if __name__ == "__main__":
    main()
