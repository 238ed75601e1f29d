"""Command line entry point.

Run with: `python -m blockfall`

Without options a pygame window opens.  ``--ascii`` runs a headless
simulation instead and prints the final frame, useful as a smoke test on
machines without a display.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from .config import GameConfig, RotationPolicy
from .game_state import GameState
from .headless import FRAME_DT, RandomInput, idle_input, simulate
from .utils import format_grid, render_grid

LOGGER = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> GameConfig:
    policy = RotationPolicy.UNCHECKED if args.unchecked_rotation else RotationPolicy.REJECT
    return GameConfig(
        gravity_period=args.gravity,
        move_repeat=args.move_repeat,
        rotate_repeat=args.rotate_repeat,
        rotation_policy=policy,
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(prog="blockfall", description=__doc__.splitlines()[0])
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece selection.")
    parser.add_argument(
        "--gravity",
        type=float,
        default=defaults.gravity_period,
        help="Seconds between automatic downward moves.",
    )
    parser.add_argument(
        "--move-repeat",
        type=float,
        default=defaults.move_repeat,
        help="Seconds between horizontal moves while a direction is held.",
    )
    parser.add_argument(
        "--rotate-repeat",
        type=float,
        default=defaults.rotate_repeat,
        help="Seconds between rotations while rotate is held.",
    )
    parser.add_argument(
        "--unchecked-rotation",
        action="store_true",
        help="Apply rotations without checking walls or settled cells.",
    )
    parser.add_argument("--fps", type=int, default=60, help="Frame rate of the pygame window.")
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Run headless and print the final frame instead of opening a window.",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=600,
        help="Number of frames to simulate in --ascii mode.",
    )
    parser.add_argument(
        "--random-input",
        action="store_true",
        help="Feed random key presses in --ascii mode.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    )
    return parser.parse_args(argv)


def run_ascii(config: GameConfig, *, seed: Optional[int], frames: int, random_input: bool) -> str:
    rng = random.Random(seed)
    state = GameState(config=config, rng=rng)
    state.reset_game()
    inputs = RandomInput(random.Random(seed)) if random_input else idle_input
    result = simulate(state, frames, dt=FRAME_DT, inputs=inputs)
    LOGGER.info(
        "Simulated %d frames: %d pieces locked, %d resets",
        result.frames,
        result.pieces,
        result.resets,
    )
    return format_grid(render_grid(state))


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = build_config(args)
    except ValueError as exc:
        raise SystemExit(f"blockfall: {exc}")

    if args.ascii:
        print(run_ascii(config, seed=args.seed, frames=args.frames, random_input=args.random_input))
        return

    from .run_pygame import main as run_window

    run_window(config, seed=args.seed, fps=args.fps)


if __name__ == "__main__":
    main()
