"""Headless simulation helpers.

These drive a :class:`GameState` with a fixed frame time and scripted or
random input, without any window.  They back the ASCII mode of the CLI and the
soak tool under ``examples/``.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional

from .game_state import IDLE, GameState, InputState

# Frame time used when none is given, matching a 60 Hz display.
FRAME_DT = 1 / 60

InputSource = Callable[[int], InputState]


def idle_input(_frame: int) -> InputState:
    return IDLE


class RandomInput:
    """Hold each action independently with probability ``p`` per frame."""

    def __init__(self, rng: Optional[random.Random] = None, p: float = 0.3) -> None:
        self._rng = rng or random.Random()
        self.p = p

    def __call__(self, _frame: int) -> InputState:
        return InputState(
            move_left=self._rng.random() < self.p,
            move_right=self._rng.random() < self.p,
            rotate=self._rng.random() < self.p,
        )


@dataclass
class SimulationResult:
    frames: int
    pieces: int
    resets: int


def simulate(
    state: GameState,
    frames: int,
    *,
    dt: float = FRAME_DT,
    inputs: InputSource = idle_input,
    check: bool = False,
) -> SimulationResult:
    """Step ``state`` for ``frames`` frames of ``dt`` seconds.

    ``state`` must already have an active piece.  With ``check`` set the
    invariants are verified after every frame.  ``pieces`` in the result counts
    every lock during the run, including those before a full-arena reset.
    """

    locked = 0
    resets_before = state.resets
    for frame in range(frames):
        if state.step(dt, inputs(frame)):
            locked += 1
        if check:
            state.check_invariants()
    return SimulationResult(frames=frames, pieces=locked, resets=state.resets - resets_before)
