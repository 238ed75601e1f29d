"""Utility helpers for renderers."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .game_state import GameState

EMPTY = 0
SETTLED = 1
ACTIVE = 2

Grid = NDArray[np.uint8]

_GLYPHS = {EMPTY: ".", SETTLED: "#", ACTIVE: "@"}


def render_grid(state: GameState) -> Grid:
    """Return an occupancy grid of ``state`` with the top row first.

    Settled cells are marked ``SETTLED`` and active cells ``ACTIVE``.  Cells
    outside the arena are skipped so a renderer never indexes out of range.
    """

    arena = state.config.arena
    grid = np.zeros((arena.rows, arena.columns), dtype=np.uint8)
    for cell in state.board:
        col, row = cell.position
        grid[arena.rows - 1 - row, col] = SETTLED
    if state.active is not None:
        for col, row in state.active.cells:
            if 0 <= row < arena.rows and 0 <= col < arena.columns:
                grid[arena.rows - 1 - row, col] = ACTIVE
    return grid


def format_grid(grid: Grid) -> str:
    return "\n".join("".join(_GLYPHS[int(v)] for v in row) for row in grid)
