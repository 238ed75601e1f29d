from __future__ import annotations

import numpy as np

from blockfall.board import GridCoord
from blockfall.game_state import GameState
from blockfall.utils import ACTIVE, EMPTY, SETTLED, format_grid, render_grid


def test_grid_is_top_row_first() -> None:
    state = GameState()
    state.reset_game()
    state.board.lock([GridCoord(0, 0)], (1, 2, 3))

    grid = render_grid(state)

    assert grid.shape == (20, 20)
    assert grid.dtype == np.uint8
    assert grid[19, 0] == SETTLED
    # The square spawns on rows 18-19, columns 10-11.
    assert grid[0, 10] == ACTIVE
    assert grid[1, 11] == ACTIVE
    assert int(np.count_nonzero(grid == ACTIVE)) == 4
    assert int(np.count_nonzero(grid == EMPTY)) == 400 - 5


def test_format_grid_uses_glyphs() -> None:
    state = GameState()
    state.reset_game()
    state.board.lock([GridCoord(0, 0)], (1, 2, 3))

    lines = format_grid(render_grid(state)).splitlines()

    assert len(lines) == 20
    assert all(len(line) == 20 for line in lines)
    assert lines[0][10:12] == "@@"
    assert lines[-1][0] == "#"
    assert set("".join(lines)) == {".", "#", "@"}
