"""Legality checks for moving and rotating the active piece.

All checks are plain scans of the active cells against the settled cells.
With at most four active cells and a 20x20 arena there is no need for anything
cleverer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .board import Board, GridCoord
from .config import Arena
from .piece import ActivePiece


@dataclass(frozen=True)
class MoveFlags:
    """Whether a one-column shift is legal this frame."""

    can_move_left: bool = True
    can_move_right: bool = True


def horizontal_flags(board: Board, piece: ActivePiece, arena: Arena) -> MoveFlags:
    """Return which horizontal moves ``piece`` may make on ``board``.

    A direction is blocked when any active cell is on the matching arena edge
    or when the neighbouring cell in that direction, on the same row, is
    settled.
    """

    left = right = True
    last_col = arena.columns - 1
    for cell in piece.cells:
        if cell.col <= 0:
            left = False
        if cell.col >= last_col:
            right = False
        for settled in board:
            if settled.position.row != cell.row:
                continue
            if settled.position.col == cell.col - 1:
                left = False
            if settled.position.col == cell.col + 1:
                right = False
    return MoveFlags(can_move_left=left, can_move_right=right)


def should_lock(board: Board, piece: ActivePiece) -> bool:
    """Return ``True`` if ``piece`` cannot fall one more row.

    That is the case when any active cell rests directly on a settled cell or
    on the arena floor.
    """

    for cell in piece.cells:
        if cell.row - 1 < 0:
            return True
        for settled in board:
            if settled.position.col == cell.col and settled.position.row == cell.row - 1:
                return True
    return False


def fits(board: Board, cells: Iterable[GridCoord], arena: Arena) -> bool:
    """Return ``True`` if every cell is inside ``arena`` and unoccupied."""

    for cell in cells:
        if not arena.contains(cell):
            return False
        if board.is_occupied(cell):
            return False
    return True
