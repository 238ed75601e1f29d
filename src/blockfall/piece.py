"""The active, player-controlled piece."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .board import Cell, Color, GridCoord
from .errors import InvariantViolation
from .shapes import ShapeKind, shape_spec

PIECE_SIZE = 4


def rotate_about(
    cells: List[GridCoord], pivot: GridCoord, quarter_turns: int = 1
) -> List[GridCoord]:
    """Return ``cells`` rotated counter-clockwise about ``pivot``.

    The rotation is computed in continuous space and snapped back to the grid.
    Integer offsets rotated by multiples of 90 degrees land exactly on grid
    lines, so snapping only removes float noise.
    """

    angle = np.pi / 2 * quarter_turns
    rotation = np.array(
        [[np.cos(angle), -np.sin(angle)], [np.sin(angle), np.cos(angle)]]
    )
    origin = np.array(pivot, dtype=float)
    offsets = np.array(cells, dtype=float) - origin
    rotated = offsets @ rotation.T + origin
    snapped = np.rint(rotated).astype(int)
    return [GridCoord(int(c), int(r)) for c, r in snapped]


@dataclass
class ActivePiece:
    """Four cells sharing a colour and a rotation pivot."""

    kind: ShapeKind
    cells: List[GridCoord]
    color: Color
    pivot_index: int = 0

    def __post_init__(self) -> None:
        self.cells = [GridCoord(*c) for c in self.cells]
        if len(self.cells) != PIECE_SIZE or len(set(self.cells)) != PIECE_SIZE:
            raise InvariantViolation(
                f"An active piece needs {PIECE_SIZE} distinct cells, got {self.cells}"
            )
        if not 0 <= self.pivot_index < PIECE_SIZE:
            raise InvariantViolation(f"Pivot index {self.pivot_index} out of range")

    @classmethod
    def spawn(cls, kind: ShapeKind, origin: GridCoord) -> "ActivePiece":
        """Create a piece of ``kind`` with its offsets applied to ``origin``."""

        spec = shape_spec(kind)
        cells = [origin.shifted(dc, dr) for dc, dr in spec.offsets]
        return cls(kind=kind, cells=cells, color=spec.color, pivot_index=spec.pivot)

    @property
    def pivot(self) -> GridCoord:
        return self.cells[self.pivot_index]

    @property
    def rotates(self) -> bool:
        return shape_spec(self.kind).rotates

    def move(self, dcol: int, drow: int) -> None:
        """Translate every cell by ``dcol`` columns and ``drow`` rows."""

        self.cells = [c.shifted(dcol, drow) for c in self.cells]

    def rotated_cells(self, quarter_turns: int = 1) -> List[GridCoord]:
        """Return the cells this piece would occupy after rotating.

        Pieces that do not rotate return their current cells.
        """

        if not self.rotates:
            return list(self.cells)
        return rotate_about(self.cells, self.pivot, quarter_turns)

    def rotate(self, quarter_turns: int = 1) -> None:
        """Rotate in place about the pivot without any validation."""

        self.cells = self.rotated_cells(quarter_turns)

    def as_cells(self) -> List[Cell]:
        return [Cell(c, self.color) for c in self.cells]

    def columns(self) -> Tuple[int, ...]:
        return tuple(c.col for c in self.cells)

    def rows(self) -> Tuple[int, ...]:
        return tuple(c.row for c in self.cells)
