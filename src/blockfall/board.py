"""Board representation holding the settled cells."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, NamedTuple, Tuple

from .errors import InvariantViolation


# Dimensions of the default arena in cells.
WIDTH = 20
HEIGHT = 20

Color = Tuple[int, int, int]


class GridCoord(NamedTuple):
    """Integer cell position; ``row`` 0 is the arena floor."""

    col: int
    row: int

    def shifted(self, dcol: int, drow: int) -> "GridCoord":
        return GridCoord(self.col + dcol, self.row + drow)


class Cell(NamedTuple):
    position: GridCoord
    color: Color


class Board:
    """Settled cells keyed by their grid coordinate.

    Cells are only ever added; there is no line clearing.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self._cells: Dict[GridCoord, Cell] = {}

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells.values())

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def is_occupied(self, coord: GridCoord) -> bool:
        """Return ``True`` if a settled cell sits at ``coord``."""

        return coord in self._cells

    def get_cell(self, coord: GridCoord) -> Cell:
        """Return the settled cell at ``coord``.

        Raises:
            KeyError: If ``coord`` is empty.
        """

        return self._cells[coord]

    def in_bounds(self, coord: GridCoord) -> bool:
        return 0 <= coord.col < self.width and 0 <= coord.row < self.height

    def lock(self, cells: Iterable[GridCoord], color: Color) -> None:
        """Settle ``cells`` with ``color``.

        The whole batch is validated before anything is written, so a failed
        call leaves the board untouched.

        Raises:
            InvariantViolation: If a coordinate is repeated, already occupied or
                outside the board.
        """

        coords = [GridCoord(*c) for c in cells]
        if len(set(coords)) != len(coords):
            raise InvariantViolation(f"Repeated coordinate in lock: {coords}")
        for coord in coords:
            if not self.in_bounds(coord):
                raise InvariantViolation(f"Cell {coord} locked outside the board")
            if coord in self._cells:
                raise InvariantViolation(f"Cell {coord} is already occupied")
        for coord in coords:
            self._cells[coord] = Cell(coord, color)

    def clear(self) -> None:
        """Remove every settled cell, used only when a new run starts."""

        self._cells.clear()
