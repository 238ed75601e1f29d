"""Configuration and arena geometry for the block-fall engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .board import GridCoord


# Size of a single cell in world units.
CELL_SIZE = 10.0
# Arena rectangle in world units.  The left edge sits at ``ARENA_LEFT`` and the
# floor is ``ARENA_TOP - ARENA_HEIGHT``.
ARENA_LEFT = -100.0
ARENA_TOP = 100.0
ARENA_WIDTH = 200.0
ARENA_HEIGHT = 200.0

# Seconds between automatic downward moves
GRAVITY_PERIOD = 0.1
# Seconds between horizontal moves while a direction is held
MOVE_REPEAT = 0.1
# Seconds between rotations while rotate is held
ROTATE_REPEAT = 0.15

# Fraction of a cell a sprite covers when drawn
SPRITE_SCALE = 0.9


class RotationPolicy(str, Enum):
    """How a requested rotation is validated before it is applied."""

    REJECT = "reject"
    UNCHECKED = "unchecked"


@dataclass(frozen=True)
class Arena:
    """Fixed playfield rectangle divided into square cells."""

    left: float = ARENA_LEFT
    top: float = ARENA_TOP
    width: float = ARENA_WIDTH
    height: float = ARENA_HEIGHT
    cell_size: float = CELL_SIZE

    def __post_init__(self) -> None:
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Arena dimensions must be positive")
        for name, extent in (("width", self.width), ("height", self.height)):
            cells = extent / self.cell_size
            if cells != int(cells):
                raise ValueError(f"Arena {name} is not a whole number of cells")

    @property
    def bottom(self) -> float:
        return self.top - self.height

    @property
    def columns(self) -> int:
        return int(self.width // self.cell_size)

    @property
    def rows(self) -> int:
        return int(self.height // self.cell_size)

    @property
    def spawn_origin(self) -> GridCoord:
        """Horizontal centre of the arena, one cell below the top edge."""

        return self.to_grid(self.left + self.width / 2, self.top - self.cell_size)

    def contains(self, coord: GridCoord) -> bool:
        """Return ``True`` if ``coord`` lies inside the arena."""

        return 0 <= coord.col < self.columns and 0 <= coord.row < self.rows

    def to_grid(self, x: float, y: float) -> GridCoord:
        """Snap the world position ``(x, y)`` to the cell whose corner it marks.

        Positions are expected to be multiples of the cell size away from the
        arena's bottom-left corner; rounding absorbs any float error so the
        result can be compared exactly.
        """

        col = round((x - self.left) / self.cell_size)
        row = round((y - self.bottom) / self.cell_size)
        return GridCoord(int(col), int(row))

    def to_world(self, coord: GridCoord) -> Tuple[float, float]:
        """Return the world position of the bottom-left corner of ``coord``."""

        return (
            self.left + coord.col * self.cell_size,
            self.bottom + coord.row * self.cell_size,
        )


@dataclass(frozen=True)
class GameConfig:
    """Tunable parameters for a game session."""

    arena: Arena = field(default_factory=Arena)
    gravity_period: float = GRAVITY_PERIOD
    move_repeat: float = MOVE_REPEAT
    rotate_repeat: float = ROTATE_REPEAT
    rotation_policy: RotationPolicy = RotationPolicy.REJECT
    sprite_scale: float = SPRITE_SCALE

    def __post_init__(self) -> None:
        # Accept the plain string values too.
        object.__setattr__(self, "rotation_policy", RotationPolicy(self.rotation_policy))
        for name in ("gravity_period", "move_repeat", "rotate_repeat"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if not 0 < self.sprite_scale <= 1:
            raise ValueError("sprite_scale must be in (0, 1]")
