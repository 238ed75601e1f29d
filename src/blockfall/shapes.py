"""Shape catalog for the seven piece kinds.

Each shape is four ``(dcol, drow)`` offsets from the spawn origin.  The first
offset is the rotation pivot.  Offsets hang downwards from
the origin so a freshly spawned piece lies entirely inside the arena.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .board import Color

Offsets = Tuple[Tuple[int, int], ...]


class ShapeKind(str, Enum):
    """The seven piece kinds, in the order used to pick colours."""

    O = "O"
    I = "I"
    S = "S"
    Z = "Z"
    L = "L"
    J = "J"
    T = "T"

    @property
    def ordinal(self) -> int:
        return _KIND_ORDER.index(self)


_KIND_ORDER: List[ShapeKind] = list(ShapeKind)

# Colours associated positionally with the kinds above.  The last entry repeats
# the third; both are kept so the index mapping stays fixed.
COLORS: Tuple[Color, ...] = (
    (128, 128, 255),
    (128, 255, 128),
    (255, 128, 128),
    (255, 255, 128),
    (255, 128, 255),
    (128, 255, 255),
    (255, 128, 128),
)


@dataclass(frozen=True)
class ShapeSpec:
    kind: ShapeKind
    offsets: Offsets
    color: Color
    pivot: int = 0
    rotates: bool = True


# The first offset of every shape is the cell it rotates about.
_SHAPES: Dict[ShapeKind, Offsets] = {
    ShapeKind.O: ((0, 0), (1, 0), (0, -1), (1, -1)),
    ShapeKind.I: ((0, -1), (0, 0), (0, -2), (0, -3)),
    ShapeKind.S: ((1, -1), (1, 0), (2, 0), (0, -1)),
    ShapeKind.Z: ((1, -1), (0, 0), (1, 0), (2, -1)),
    ShapeKind.L: ((0, -1), (0, 0), (0, -2), (1, -2)),
    ShapeKind.J: ((1, -1), (1, 0), (1, -2), (0, -2)),
    ShapeKind.T: ((1, 0), (0, 0), (2, 0), (1, -1)),
}


SHAPE_SPECS: Dict[ShapeKind, ShapeSpec] = {
    kind: ShapeSpec(
        kind=kind,
        offsets=offsets,
        color=COLORS[kind.ordinal],
        # A 2x2 square looks identical after a quarter turn.
        rotates=kind is not ShapeKind.O,
    )
    for kind, offsets in _SHAPES.items()
}


def shape_spec(kind: ShapeKind) -> ShapeSpec:
    """Return the catalog entry for ``kind``."""

    return SHAPE_SPECS[kind]


def kind_from_index(index: int) -> ShapeKind:
    """Return the kind at position ``index`` (0-6) of the catalog order."""

    return _KIND_ORDER[index]
