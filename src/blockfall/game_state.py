"""Per-frame game state and the piece lifecycle.

A :class:`GameState` owns the board, the active piece and the motion timers.
The host loop calls :meth:`GameState.step` once per frame with the elapsed
time and the logical input state; everything else happens in here, in a fixed
order:

1. recompute the horizontal movement flags,
2. apply a horizontal move if the move gate is open,
3. apply a rotation if the rotate gate is open,
4. apply gravity if the gravity timer fired, locking and respawning when the
   piece cannot fall.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board, Cell
from .collision import MoveFlags, fits, horizontal_flags, should_lock
from .config import GameConfig, RotationPolicy
from .errors import InvariantViolation
from .piece import ActivePiece
from .shapes import ShapeKind, kind_from_index
from .timers import MotionGate


LOGGER = logging.getLogger(__name__)

# Kind used for the first piece of every run.
FIRST_KIND = ShapeKind.O


@dataclass(frozen=True)
class InputState:
    """Logical actions requested during the current frame."""

    move_left: bool = False
    move_right: bool = False
    rotate: bool = False


IDLE = InputState()


@dataclass
class GameState:
    """Mutable state for a game session."""

    config: GameConfig = field(default_factory=GameConfig)
    rng: random.Random = field(default_factory=random.Random)
    board: Board = field(init=False)
    gate: MotionGate = field(init=False)
    active: Optional[ActivePiece] = None
    flags: MoveFlags = field(default_factory=MoveFlags)
    pieces: int = 0
    resets: int = 0
    frames: int = 0
    _first_spawn: bool = field(default=True, init=False, repr=False)

    def __post_init__(self) -> None:
        arena = self.config.arena
        self.board = Board(arena.columns, arena.rows)
        self.gate = MotionGate.from_config(self.config)

    # Lifecycle --------------------------------------------------------
    def _random_kind(self) -> ShapeKind:
        return kind_from_index(self.rng.randrange(len(ShapeKind)))

    def spawn_piece(self) -> ActivePiece:
        """Spawn and return a new active piece at the arena's spawn origin.

        The first piece of a run is always an O; later ones are picked
        uniformly at random.
        """

        if self.active is not None:
            raise InvariantViolation("Cannot spawn while a piece is still active")
        kind = FIRST_KIND if self._first_spawn else self._random_kind()
        self._first_spawn = False
        self.active = ActivePiece.spawn(kind, self.config.arena.spawn_origin)
        LOGGER.debug("Spawned %s at %s", kind.value, self.active.cells)
        return self.active

    def reset_game(self) -> None:
        """Clear the board and timers and start a new run."""

        self.board.clear()
        self.gate.reset()
        self.active = None
        self.flags = MoveFlags()
        self.pieces = 0
        self._first_spawn = True
        self.spawn_piece()
        LOGGER.info("Game started")

    def lock_and_spawn(self) -> None:
        """Settle the active piece and spawn its replacement."""

        piece = self._require_active()
        self.board.lock(piece.cells, piece.color)
        self.pieces += 1
        LOGGER.debug("Locked %s at %s", piece.kind.value, piece.cells)
        self.active = None
        spawned = self.spawn_piece()
        if any(self.board.is_occupied(c) for c in spawned.cells):
            self._arena_full()

    def _arena_full(self) -> None:
        LOGGER.info("Arena full after %d pieces. Resetting.", self.pieces)
        self.resets += 1
        self.reset_game()

    # Frame phases -----------------------------------------------------
    def _require_active(self) -> ActivePiece:
        if self.active is None:
            raise InvariantViolation("No active piece")
        return self.active

    def update_flags(self) -> MoveFlags:
        """Recompute and store the horizontal movement flags."""

        self.flags = horizontal_flags(
            self.board, self._require_active(), self.config.arena
        )
        return self.flags

    def apply_horizontal(self, inputs: InputState) -> int:
        """Shift the piece according to ``inputs`` and the current flags.

        Left and right cancel out when both are held and legal.  Returns the
        column offset that was applied.
        """

        piece = self._require_active()
        dcol = 0
        if inputs.move_left and self.flags.can_move_left:
            dcol -= 1
        if inputs.move_right and self.flags.can_move_right:
            dcol += 1
        if dcol:
            piece.move(dcol, 0)
        return dcol

    def apply_rotation(self) -> bool:
        """Rotate the piece a quarter turn, honouring the rotation policy.

        Returns ``True`` if the piece's cells changed.
        """

        piece = self._require_active()
        if not piece.rotates:
            return False
        rotated = piece.rotated_cells()
        if self.config.rotation_policy is RotationPolicy.REJECT and not fits(
            self.board, rotated, self.config.arena
        ):
            LOGGER.debug("Rejected rotation of %s to %s", piece.kind.value, rotated)
            return False
        piece.cells = rotated
        return True

    def apply_gravity(self) -> bool:
        """Drop the piece one row, or lock it if it cannot fall.

        Returns ``True`` if the piece was locked.
        """

        piece = self._require_active()
        if should_lock(self.board, piece):
            self.lock_and_spawn()
            return True
        piece.move(0, -1)
        return False

    def step(self, dt: float, inputs: InputState = IDLE) -> bool:
        """Advance the game by one frame of ``dt`` seconds.

        Returns ``True`` if a piece locked during this frame.
        """

        self._require_active()
        self.frames += 1
        gravity_fired = self.gate.advance(dt)
        self.update_flags()
        if self.gate.take_move():
            self.apply_horizontal(inputs)
        if self.gate.take_rotate() and inputs.rotate:
            self.apply_rotation()
        if gravity_fired:
            return self.apply_gravity()
        return False

    # Views ------------------------------------------------------------
    def cells(self) -> List[Cell]:
        """Return every settled and active cell for rendering."""

        cells = list(self.board)
        if self.active is not None:
            cells.extend(self.active.as_cells())
        return cells

    def check_invariants(self) -> None:
        """Raise :class:`InvariantViolation` if the state is inconsistent."""

        piece = self._require_active()
        arena = self.config.arena
        for cell in piece.cells:
            if not arena.contains(cell):
                raise InvariantViolation(f"Active cell {cell} outside the arena")
            if self.board.is_occupied(cell):
                raise InvariantViolation(f"Active cell {cell} overlaps the board")
        for settled in self.board:
            if not arena.contains(settled.position):
                raise InvariantViolation(f"Settled cell {settled.position} outside the arena")
