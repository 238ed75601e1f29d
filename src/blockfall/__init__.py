"""Core of a falling-block puzzle game."""

from .board import Board, Cell, GridCoord
from .config import Arena, GameConfig, RotationPolicy
from .errors import InvariantViolation
from .shapes import ShapeKind, ShapeSpec, shape_spec
from .piece import ActivePiece
from .timers import MotionGate, OneShotTimer, RepeatingTimer
from .collision import MoveFlags, fits, horizontal_flags, should_lock
from .game_state import GameState, InputState
from .utils import render_grid

__all__ = [
    "ActivePiece",
    "Arena",
    "Board",
    "Cell",
    "GameConfig",
    "GameState",
    "GridCoord",
    "InputState",
    "InvariantViolation",
    "MotionGate",
    "MoveFlags",
    "OneShotTimer",
    "RepeatingTimer",
    "RotationPolicy",
    "ShapeKind",
    "ShapeSpec",
    "fits",
    "horizontal_flags",
    "render_grid",
    "shape_spec",
    "should_lock",
]
