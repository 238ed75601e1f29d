"""Simple pygame front-end for the block-fall engine.

Only window setup, key polling and drawing live here.  Each frame the held
arrow keys are turned into an :class:`~blockfall.game_state.InputState` and the
frame time is handed to :meth:`GameState.step`.
"""

from __future__ import annotations

import logging
import random
from typing import Mapping, Optional, Sequence, Union

import pygame

from .board import Cell
from .config import Arena, GameConfig
from .game_state import GameState, InputState

# Frames per second to run the game loop at
FPS = 60
# Screen pixels per world unit
PIXELS_PER_UNIT = 3
BACKGROUND = (0, 0, 0)

LOGGER = logging.getLogger(__name__)

KeyState = Union[Sequence[bool], Mapping[int, bool]]


def read_input(pressed: KeyState) -> InputState:
    """Translate held keys into the logical actions for this frame."""

    return InputState(
        move_left=bool(pressed[pygame.K_LEFT]),
        move_right=bool(pressed[pygame.K_RIGHT]),
        rotate=bool(pressed[pygame.K_UP]),
    )


def screen_size(arena: Arena) -> tuple[int, int]:
    return int(arena.width * PIXELS_PER_UNIT), int(arena.height * PIXELS_PER_UNIT)


def cell_rect(cell: Cell, arena: Arena, scale: float) -> pygame.Rect:
    """Return the screen rectangle of ``cell``, shrunk by ``scale``.

    The arena's top-left corner maps to pixel ``(0, 0)`` and screen ``y`` grows
    downwards, so rows are flipped.
    """

    size = arena.cell_size * PIXELS_PER_UNIT
    inner = size * scale
    margin = (size - inner) / 2
    col, row = cell.position
    left = col * size + margin
    top = (arena.rows - 1 - row) * size + margin
    return pygame.Rect(round(left), round(top), round(inner), round(inner))


def draw_cells(screen: pygame.Surface, state: GameState) -> None:
    """Render the settled cells and the active piece."""

    arena = state.config.arena
    for cell in state.cells():
        rect = cell_rect(cell, arena, state.config.sprite_scale)
        pygame.draw.rect(screen, cell.color, rect)


class GameRunner:
    """Own the window and drive the game loop until it is closed."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        seed: Optional[int] = None,
        fps: int = FPS,
    ) -> None:
        self.config = config or GameConfig()
        self.seed = seed
        self.fps = fps
        self._running = False
        self._state: Optional[GameState] = None

    @property
    def state(self) -> Optional[GameState]:
        return self._state

    def run(self) -> None:
        pygame.init()
        try:
            screen = pygame.display.set_mode(screen_size(self.config.arena))
            pygame.display.set_caption("blockfall")
            clock = pygame.time.Clock()

            self._state = GameState(config=self.config, rng=random.Random(self.seed))
            self._state.reset_game()

            self._running = True
            while self._running:
                dt = clock.tick(self.fps) / 1000.0
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self._running = False
                if not self._running:
                    break

                self._state.step(dt, read_input(pygame.key.get_pressed()))

                screen.fill(BACKGROUND)
                draw_cells(screen, self._state)
                pygame.display.flip()
        finally:
            self._running = False
            pygame.quit()
        LOGGER.info("Game stopped after %d frames", self._state.frames if self._state else 0)


def main(config: Optional[GameConfig] = None, *, seed: Optional[int] = None, fps: int = FPS) -> None:
    GameRunner(config, seed=seed, fps=fps).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
