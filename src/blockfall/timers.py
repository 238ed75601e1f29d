"""Countdown timers that throttle gravity, movement and rotation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import GameConfig


@dataclass
class RepeatingTimer:
    """Fires once whenever ``period`` seconds have accumulated.

    Overshoot carries over into the next period.  A single call to
    :meth:`tick` reports at most one firing even if the frame was longer than
    several periods.
    """

    period: float
    elapsed: float = 0.0

    def tick(self, dt: float) -> bool:
        self.elapsed += dt
        if self.elapsed < self.period:
            return False
        self.elapsed %= self.period
        return True

    def reset(self) -> None:
        self.elapsed = 0.0


@dataclass
class OneShotTimer:
    """Counts up to ``duration`` and stays finished until restarted."""

    duration: float
    elapsed: float = 0.0

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    def tick(self, dt: float) -> bool:
        """Advance by ``dt`` seconds and return whether the timer has finished."""

        self.elapsed = min(self.elapsed + dt, self.duration)
        return self.finished

    def reset(self) -> None:
        self.elapsed = 0.0


@dataclass
class MotionGate:
    """The three independent gates consulted every frame."""

    gravity: RepeatingTimer
    move: OneShotTimer
    rotate: OneShotTimer
    _move_open: bool = field(default=False, init=False, repr=False)
    _rotate_open: bool = field(default=False, init=False, repr=False)

    @classmethod
    def from_config(cls, config: GameConfig) -> "MotionGate":
        return cls(
            gravity=RepeatingTimer(config.gravity_period),
            move=OneShotTimer(config.move_repeat),
            rotate=OneShotTimer(config.rotate_repeat),
        )

    def advance(self, dt: float) -> bool:
        """Advance all timers by ``dt`` seconds.

        Returns ``True`` if gravity fired.  Whether the move and rotate gates
        opened is available through :meth:`take_move` and :meth:`take_rotate`.
        """

        self._move_open = self.move.tick(dt)
        self._rotate_open = self.rotate.tick(dt)
        return self.gravity.tick(dt)

    def take_move(self) -> bool:
        """Consume the horizontal gate for this frame.

        When open, the timer restarts regardless of whether a move is then
        applied, which gives a fixed repeat cadence while a key is held.
        """

        if not self._move_open:
            return False
        self._move_open = False
        self.move.reset()
        return True

    def take_rotate(self) -> bool:
        """Consume the rotation gate for this frame; same policy as moves."""

        if not self._rotate_open:
            return False
        self._rotate_open = False
        self.rotate.reset()
        return True

    def reset(self) -> None:
        self.gravity.reset()
        self.move.reset()
        self.rotate.reset()
        self._move_open = False
        self._rotate_open = False
