from __future__ import annotations

import pytest

from blockfall.config import GameConfig, RotationPolicy
from blockfall.timers import MotionGate, OneShotTimer, RepeatingTimer


def test_repeating_timer_fires_each_period_and_keeps_overshoot() -> None:
    timer = RepeatingTimer(1.0)
    assert timer.tick(0.5) is False
    assert timer.tick(1.0) is True
    assert timer.elapsed == pytest.approx(0.5)
    assert timer.tick(0.5) is True
    assert timer.elapsed == pytest.approx(0.0)


def test_repeating_timer_fires_once_for_a_long_frame() -> None:
    timer = RepeatingTimer(1.0)
    assert timer.tick(3.5) is True
    assert timer.elapsed == pytest.approx(0.5)
    assert timer.tick(0.25) is False


def test_one_shot_timer_stays_finished_until_reset() -> None:
    timer = OneShotTimer(1.0)
    assert timer.tick(0.5) is False
    assert timer.tick(0.75) is True
    assert timer.elapsed == 1.0
    assert timer.tick(0.0) is True
    timer.reset()
    assert not timer.finished


def test_gate_move_opens_once_then_restarts() -> None:
    gate = MotionGate.from_config(
        GameConfig(gravity_period=10.0, move_repeat=1.0, rotate_repeat=2.0)
    )
    assert gate.advance(0.5) is False
    assert gate.take_move() is False

    gate.advance(0.5)
    assert gate.take_move() is True
    # Consumed for this frame and restarted.
    assert gate.take_move() is False
    assert gate.move.elapsed == 0.0

    # The rotate gate runs on its own timer.
    assert gate.take_rotate() is False
    gate.advance(1.0)
    assert gate.take_rotate() is True
    assert gate.take_move() is True


def test_gate_reset_clears_all_timers() -> None:
    gate = MotionGate.from_config(GameConfig())
    gate.advance(5.0)
    gate.reset()
    assert gate.gravity.elapsed == 0.0
    assert gate.move.elapsed == 0.0
    assert gate.rotate.elapsed == 0.0
    assert gate.take_move() is False
    assert gate.take_rotate() is False


def test_config_rejects_non_positive_periods() -> None:
    with pytest.raises(ValueError):
        GameConfig(gravity_period=0)
    with pytest.raises(ValueError):
        GameConfig(move_repeat=-1.0)


def test_config_accepts_policy_names() -> None:
    assert GameConfig(rotation_policy="unchecked").rotation_policy is RotationPolicy.UNCHECKED
    with pytest.raises(ValueError):
        GameConfig(rotation_policy="sideways")
