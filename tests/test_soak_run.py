import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from examples.soak_run import log_result, run_once
from blockfall.config import GameConfig


def test_run_once_survives_random_input():
    result = run_once(seed=11, frames=3000, config=GameConfig())
    assert result.frames == 3000
    assert result.pieces > 0


def test_log_result_reports_counts(caplog):
    result = run_once(seed=5, frames=600, config=GameConfig())
    with caplog.at_level(logging.INFO, logger="examples.soak_run"):
        message = log_result(result, index=2, seed=5)

    assert f"pieces={result.pieces}" in message
    text = "".join(caplog.messages)
    assert "Run 2 (seed 5)" in text
    assert message in text
