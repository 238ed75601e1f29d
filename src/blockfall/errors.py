"""Exception types raised by the engine."""

from __future__ import annotations


class InvariantViolation(AssertionError):
    """A state that the engine should never reach was observed.

    Raised explicitly rather than via ``assert`` so the check survives
    ``python -O``.  It signals a bug in the collision or lock logic and is never
    caught by the engine itself.
    """
