"""Unit tests for FrameClock."""
from __future__ import annotations

from neonflap.core.clock import FrameClock


def test_advance_and_reset():
    clock = FrameClock()
    assert clock.frame == 0
    assert clock.advance() == 1
    assert clock.advance() == 2

    clock.reset()
    assert clock.frame == 0


def test_elapsed_since():
    clock = FrameClock()
    for _ in range(42):
        clock.advance()
    assert clock.elapsed_since(12) == 30
    assert clock.elapsed_since(42) == 0


def test_every():
    clock = FrameClock()
    hits = []
    for _ in range(12):
        if clock.every(5):
            hits.append(clock.frame)
        clock.advance()
    assert hits == [0, 5, 10]
