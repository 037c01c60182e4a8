"""Unit tests for cue synthesis."""
from __future__ import annotations

import pytest

from neonflap.audio import synth


@pytest.mark.parametrize("name, seconds", [("jump", 0.1), ("score", 0.2), ("crash", 0.3)])
def test_cue_lengths(name, seconds):
    samples = synth.render_cue(name, sample_rate=8000)
    assert samples.typecode == "h"
    assert len(samples) == int(8000 * seconds)


def test_cues_are_quiet_and_decay():
    """Peak gain never exceeds the cue's starting gain, and the tail is quieter."""
    for name, start_gain in (("jump", 0.1), ("score", 0.1), ("crash", 0.2)):
        samples = synth.render_cue(name, sample_rate=8000)
        peak = max(abs(s) for s in samples)
        assert 0 < peak <= start_gain * synth.MAX_AMPLITUDE + 1

        quarter = len(samples) // 4
        head = max(abs(s) for s in samples[:quarter])
        tail = max(abs(s) for s in samples[-quarter:])
        assert tail < head


def test_unknown_cue():
    with pytest.raises(KeyError):
        synth.render_cue("fanfare")


def test_ramps():
    assert synth.linear_ramp(150, 600, 0.05, 0.1) == pytest.approx(375)
    assert synth.linear_ramp(150, 600, 0.5, 0.1) == 600
    assert synth.exp_ramp(100, 10, 0.15, 0.3) == pytest.approx(100 * 0.1 ** 0.5)
    assert synth.exp_ramp(0.2, 0.01, 1.0, 0.3) == 0.01


def test_oscillators():
    assert synth.square(0.25) == 1.0
    assert synth.square(0.75) == -1.0
    assert synth.sine(0.25) == pytest.approx(1.0)
    assert synth.saw(0.5) == pytest.approx(0.0)
