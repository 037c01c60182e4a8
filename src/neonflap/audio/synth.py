"""
Chiptune cue synthesis.

Each cue is a short oscillator sweep with a gain envelope, rendered to
16-bit mono samples. Oscillators take a phase in cycles so that
frequency sweeps stay continuous.
"""

from typing import Callable, Dict
import array
import math

SAMPLE_RATE = 44100
MAX_AMPLITUDE = 32767


def square(phase: float) -> float:
    """Square wave oscillator."""
    return 1.0 if phase % 1 < 0.5 else -1.0


def sine(phase: float) -> float:
    """Sine wave oscillator."""
    return math.sin(2 * math.pi * phase)


def saw(phase: float) -> float:
    """Sawtooth wave oscillator."""
    return 2 * (phase % 1) - 1


def linear_ramp(start: float, end: float, t: float, duration: float) -> float:
    """Value of a linear ramp from ``start`` to ``end`` at time ``t``."""
    if t >= duration:
        return end
    return start + (end - start) * (t / duration)


def exp_ramp(start: float, end: float, t: float, duration: float) -> float:
    """Value of an exponential ramp. ``start`` and ``end`` must be positive."""
    if t >= duration:
        return end
    return start * (end / start) ** (t / duration)


def render(
    wave: Callable[[float], float],
    duration: float,
    freq: Callable[[float], float],
    gain: Callable[[float], float],
    sample_rate: int = SAMPLE_RATE,
) -> array.array:
    """Render an oscillator with time-varying frequency and gain.

    Args:
        wave: Oscillator taking a phase in cycles
        duration: Length in seconds
        freq: Frequency in Hz as a function of time
        gain: Amplitude (0-1) as a function of time
        sample_rate: Samples per second

    Returns:
        Signed 16-bit mono samples
    """
    samples = array.array('h')
    phase = 0.0
    for i in range(int(sample_rate * duration)):
        t = i / sample_rate
        val = wave(phase) * gain(t)
        samples.append(int(max(-1.0, min(1.0, val)) * MAX_AMPLITUDE))
        phase += freq(t) / sample_rate
    return samples


def jump(sample_rate: int = SAMPLE_RATE) -> array.array:
    """Rising square blip, 150 to 600 Hz."""
    return render(
        square, 0.1,
        freq=lambda t: linear_ramp(150, 600, t, 0.1),
        gain=lambda t: exp_ramp(0.1, 0.01, t, 0.1),
        sample_rate=sample_rate,
    )


def score(sample_rate: int = SAMPLE_RATE) -> array.array:
    """Two-step sine chime."""
    return render(
        sine, 0.2,
        freq=lambda t: 1000 if t < 0.1 else 2000,
        gain=lambda t: linear_ramp(0.1, 0.01, t, 0.2),
        sample_rate=sample_rate,
    )


def crash(sample_rate: int = SAMPLE_RATE) -> array.array:
    """Falling sawtooth growl."""
    return render(
        saw, 0.3,
        freq=lambda t: exp_ramp(100, 10, t, 0.3),
        gain=lambda t: exp_ramp(0.2, 0.01, t, 0.3),
        sample_rate=sample_rate,
    )


CUES: Dict[str, Callable[..., array.array]] = {
    "jump": jump,
    "score": score,
    "crash": crash,
}


def render_cue(name: str, sample_rate: int = SAMPLE_RATE) -> array.array:
    """Render a named cue.

    Raises:
        KeyError: If the cue is unknown
    """
    return CUES[name](sample_rate)
