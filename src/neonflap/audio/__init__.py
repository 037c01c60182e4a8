"""Synthesized chiptune cues and the mixer-backed player."""

from .engine import AudioEngine, get_audio_engine

__all__ = ["AudioEngine", "get_audio_engine"]
