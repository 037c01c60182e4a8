"""Startup wiring in run_game."""
from __future__ import annotations

import asyncio

import neonflap.audio.engine as audio_engine
from config.settings import Settings
from neonflap.audio.engine import AudioEngine
from neonflap.display.window import GameWindow
from neonflap.main import run_game


def test_audio_starts_before_window(monkeypatch):
    """The mixer is opened with our format before pygame.init() can open it."""
    calls = []

    def fake_init(self):
        calls.append("audio")
        return False

    async def fake_run(self):
        calls.append("window")

    monkeypatch.setattr(audio_engine, "_audio_engine", None)
    monkeypatch.setattr(AudioEngine, "init", fake_init)
    monkeypatch.setattr(GameWindow, "run", fake_run)

    asyncio.run(run_game(Settings(persist_best=False, audio_enabled=True)))

    assert calls == ["audio", "window"]
