"""Settings loading from the environment."""
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from config.settings import DisplaySettings, Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run in an empty directory so no .env file is picked up."""
    monkeypatch.chdir(tmp_path)
    for name in ("NEONFLAP_THEME", "NEONFLAP_DEBUG", "NEONFLAP_BEST_SCORE_PATH", "NEONFLAP_DISPLAY_SCALE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings()
    assert settings.theme == "neon"
    assert not settings.debug
    assert settings.audio_enabled
    assert settings.persist_best
    assert settings.best_score_path.name == "best.json"
    assert settings.display.fps == 60
    assert settings.display.scale == 2


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("NEONFLAP_THEME", "retro")
    monkeypatch.setenv("NEONFLAP_DEBUG", "true")
    monkeypatch.setenv("NEONFLAP_BEST_SCORE_PATH", str(tmp_path / "b.json"))
    monkeypatch.setenv("NEONFLAP_DISPLAY_SCALE", "3")

    settings = Settings()

    assert settings.theme == "retro"
    assert settings.debug
    assert settings.best_score_path == Path(tmp_path / "b.json")
    assert settings.display.scale == 3


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("NEONFLAP_THEME=retro\n")
    assert Settings().theme == "retro"


def test_invalid_theme_rejected(monkeypatch):
    monkeypatch.setenv("NEONFLAP_THEME", "sepia")
    with pytest.raises(ValidationError):
        Settings()


def test_scale_bounds():
    with pytest.raises(ValidationError):
        DisplaySettings(scale=5)
    assert DisplaySettings(scale=4).scale == 4
