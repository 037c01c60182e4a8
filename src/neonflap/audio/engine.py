"""
NEON FLAP audio engine.

Plays the synthesized cues through pygame.mixer. Audio is strictly
best-effort: if the mixer cannot start, the game runs silently and the
engine retries on the next cue.
"""

import array
import logging
from typing import Dict, Optional

import pygame

from neonflap.audio.synth import CUES, SAMPLE_RATE, render_cue
from neonflap.core.events import Event

logger = logging.getLogger(__name__)


class AudioEngine:
    """Lazily initialised cue player."""

    def __init__(self, enabled: bool = True, volume: float = 1.0):
        self.enabled = enabled
        self.volume = volume
        self._initialized = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._failures = 0

    @property
    def available(self) -> bool:
        return self._initialized

    def init(self) -> bool:
        """Start the mixer and render every cue. Returns success."""
        if self._initialized:
            return True
        if not self.enabled:
            return False

        try:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 1024)
            pygame.mixer.init()
            # An already open mixer keeps its own format
            frequency, _size, channels = pygame.mixer.get_init()
            for name in CUES:
                samples = render_cue(name, sample_rate=frequency)
                self._sounds[name] = self._create_sound(samples, channels)
        except pygame.error as e:
            self._failures += 1
            # First failure is worth a warning, retries are noise
            if self._failures == 1:
                logger.warning(f"Audio unavailable, continuing silently: {e}")
            else:
                logger.debug(f"Audio init retry {self._failures} failed: {e}")
            self._sounds.clear()
            return False

        self._initialized = True
        logger.info(f"Audio engine initialized with {len(self._sounds)} cues at {frequency} Hz x{channels}")
        return True

    def _create_sound(self, samples: array.array, channels: int = 2) -> pygame.mixer.Sound:
        """Create a pygame Sound from mono samples, copied to every mixer channel."""
        frames = array.array('h')
        for s in samples:
            frames.extend([s] * channels)
        return pygame.mixer.Sound(buffer=frames)

    def play(self, cue: str) -> Optional[pygame.mixer.Channel]:
        """Fire-and-forget playback of a cue. Never raises."""
        if not self.enabled or not self.init():
            return None

        sound = self._sounds.get(cue)
        if sound is None:
            logger.warning(f"Sound not found: {cue}")
            return None

        try:
            sound.set_volume(self.volume)
            return sound.play()
        except pygame.error as e:
            logger.debug(f"Playback of {cue} failed: {e}")
            return None

    def handle_event(self, event: Event) -> None:
        """Event bus subscriber for SOUND_PLAY events."""
        cue = event.data.get("cue")
        if cue:
            self.play(cue)

    def cleanup(self) -> None:
        """Release the mixer."""
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
            self._sounds.clear()
            logger.info("Audio engine cleaned up")


# Global audio engine instance
_audio_engine: Optional[AudioEngine] = None


def get_audio_engine(enabled: bool = True) -> AudioEngine:
    """Get the global audio engine instance."""
    global _audio_engine
    if _audio_engine is None:
        _audio_engine = AudioEngine(enabled=enabled)
    return _audio_engine
