"""Container for every piece of mutable game state."""

from dataclasses import dataclass, field
import random

from config.themes.base import Theme, ThemeName, THEMES
from neonflap.animation.particles import ParticleSystem
from neonflap.core.clock import FrameClock
from neonflap.core.state import GameState, StateMachine
from neonflap.game.bird import Bird
from neonflap.game.constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    GROUND_Y,
    SHAKE_CUTOFF,
    SHAKE_DAMPING,
)
from neonflap.game.pipes import PipeManager
from neonflap.game.scoring import Score


@dataclass
class World:
    """Everything the controller mutates and the renderer reads.

    Owned by the frame driver and passed explicitly to update and
    draw calls.
    """

    score: Score
    rng: random.Random = field(default_factory=random.Random)
    themes: dict[ThemeName, Theme] = field(default_factory=lambda: dict(THEMES))
    theme_name: ThemeName = ThemeName.NEON

    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    ground_y: int = GROUND_Y

    clock: FrameClock = field(default_factory=FrameClock)
    state_machine: StateMachine = field(default_factory=StateMachine)

    # Set in __post_init__ so they share the world's rng and geometry
    bird: Bird = field(init=False)
    pipes: PipeManager = field(init=False)
    particles: ParticleSystem = field(init=False)

    shake: float = 0.0
    die_frame: int = 0
    overlay_visible: bool = True

    def __post_init__(self) -> None:
        self.bird = Bird(ground_y=self.ground_y)
        self.pipes = PipeManager(rng=self.rng, spawn_x=self.width, ground_y=self.ground_y)
        self.particles = ParticleSystem(rng=self.rng)

    @property
    def state(self) -> GameState:
        return self.state_machine.state

    @property
    def frame(self) -> int:
        return self.clock.frame

    @property
    def theme(self) -> Theme:
        return self.themes[self.theme_name]

    def damp_shake(self) -> None:
        """Decay the camera shake by one frame."""
        if self.shake <= 0:
            return
        self.shake *= SHAKE_DAMPING
        if self.shake < SHAKE_CUTOFF:
            self.shake = 0.0
