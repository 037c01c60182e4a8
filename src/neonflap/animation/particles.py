"""Particle system for bird trails and crash explosions."""

from typing import List, Tuple
from dataclasses import dataclass
from enum import Enum, auto
import random

import numpy as np
from numpy.typing import NDArray

from neonflap.graphics.primitives import blend_rect

Color = Tuple[int, int, int]

EXPLOSION_COLOR: Color = (255, 0, 85)  # #ff0055


class ParticleKind(Enum):
    """Particle flavours with distinct generation parameters."""
    TRAIL = auto()
    EXPLOSION = auto()


@dataclass
class Particle:
    """A single particle. ``life`` fades from 1.0 to 0.0."""

    x: float
    y: float
    vx: float
    vy: float
    kind: ParticleKind
    color: Color
    size: float = 3.0
    life: float = 1.0
    decay: float = 0.03

    @property
    def is_dead(self) -> bool:
        return self.life <= 0

    def update(self) -> None:
        """Move, then fade."""
        self.x += self.vx
        self.y += self.vy
        self.life -= self.decay


@dataclass(frozen=True)
class EmitterConfig:
    """Generation parameters for one particle kind (per-frame units)."""

    kind: ParticleKind
    decay: float
    burst: int
    # Velocity ranges
    vx_min: float
    vx_max: float
    vy_min: float
    vy_max: float
    # Square side length
    size_min: float = 2.0
    size_max: float = 5.0


class ParticlePresets:
    """Factory for the two effect configurations."""

    @staticmethod
    def trail() -> EmitterConfig:
        """Slow leftward drift behind the bird, long-lived."""
        return EmitterConfig(
            kind=ParticleKind.TRAIL,
            decay=0.03,
            burst=3,
            vx_min=-2.0, vx_max=-2.0,
            vy_min=-0.5, vy_max=0.5,
        )

    @staticmethod
    def explosion() -> EmitterConfig:
        """Fast isotropic scatter, short-lived."""
        return EmitterConfig(
            kind=ParticleKind.EXPLOSION,
            decay=0.05,
            burst=20,
            vx_min=-2.5, vx_max=2.5,
            vy_min=-2.5, vy_max=2.5,
        )


class ParticleSystem:
    """Owns every live particle.

    Order inside the collection has no meaning. ``update`` sweeps
    expired particles at the end of the same call, so anything left
    in ``particles`` is still visible.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        trail: EmitterConfig | None = None,
        explosion: EmitterConfig | None = None,
    ):
        self._rng = rng or random.Random()
        self.trail_config = trail or ParticlePresets.trail()
        self.explosion_config = explosion or ParticlePresets.explosion()
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def emit(self, config: EmitterConfig, x: float, y: float, color: Color, count: int = 1) -> None:
        """Spawn ``count`` particles of one kind at a point."""
        rng = self._rng
        for _ in range(count):
            self.particles.append(Particle(
                x=x,
                y=y,
                vx=rng.uniform(config.vx_min, config.vx_max),
                vy=rng.uniform(config.vy_min, config.vy_max),
                kind=config.kind,
                color=color,
                size=rng.uniform(config.size_min, config.size_max),
                decay=config.decay,
            ))

    def emit_trail(self, x: float, y: float, color: Color, count: int = 1) -> None:
        self.emit(self.trail_config, x, y, color, count)

    def burst_trail(self, x: float, y: float, color: Color) -> None:
        """Trail puff used on every flap."""
        self.emit(self.trail_config, x, y, color, self.trail_config.burst)

    def burst_explosion(self, x: float, y: float) -> None:
        """Crash burst."""
        self.emit(self.explosion_config, x, y, EXPLOSION_COLOR, self.explosion_config.burst)

    def update(self) -> None:
        """Advance every particle one frame and drop the expired ones."""
        for particle in self.particles:
            particle.update()
        self.particles = [p for p in self.particles if not p.is_dead]

    def render(self, buffer: NDArray[np.uint8]) -> None:
        """Draw particles as squares with alpha = remaining life."""
        for particle in self.particles:
            size = max(1, int(particle.size))
            blend_rect(
                buffer,
                int(particle.x),
                int(particle.y),
                size,
                size,
                particle.color,
                alpha=min(1.0, particle.life),
            )

    def count(self, kind: ParticleKind | None = None) -> int:
        """Number of live particles, optionally of one kind."""
        if kind is None:
            return len(self.particles)
        return sum(1 for p in self.particles if p.kind is kind)

    def clear(self) -> None:
        """Remove all particles."""
        self.particles.clear()
