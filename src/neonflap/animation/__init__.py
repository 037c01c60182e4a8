"""Particle effects."""

from neonflap.animation.particles import (
    Particle,
    ParticleKind,
    ParticlePresets,
    ParticleSystem,
)

__all__ = ["Particle", "ParticleKind", "ParticlePresets", "ParticleSystem"]
