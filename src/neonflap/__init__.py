"""NEON FLAP: a one-button arcade game with neon and retro looks."""

__version__ = "1.0.0"
