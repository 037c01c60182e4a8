"""Configuration for NEON FLAP."""
