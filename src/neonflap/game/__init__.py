"""Gameplay: bird physics, pipes, scoring and the controller tying them together."""

from neonflap.game.bird import Bird
from neonflap.game.pipes import Pipe, PipeManager
from neonflap.game.scoring import BestScoreStore, MemoryScoreStore, Score
from neonflap.game.world import World
from neonflap.game.controller import GameController

__all__ = [
    "Bird",
    "Pipe",
    "PipeManager",
    "BestScoreStore",
    "MemoryScoreStore",
    "Score",
    "World",
    "GameController",
]
