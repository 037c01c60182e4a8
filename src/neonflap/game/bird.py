"""The player's bird: idle bob, gravity, flap and ground contact."""

import math
import logging

from neonflap.game.constants import GROUND_Y

logger = logging.getLogger(__name__)


class Bird:
    """Axis-aligned square actor with vertical physics only.

    Positions are the top-left corner. Units are pixels and frames.
    """

    X = 50
    START_Y = 150.0
    WIDTH = 20
    HEIGHT = 20

    GRAVITY = 0.25
    JUMP = 4.6

    # Idle bob while waiting for the first input
    IDLE_AMPLITUDE = 5.0
    IDLE_PERIOD = 15.0

    # Trail particles leave from here, relative to the top-left corner
    TRAIL_OFFSET_Y = 10

    def __init__(self, ground_y: float = GROUND_Y):
        self.x = float(self.X)
        self.y = self.START_Y
        self.velocity = 0.0
        self.ground_y = ground_y

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.WIDTH / 2, self.y + self.HEIGHT / 2

    @property
    def bottom(self) -> float:
        return self.y + self.HEIGHT

    @property
    def trail_origin(self) -> tuple[float, float]:
        return self.x, self.y + self.TRAIL_OFFSET_Y

    def idle(self, frame: int) -> None:
        """Bob around the start height. Velocity is ignored."""
        self.y = self.START_Y + math.cos(frame / self.IDLE_PERIOD) * self.IDLE_AMPLITUDE

    def flap(self) -> None:
        """Replace the current velocity with the upward jump impulse."""
        self.velocity = -self.JUMP

    def step(self) -> bool:
        """Advance one frame of semi-implicit Euler integration.

        Returns:
            True if the bird is resting on the ground after the step
        """
        self.velocity += self.GRAVITY
        self.y += self.velocity

        if self.bottom >= self.ground_y:
            self.y = self.ground_y - self.HEIGHT
            return True
        return False

    def reset(self) -> None:
        """Clear velocity for a new run. Position is driven by idle()."""
        self.velocity = 0.0
