"""Pipe pairs: spawning, scrolling, collision and retirement."""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator
import random
import logging

from neonflap.game.bird import Bird
from neonflap.game.constants import CANVAS_WIDTH, GROUND_Y

logger = logging.getLogger(__name__)


@dataclass
class Pipe:
    """A top/bottom pipe pair. ``gap_top`` is where the opening starts."""

    x: float
    gap_top: float


class PipeManager:
    """Owns the pipes on screen, oldest (leftmost) first.

    Pipes are appended at the right edge and only ever removed from
    the front, so the deque stays ordered by spawn time and by x.
    """

    WIDTH = 50
    GAP = 110
    SPEED = 2.0
    SPAWN_EVERY = 100  # frames

    # Gap placement limits
    MIN_GAP_TOP = 50
    GROUND_MARGIN = 40

    # Hitboxes are this much smaller than the drawn pipes and bird on every side
    COLLISION_PADDING = 4

    def __init__(
        self,
        rng: random.Random | None = None,
        spawn_x: float = CANVAS_WIDTH,
        ground_y: float = GROUND_Y,
    ):
        self._rng = rng or random.Random()
        self.spawn_x = spawn_x
        self.ground_y = ground_y
        self.pipes: Deque[Pipe] = deque()

    def __iter__(self) -> Iterator[Pipe]:
        return iter(self.pipes)

    def __len__(self) -> int:
        return len(self.pipes)

    @property
    def max_gap_top(self) -> float:
        return self.ground_y - self.GAP - self.GROUND_MARGIN

    def random_gap_top(self) -> float:
        """Uniform gap position, never above MIN_GAP_TOP nor too close to the ground."""
        return max(self.MIN_GAP_TOP, self._rng.random() * self.max_gap_top)

    def maybe_spawn(self, frame: int) -> Pipe | None:
        """Spawn a pipe at the right edge on every SPAWN_EVERY-th frame."""
        if frame % self.SPAWN_EVERY != 0:
            return None
        pipe = Pipe(x=float(self.spawn_x), gap_top=self.random_gap_top())
        self.pipes.append(pipe)
        logger.debug(f"Pipe spawned at frame {frame}, gap_top={pipe.gap_top:.1f}")
        return pipe

    def advance(self) -> None:
        """Scroll every pipe left by SPEED."""
        for pipe in self.pipes:
            pipe.x -= self.SPEED

    def collides(self, pipe: Pipe, bird: Bird) -> bool:
        """Padded overlap test between the bird and one pipe pair."""
        pad = self.COLLISION_PADDING
        overlaps_x = (
            bird.x + bird.WIDTH - pad > pipe.x
            and bird.x + pad < pipe.x + self.WIDTH
        )
        if not overlaps_x:
            return False
        return (
            bird.y + pad < pipe.gap_top
            or bird.y + bird.HEIGHT - pad > pipe.gap_top + self.GAP
        )

    def any_collision(self, bird: Bird) -> bool:
        return any(self.collides(pipe, bird) for pipe in self.pipes)

    def retire_offscreen(self) -> int:
        """Pop every pipe whose right edge has left the screen.

        Returns:
            Number of pipes removed
        """
        removed = 0
        while self.pipes and self.pipes[0].x + self.WIDTH <= 0:
            self.pipes.popleft()
            removed += 1
        return removed

    def reset(self) -> None:
        """Remove all pipes."""
        self.pipes.clear()
