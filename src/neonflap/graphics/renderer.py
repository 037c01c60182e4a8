"""Frame renderer for NEON FLAP.

Draws a World into an RGB numpy buffer of shape (height, width, 3).
The renderer only reads the world; cosmetic randomness (shake
offsets, twinkling stars) comes from its own RNG.
"""

from typing import Optional
import math
import random
import logging

import numpy as np
from numpy.typing import NDArray

from config.themes.base import Theme
from neonflap.core.state import GameState
from neonflap.game.bird import Bird
from neonflap.game.constants import RESTART_COOLDOWN_FRAMES, THEME_BUTTON_RECT
from neonflap.game.pipes import Pipe
from neonflap.game.world import World
from neonflap.graphics.primitives import (
    Color,
    blend_rect,
    darken_rows,
    draw_circle,
    draw_line,
    draw_rect,
    draw_rotated_square,
    draw_text,
    draw_text_centered,
    fill_vertical_gradient,
    measure_text,
    rotate_point,
    shift,
)

logger = logging.getLogger(__name__)

MIN_TILT = math.radians(-25)
MAX_TILT = math.radians(90)

CRASH_RED_NEON: Color = (255, 0, 85)
CRASH_RED_RETRO: Color = (231, 76, 60)
RETRO_ORANGE: Color = (230, 126, 34)
RETRO_PANEL: Color = (222, 216, 149)
WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)


def tilt_for_velocity(velocity: float) -> float:
    """Bird rotation in radians for a vertical velocity.

    Nose up while rising, diving while falling. Cosmetic only.
    """
    return max(MIN_TILT, min(velocity * 0.1, MAX_TILT))


class GameRenderer:
    """Draws one frame of the world per call."""

    SUN_RADIUS = 80
    SUN_CENTER_Y = 350
    CLOUD_Y = 100

    GRID_SCROLL = 3  # px per frame
    CLOUD_SCROLL = 0.5

    # Frames the bird stays visible after a crash, and its blink half-period
    DEATH_VISIBLE_FRAMES = 10
    DEATH_BLINK_FRAMES = 4

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def new_buffer(self, world: World) -> NDArray[np.uint8]:
        return np.zeros((world.height, world.width, 3), dtype=np.uint8)

    def render(self, world: World, buffer: Optional[NDArray[np.uint8]] = None) -> NDArray[np.uint8]:
        """Draw the whole frame and return the buffer."""
        if buffer is None:
            buffer = self.new_buffer(world)

        theme = world.theme

        self._draw_background(buffer, world, theme)
        for pipe in world.pipes:
            self._draw_pipe(buffer, world, theme, pipe)
        self._draw_ground(buffer, world, theme)
        world.particles.render(buffer)
        if self._bird_visible(world):
            self._draw_bird(buffer, world.bird, theme)
        self._draw_hud(buffer, world, theme)

        if world.shake > 0:
            dx = int((self._rng.random() - 0.5) * world.shake)
            dy = int((self._rng.random() - 0.5) * world.shake)
            shift(buffer, dx, dy, theme.backdrop)

        if theme.scanlines:
            darken_rows(buffer, every=3, factor=0.75)

        return buffer

    # ----- background -----

    def _draw_background(self, buffer: NDArray[np.uint8], world: World, theme: Theme) -> None:
        fill_vertical_gradient(buffer, theme.bg_top, theme.bg_bottom)

        if theme.sun_colors is not None:
            self._draw_sun(buffer, world, theme)
        else:
            self._draw_cloud(buffer, world)

        if theme.glow and world.frame % 10 == 0 and self._rng.random() > 0.8:
            x = int(self._rng.random() * world.width)
            y = int(self._rng.random() * 200)
            draw_rect(buffer, x, y, 2, 2, WHITE)

    def _draw_sun(self, buffer: NDArray[np.uint8], world: World, theme: Theme) -> None:
        bottom_color, top_color = theme.sun_colors
        cx = world.width // 2
        cy = self.SUN_CENTER_Y
        r = self.SUN_RADIUS

        if theme.glow:
            draw_circle(buffer, cx, cy, r + 10, bottom_color, alpha=0.15)
            draw_circle(buffer, cx, cy, r + 5, bottom_color, alpha=0.25)

        # Disc with a vertical gradient running from y=100 to y=300
        h, w = buffer.shape[:2]
        y1, y2 = max(0, cy - r), min(h, cy + r + 1)
        x1, x2 = max(0, cx - r), min(w, cx + r + 1)
        ys, xs = np.ogrid[y1:y2, x1:x2]
        mask = (xs - cx) ** 2 + (ys - cy) ** 2 <= r ** 2
        t = np.clip((np.arange(y1, y2, dtype=np.float32) - 100) / 200, 0.0, 1.0)[:, None]
        top = np.asarray(top_color, dtype=np.float32)
        bottom = np.asarray(bottom_color, dtype=np.float32)
        rows = (top + (bottom - top) * t).astype(np.uint8)
        colors = np.broadcast_to(rows[:, None, :], (y2 - y1, x2 - x1, 3))
        region = buffer[y1:y2, x1:x2]
        region[mask] = colors[mask]

        # Horizontal cut-outs across the lower half
        for y in range(280, 430, 8):
            draw_rect(buffer, cx - 90, y, 180, 4 if y > 350 else 2, theme.bg_bottom)

    def _draw_cloud(self, buffer: NDArray[np.uint8], world: World) -> None:
        cloud_x = (world.frame * self.CLOUD_SCROLL) % (world.width + 100) - 50
        puffs = ((cloud_x, self.CLOUD_Y, 30), (cloud_x + 20, self.CLOUD_Y - 10, 40), (cloud_x + 50, self.CLOUD_Y, 30))

        h, w = buffer.shape[:2]
        ys, xs = np.ogrid[:h, :w]
        mask = np.zeros((h, w), dtype=bool)
        for px, py, radius in puffs:
            mask |= (xs - px) ** 2 + (ys - py) ** 2 <= radius ** 2
        buffer[mask] = (buffer[mask].astype(np.float32) * 0.5 + 127.5).astype(np.uint8)

    # ----- pipes -----

    def _draw_pipe(self, buffer: NDArray[np.uint8], world: World, theme: Theme, pipe: Pipe) -> None:
        width = world.pipes.WIDTH
        x = int(pipe.x)
        top_h = int(pipe.gap_top)
        bottom_y = int(pipe.gap_top + world.pipes.GAP)
        bottom_h = world.ground_y - bottom_y
        highlight = (176, 38, 255) if theme.glow else WHITE

        for y, height in ((0, top_h), (bottom_y, bottom_h)):
            if theme.glow:
                blend_rect(buffer, x - 4, y - 4, width + 8, height + 8, theme.pipe_border, alpha=0.2)
            draw_rect(buffer, x, y, width, height, theme.pipe)
            draw_rect(buffer, x, y, width, height, theme.pipe_border, filled=False, thickness=2)
            blend_rect(buffer, x + 10, y, 5, height, highlight, alpha=0.2)

        if not theme.glow:
            for cap_y in (top_h - 20, bottom_y):
                draw_rect(buffer, x - 2, cap_y, width + 4, 20, theme.pipe)
                draw_rect(buffer, x - 2, cap_y, width + 4, 20, theme.pipe_border, filled=False, thickness=2)

    # ----- ground -----

    def _draw_ground(self, buffer: NDArray[np.uint8], world: World, theme: Theme) -> None:
        gy = world.ground_y
        w, h = world.width, world.height
        offset = (world.frame * self.GRID_SCROLL) % 40

        draw_rect(buffer, 0, gy, w, h - gy, theme.ground)

        if theme.glow:
            blend_rect(buffer, 0, gy - 6, w, 6, theme.grid, alpha=0.3)
            draw_rect(buffer, 0, gy - 1, w, 3, theme.grid)
            # Perspective grid: slanted verticals fanning out from the centre
            for i in range(0, w + 40, 40):
                x_val = i - offset
                slant = (x_val - w / 2) * 0.8
                draw_line(buffer, int(x_val), gy, int(x_val + slant), h - 1, theme.grid)
            for y in range(gy, h, 20):
                draw_rect(buffer, 0, y, w, 1, theme.grid)
        else:
            draw_rect(buffer, 0, gy, w, 10, theme.grid)
            draw_rect(buffer, 0, gy, w, 10, BLACK, filled=False, thickness=2)
            # Sheared stripes, 15px wide every 20px, leaning left towards the bottom
            top = gy + 10
            span = max(1, h - top)
            ys, xs = np.ogrid[top:h, 0:w]
            lean = -10.0 * (ys - top) / span
            mask = ((xs - lean + offset + 40) % 20) < 15
            buffer[top:h, :][mask] = theme.grid

    # ----- bird -----

    def _bird_visible(self, world: World) -> bool:
        if world.state is not GameState.GAME_OVER:
            return True
        elapsed = world.clock.elapsed_since(world.die_frame)
        if elapsed >= self.DEATH_VISIBLE_FRAMES:
            return False
        return (elapsed // self.DEATH_BLINK_FRAMES) % 2 == 0

    def _draw_bird(self, buffer: NDArray[np.uint8], bird: Bird, theme: Theme) -> None:
        cx, cy = bird.center
        size = bird.WIDTH
        angle = tilt_for_velocity(bird.velocity)

        if theme.glow:
            draw_rotated_square(buffer, cx, cy, size + 10, angle, theme.bird, alpha=0.2)
            draw_rotated_square(buffer, cx, cy, size + 4, angle, theme.bird, alpha=0.35)
            draw_rotated_square(buffer, cx, cy, size, angle, theme.bird)
        else:
            draw_rotated_square(buffer, cx, cy, size + 2, angle, theme.bird_border)
            draw_rotated_square(buffer, cx, cy, size - 2, angle, theme.bird)

        # Eye sits in the upper right of the body
        eye_x, eye_y = rotate_point(cx + 5, cy - 3, cx, cy, angle)
        draw_rotated_square(buffer, eye_x, eye_y, 6, angle, theme.bird_border)

    # ----- HUD / overlays -----

    def _draw_hud(self, buffer: NDArray[np.uint8], world: World, theme: Theme) -> None:
        state = world.state

        if state is GameState.PLAYING:
            draw_text_centered(buffer, str(world.score.value), 30, theme.text_main, scale=6, shadow=theme.text_shadow)
        elif state is GameState.GAME_OVER:
            self._draw_game_over(buffer, world, theme)

        if world.overlay_visible:
            self._draw_ready_overlay(buffer, theme)

    def _draw_game_over(self, buffer: NDArray[np.uint8], world: World, theme: Theme) -> None:
        cx = world.width // 2
        crash_red = CRASH_RED_NEON if theme.glow else CRASH_RED_RETRO
        draw_text_centered(buffer, "GAME OVER", 100, crash_red, scale=4, shadow=None if theme.glow else BLACK)

        if theme.glow:
            blend_rect(buffer, cx - 100, 160, 200, 120, BLACK, alpha=0.8)
        else:
            draw_rect(buffer, cx - 100, 160, 200, 120, RETRO_PANEL)
        draw_rect(buffer, cx - 100, 160, 200, 120, theme.text_shadow, filled=False, thickness=2)

        label = WHITE if theme.glow else RETRO_ORANGE
        value_color = theme.text_main if theme.glow else WHITE
        draw_text_centered(buffer, "SCORE", 175, label, scale=3)
        draw_text_centered(buffer, str(world.score.value), 200, value_color, scale=5, shadow=None if theme.glow else BLACK)
        draw_text_centered(buffer, f"BEST: {world.score.best}", 250, label, scale=2)

        if world.clock.elapsed_since(world.die_frame) >= RESTART_COOLDOWN_FRAMES:
            draw_text_centered(buffer, "TAP TO RESTART", 320, theme.text_main, scale=2)

    def _draw_ready_overlay(self, buffer: NDArray[np.uint8], theme: Theme) -> None:
        draw_text_centered(buffer, "NEON FLAP", 190, theme.text_main, scale=5, shadow=theme.text_shadow)
        draw_text_centered(buffer, "TAP TO START", 240, theme.text_main, scale=2)

        x, y, w, h = THEME_BUTTON_RECT
        draw_rect(buffer, x, y, w, h, BLACK if theme.glow else WHITE)
        draw_rect(buffer, x, y, w, h, theme.text_shadow, filled=False, thickness=2)
        label = f"MODE: {theme.name.value.upper()}"
        text_w, text_h = measure_text(label, 2)
        draw_text(buffer, label, x + (w - text_w) // 2, y + (h - text_h) // 2, theme.text_main, scale=2)
