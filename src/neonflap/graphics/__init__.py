"""Graphics module: numpy drawing primitives and the frame renderer.

The renderer lives in ``neonflap.graphics.renderer`` and is imported
from there directly, since it depends on the game package.
"""

from neonflap.graphics.primitives import (
    blend_rect,
    draw_circle,
    draw_line,
    draw_rect,
    draw_rotated_square,
    draw_text,
    draw_text_centered,
    fill,
    fill_vertical_gradient,
)

__all__ = [
    "blend_rect",
    "draw_circle",
    "draw_line",
    "draw_rect",
    "draw_rotated_square",
    "draw_text",
    "draw_text_centered",
    "fill",
    "fill_vertical_gradient",
]
