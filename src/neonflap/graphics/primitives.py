"""Basic drawing primitives on numpy RGB buffers of shape (height, width, 3)."""

from typing import Tuple, Optional
import math

import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]

# Built-in bitmap font geometry
GLYPH_WIDTH = 3
GLYPH_HEIGHT = 5


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def fill_vertical_gradient(buffer: Buffer, top: Color, bottom: Color) -> None:
    """Fill the buffer with a linear top-to-bottom gradient."""
    h = buffer.shape[0]
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[:, None]
    top_arr = np.asarray(top, dtype=np.float32)
    bottom_arr = np.asarray(bottom, dtype=np.float32)
    rows = top_arr + (bottom_arr - top_arr) * t
    buffer[:, :] = rows[:, None, :].astype(np.uint8)


def _clip(buffer: Buffer, x: int, y: int, width: int, height: int) -> Optional[Tuple[int, int, int, int]]:
    h, w = buffer.shape[:2]
    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))
    if x2 <= x1 or y2 <= y1:
        return None
    return x1, y1, x2, y2


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    filled: bool = True,
    thickness: int = 1,
) -> None:
    """Draw a rectangle on the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        filled: If True, fill rectangle; if False, draw outline only
        thickness: Line thickness for outline (when filled=False)
    """
    if width <= 0 or height <= 0:
        return

    if filled:
        clipped = _clip(buffer, x, y, width, height)
        if clipped:
            x1, y1, x2, y2 = clipped
            buffer[y1:y2, x1:x2] = color
        return

    t = min(thickness, width, height)
    draw_rect(buffer, x, y, width, t, color)
    draw_rect(buffer, x, y + height - t, width, t, color)
    draw_rect(buffer, x, y, t, height, color)
    draw_rect(buffer, x + width - t, y, t, height, color)


def blend_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    alpha: float,
) -> None:
    """Alpha-blend a filled rectangle over the buffer."""
    if alpha <= 0:
        return
    if alpha >= 1.0:
        draw_rect(buffer, x, y, width, height, color)
        return

    clipped = _clip(buffer, x, y, width, height)
    if not clipped:
        return
    x1, y1, x2, y2 = clipped
    region = buffer[y1:y2, x1:x2].astype(np.float32)
    src = np.asarray(color, dtype=np.float32)
    buffer[y1:y2, x1:x2] = (src * alpha + region * (1 - alpha)).astype(np.uint8)


def draw_circle(
    buffer: Buffer,
    cx: int,
    cy: int,
    radius: int,
    color: Color,
    alpha: float = 1.0,
) -> None:
    """Draw a filled circle, optionally alpha-blended.

    Args:
        buffer: Target numpy array (height, width, 3)
        cx: Center x coordinate
        cy: Center y coordinate
        radius: Circle radius in pixels
        color: RGB color tuple
        alpha: Opacity (0.0 to 1.0)
    """
    clipped = _clip(buffer, cx - radius, cy - radius, 2 * radius + 1, 2 * radius + 1)
    if not clipped or alpha <= 0:
        return
    x1, y1, x2, y2 = clipped

    y_indices, x_indices = np.ogrid[y1:y2, x1:x2]
    mask = (x_indices - cx) ** 2 + (y_indices - cy) ** 2 <= radius ** 2
    _paint_mask(buffer[y1:y2, x1:x2], mask, color, alpha)


def draw_rotated_square(
    buffer: Buffer,
    cx: float,
    cy: float,
    size: float,
    angle: float,
    color: Color,
    alpha: float = 1.0,
) -> None:
    """Draw a filled square of side ``size`` centred on (cx, cy), rotated by ``angle`` radians."""
    half = size / 2
    reach = int(math.ceil(half * math.sqrt(2))) + 1
    clipped = _clip(buffer, int(cx) - reach, int(cy) - reach, 2 * reach + 1, 2 * reach + 1)
    if not clipped or alpha <= 0:
        return
    x1, y1, x2, y2 = clipped

    ys, xs = np.ogrid[y1:y2, x1:x2]
    dx = xs + 0.5 - cx
    dy = ys + 0.5 - cy
    # Rotate sample points into the square's local frame
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    local_x = dx * cos_a + dy * sin_a
    local_y = -dx * sin_a + dy * cos_a
    mask = (np.abs(local_x) <= half) & (np.abs(local_y) <= half)
    _paint_mask(buffer[y1:y2, x1:x2], mask, color, alpha)


def rotate_point(px: float, py: float, cx: float, cy: float, angle: float) -> Tuple[float, float]:
    """Rotate (px, py) around (cx, cy) by ``angle`` radians."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    dx, dy = px - cx, py - cy
    return cx + dx * cos_a - dy * sin_a, cy + dx * sin_a + dy * cos_a


def _paint_mask(region: Buffer, mask: NDArray[np.bool_], color: Color, alpha: float) -> None:
    if alpha >= 1.0:
        region[mask] = color
        return
    src = np.asarray(color, dtype=np.float32)
    region[mask] = (src * alpha + region[mask].astype(np.float32) * (1 - alpha)).astype(np.uint8)


def draw_line(
    buffer: Buffer,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: Color,
) -> None:
    """Draw a one pixel line using Bresenham's algorithm."""
    h, w = buffer.shape[:2]

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    x, y = x1, y1

    while True:
        if 0 <= x < w and 0 <= y < h:
            buffer[y, x] = color

        if x == x2 and y == y2:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def darken_rows(buffer: Buffer, every: int = 2, factor: float = 0.7) -> None:
    """Darken every ``every``-th row (CRT scanline look)."""
    rows = buffer[::every]
    buffer[::every] = (rows.astype(np.float32) * factor).astype(np.uint8)


def shift(buffer: Buffer, dx: int, dy: int, background: Color = (0, 0, 0)) -> None:
    """Translate the buffer contents in place, exposing ``background``."""
    if dx == 0 and dy == 0:
        return
    h, w = buffer.shape[:2]
    if abs(dx) >= w or abs(dy) >= h:
        buffer[:, :] = background
        return

    source = buffer.copy()
    buffer[:, :] = background
    src_x1, src_x2 = max(0, -dx), min(w, w - dx)
    src_y1, src_y2 = max(0, -dy), min(h, h - dy)
    buffer[src_y1 + dy:src_y2 + dy, src_x1 + dx:src_x2 + dx] = source[src_y1:src_y2, src_x1:src_x2]


def measure_text(text: str, scale: int = 1) -> Tuple[int, int]:
    """Pixel size of ``text`` in the built-in font."""
    if not text:
        return 0, 0
    return len(text) * (GLYPH_WIDTH + 1) * scale - scale, GLYPH_HEIGHT * scale


def draw_text(
    buffer: Buffer,
    text: str,
    x: int,
    y: int,
    color: Color,
    scale: int = 1,
) -> Tuple[int, int]:
    """Draw text using the built-in 3x5 bitmap font.

    Args:
        buffer: Target numpy array (height, width, 3)
        text: Text string to draw
        x: Starting x coordinate
        y: Starting y coordinate
        color: RGB color tuple
        scale: Scale factor for font size

    Returns:
        Tuple of (width, height) of rendered text in pixels
    """
    font = _FONT
    cursor_x = x

    for char in text:
        glyph = font.get(char.upper(), font['?']) if char != ' ' else None
        if glyph:
            for row_idx, row in enumerate(glyph):
                for col_idx, pixel in enumerate(row):
                    if pixel:
                        draw_rect(
                            buffer,
                            cursor_x + col_idx * scale,
                            y + row_idx * scale,
                            scale,
                            scale,
                            color,
                        )
        cursor_x += (GLYPH_WIDTH + 1) * scale

    return measure_text(text, scale)


def draw_text_centered(
    buffer: Buffer,
    text: str,
    y: int,
    color: Color,
    scale: int = 1,
    shadow: Optional[Color] = None,
) -> Tuple[int, int]:
    """Draw text horizontally centred, with an optional 1-step drop shadow."""
    text_w, _ = measure_text(text, scale)
    x = (buffer.shape[1] - text_w) // 2
    if shadow is not None:
        draw_text(buffer, text, x + scale, y + scale, shadow, scale)
    return draw_text(buffer, text, x, y, color, scale)


# Each character is a list of rows, each row is a list of 0/1 pixels
_FONT = {
    'A': [[0,1,0], [1,0,1], [1,1,1], [1,0,1], [1,0,1]],
    'B': [[1,1,0], [1,0,1], [1,1,0], [1,0,1], [1,1,0]],
    'C': [[0,1,1], [1,0,0], [1,0,0], [1,0,0], [0,1,1]],
    'D': [[1,1,0], [1,0,1], [1,0,1], [1,0,1], [1,1,0]],
    'E': [[1,1,1], [1,0,0], [1,1,0], [1,0,0], [1,1,1]],
    'F': [[1,1,1], [1,0,0], [1,1,0], [1,0,0], [1,0,0]],
    'G': [[0,1,1], [1,0,0], [1,0,1], [1,0,1], [0,1,1]],
    'H': [[1,0,1], [1,0,1], [1,1,1], [1,0,1], [1,0,1]],
    'I': [[1,1,1], [0,1,0], [0,1,0], [0,1,0], [1,1,1]],
    'J': [[0,0,1], [0,0,1], [0,0,1], [1,0,1], [0,1,0]],
    'K': [[1,0,1], [1,0,1], [1,1,0], [1,0,1], [1,0,1]],
    'L': [[1,0,0], [1,0,0], [1,0,0], [1,0,0], [1,1,1]],
    'M': [[1,0,1], [1,1,1], [1,0,1], [1,0,1], [1,0,1]],
    'N': [[1,0,1], [1,1,1], [1,1,1], [1,0,1], [1,0,1]],
    'O': [[0,1,0], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    'P': [[1,1,0], [1,0,1], [1,1,0], [1,0,0], [1,0,0]],
    'Q': [[0,1,0], [1,0,1], [1,0,1], [1,1,1], [0,1,1]],
    'R': [[1,1,0], [1,0,1], [1,1,0], [1,0,1], [1,0,1]],
    'S': [[0,1,1], [1,0,0], [0,1,0], [0,0,1], [1,1,0]],
    'T': [[1,1,1], [0,1,0], [0,1,0], [0,1,0], [0,1,0]],
    'U': [[1,0,1], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    'V': [[1,0,1], [1,0,1], [1,0,1], [0,1,0], [0,1,0]],
    'W': [[1,0,1], [1,0,1], [1,0,1], [1,1,1], [1,0,1]],
    'X': [[1,0,1], [1,0,1], [0,1,0], [1,0,1], [1,0,1]],
    'Y': [[1,0,1], [1,0,1], [0,1,0], [0,1,0], [0,1,0]],
    'Z': [[1,1,1], [0,0,1], [0,1,0], [1,0,0], [1,1,1]],
    '0': [[0,1,0], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    '1': [[0,1,0], [1,1,0], [0,1,0], [0,1,0], [1,1,1]],
    '2': [[0,1,0], [1,0,1], [0,0,1], [0,1,0], [1,1,1]],
    '3': [[1,1,0], [0,0,1], [0,1,0], [0,0,1], [1,1,0]],
    '4': [[1,0,1], [1,0,1], [1,1,1], [0,0,1], [0,0,1]],
    '5': [[1,1,1], [1,0,0], [1,1,0], [0,0,1], [1,1,0]],
    '6': [[0,1,1], [1,0,0], [1,1,0], [1,0,1], [0,1,0]],
    '7': [[1,1,1], [0,0,1], [0,1,0], [0,1,0], [0,1,0]],
    '8': [[0,1,0], [1,0,1], [0,1,0], [1,0,1], [0,1,0]],
    '9': [[0,1,0], [1,0,1], [0,1,1], [0,0,1], [1,1,0]],
    '?': [[0,1,0], [1,0,1], [0,0,1], [0,0,0], [0,1,0]],
    '!': [[0,1,0], [0,1,0], [0,1,0], [0,0,0], [0,1,0]],
    '.': [[0,0,0], [0,0,0], [0,0,0], [0,0,0], [0,1,0]],
    ':': [[0,0,0], [0,1,0], [0,0,0], [0,1,0], [0,0,0]],
    '-': [[0,0,0], [0,0,0], [1,1,1], [0,0,0], [0,0,0]],
}
