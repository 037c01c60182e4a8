"""
Theme records and theme loading utilities.

Themes are immutable. Switching themes swaps which record the world
points at; a record is never edited in place.
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Optional
import logging

import yaml

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


class ThemeName(Enum):
    """Available themes."""
    NEON = "neon"
    RETRO = "retro"


def hex_to_rgb(hex_color: str) -> RGB:
    """Convert '#rrggbb' or '#rgb' to an RGB tuple."""
    hex_color = hex_color.lstrip("#")
    if len(hex_color) == 3:
        hex_color = "".join(c * 2 for c in hex_color)
    if len(hex_color) != 6:
        raise ValueError(f"Invalid hex color: #{hex_color}")
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


@dataclass(frozen=True)
class Theme:
    """Complete color/style configuration consumed by the renderer."""
    name: ThemeName
    bg_top: RGB
    bg_bottom: RGB
    bird: RGB
    bird_border: RGB
    pipe: RGB
    pipe_border: RGB
    ground: RGB
    grid: RGB
    text_main: RGB
    text_shadow: RGB
    particle_color: RGB
    backdrop: RGB  # Page color exposed around the playfield during shake
    sun_colors: Optional[tuple[RGB, RGB]] = None  # (bottom, top); None = no sun
    glow: bool = False
    scanlines: bool = False


THEMES: dict[ThemeName, Theme] = {
    ThemeName.NEON: Theme(
        name=ThemeName.NEON,
        bg_top=hex_to_rgb("#1a0b2e"),
        bg_bottom=hex_to_rgb("#2d1b4e"),
        bird=hex_to_rgb("#0ff"),
        bird_border=hex_to_rgb("#fff"),
        pipe=hex_to_rgb("#111"),
        pipe_border=hex_to_rgb("#b026ff"),
        ground=hex_to_rgb("#000"),
        grid=hex_to_rgb("#b026ff"),
        text_main=hex_to_rgb("#0ff"),
        text_shadow=hex_to_rgb("#b026ff"),
        particle_color=hex_to_rgb("#0ff"),
        backdrop=hex_to_rgb("#050010"),
        sun_colors=(hex_to_rgb("#ff0055"), hex_to_rgb("#ffcc00")),
        glow=True,
        scanlines=True,
    ),
    ThemeName.RETRO: Theme(
        name=ThemeName.RETRO,
        bg_top=hex_to_rgb("#70c5ce"),
        bg_bottom=hex_to_rgb("#70c5ce"),
        bird=hex_to_rgb("#f1c40f"),
        bird_border=hex_to_rgb("#000"),
        pipe=hex_to_rgb("#2ecc71"),
        pipe_border=hex_to_rgb("#27ae60"),
        ground=hex_to_rgb("#ded895"),
        grid=hex_to_rgb("#d4ce80"),
        text_main=hex_to_rgb("#fff"),
        text_shadow=hex_to_rgb("#000"),
        particle_color=hex_to_rgb("#fff"),
        backdrop=hex_to_rgb("#87ceeb"),
    ),
}


def next_theme(current: ThemeName) -> ThemeName:
    """Cycle to the theme after ``current``."""
    names = list(ThemeName)
    return names[(names.index(current) + 1) % len(names)]


def _coerce_field(key: str, value: Any) -> Any:
    """Convert a YAML value to the type a Theme field expects."""
    if key in ("glow", "scanlines"):
        return bool(value)
    if key == "sun_colors":
        if value is None:
            return None
        bottom, top = value
        return (_coerce_color(bottom), _coerce_color(top))
    return _coerce_color(value)


def _coerce_color(value: Any) -> RGB:
    if isinstance(value, str):
        return hex_to_rgb(value)
    r, g, b = value
    return (int(r), int(g), int(b))


def load_theme(name: ThemeName, themes_path: Path | None = None) -> Theme:
    """
    Load a theme, applying optional YAML overrides.

    Args:
        name: Built-in theme to start from
        themes_path: Directory that may contain ``<name>.yaml``

    Returns:
        Theme instance (the built-in record when no override applies)
    """
    theme = THEMES[name]
    if themes_path is None:
        return theme

    theme_file = themes_path / f"{name.value}.yaml"
    if not theme_file.exists():
        return theme

    try:
        with open(theme_file, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to read theme file {theme_file}: {e}")
        return theme

    if not isinstance(data, dict):
        logger.error(f"Theme file {theme_file} must contain a mapping")
        return theme

    allowed = {f.name for f in fields(Theme)} - {"name"}
    overrides: dict[str, Any] = {}
    for key, value in data.items():
        if key not in allowed:
            logger.warning(f"Ignoring unknown theme key '{key}' in {theme_file}")
            continue
        try:
            overrides[key] = _coerce_field(key, value)
        except (TypeError, ValueError) as e:
            logger.error(f"Bad value for '{key}' in {theme_file}: {e}")
            return theme

    logger.info(f"Loaded {len(overrides)} overrides for theme {name.value}")
    return replace(theme, **overrides)


def load_themes(themes_path: Path | None = None) -> dict[ThemeName, Theme]:
    """Load every theme, with overrides from ``themes_path`` if given."""
    return {name: load_theme(name, themes_path) for name in ThemeName}
