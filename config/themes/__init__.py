"""Theme table and loaders."""

from .base import Theme, ThemeName, THEMES, load_theme, load_themes, next_theme, hex_to_rgb

__all__ = ["Theme", "ThemeName", "THEMES", "load_theme", "load_themes", "next_theme", "hex_to_rgb"]
