"""Desktop window and frame loop."""

from neonflap.display.window import GameWindow, WindowConfig

__all__ = ["GameWindow", "WindowConfig"]
