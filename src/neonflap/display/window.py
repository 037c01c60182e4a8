"""
Game window using pygame.

Owns the frame loop: input, one update pass, one draw pass, pacing.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import pygame

from neonflap.core.events import EventBus, EventType, activate_event, quit_event, toggle_theme_event
from neonflap.game.constants import THEME_BUTTON_RECT
from neonflap.game.controller import GameController
from neonflap.game.world import World
from neonflap.graphics.renderer import GameRenderer

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Game window configuration."""
    title: str = "NEON FLAP"
    fps: int = 60
    scale: int = 2
    fullscreen: bool = False
    letterbox_color: tuple[int, int, int] = (5, 0, 16)


def hits_theme_button(x: float, y: float) -> bool:
    """True if the logical point lies inside the theme toggle button."""
    bx, by, bw, bh = THEME_BUTTON_RECT
    return bx <= x < bx + bw and by <= y < by + bh


class GameWindow:
    """
    Desktop window running the game loop.

    Keyboard Mapping:
        SPACE / UP / RETURN: Activate (start, flap, restart)
        T: Toggle theme
        F: Toggle fullscreen
        S: Capture screenshot
        ESC: Exit
    """

    ACTIVATE_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_RETURN)

    def __init__(
        self,
        world: World,
        controller: GameController,
        event_bus: EventBus,
        renderer: GameRenderer | None = None,
        config: WindowConfig | None = None,
    ) -> None:
        self.world = world
        self.controller = controller
        self.event_bus = event_bus
        self.renderer = renderer or GameRenderer()
        self.config = config or WindowConfig()

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._buffer = self.renderer.new_buffer(world)

        # Where the scaled playfield sits on screen
        self._viewport = pygame.Rect(0, 0, world.width * self.config.scale, world.height * self.config.scale)
        self._window_size = self._viewport.size

        self._unsubscribe_quit = event_bus.subscribe(EventType.QUIT, lambda event: self.stop())

        logger.info("GameWindow created")

    @property
    def running(self) -> bool:
        return self._running

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)
        self._set_mode()
        self._clock = pygame.time.Clock()
        logger.info(
            f"Pygame initialized: {self.world.width}x{self.world.height} "
            f"x{self.config.scale}, {self.config.fps} fps"
        )

    def _set_mode(self) -> None:
        logical_w, logical_h = self.world.width, self.world.height

        if self.config.fullscreen:
            info = pygame.display.Info()
            screen_w, screen_h = info.current_w, info.current_h
            self._screen = pygame.display.set_mode((screen_w, screen_h), pygame.FULLSCREEN | pygame.DOUBLEBUF)
            # Largest whole scale that fits, centred
            scale = max(1, min(screen_w // logical_w, screen_h // logical_h))
        else:
            scale = self.config.scale
            screen_w, screen_h = logical_w * scale, logical_h * scale
            self._screen = pygame.display.set_mode((screen_w, screen_h), pygame.DOUBLEBUF)

        self._window_size = (screen_w, screen_h)
        view_w, view_h = logical_w * scale, logical_h * scale
        self._viewport = pygame.Rect((screen_w - view_w) // 2, (screen_h - view_h) // 2, view_w, view_h)

    def to_logical(self, screen_x: float, screen_y: float) -> Optional[tuple[float, float]]:
        """Map a screen position to logical canvas coordinates.

        Returns None for points outside the playfield.
        """
        vp = self._viewport
        if not (vp.left <= screen_x < vp.right and vp.top <= screen_y < vp.bottom):
            return None
        return (
            (screen_x - vp.x) * self.world.width / vp.width,
            (screen_y - vp.y) * self.world.height / vp.height,
        )

    # ----- input -----

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route one pygame event."""
        if event.type == pygame.QUIT:
            self.event_bus.emit(quit_event(source="window"))

        elif event.type == pygame.KEYDOWN:
            self._handle_keydown(event)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # SDL mirrors every touch as a mouse click; the FINGERDOWN already counted
            if getattr(event, "touch", False):
                return
            self.handle_pointer(*event.pos)

        elif event.type == pygame.FINGERDOWN:
            # Finger positions are normalised to the window
            w, h = self._window_size
            self.handle_pointer(event.x * w, event.y * h)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key == pygame.K_ESCAPE:
            self.event_bus.emit(quit_event(source="keyboard"))
        elif key in self.ACTIVATE_KEYS:
            self.event_bus.emit(activate_event(source="keyboard"))
        elif key == pygame.K_t:
            self.event_bus.emit(toggle_theme_event(source="keyboard"))
        elif key == pygame.K_f:
            self._toggle_fullscreen()
        elif key == pygame.K_s:
            self._capture_screenshot()

    def handle_pointer(self, screen_x: float, screen_y: float) -> None:
        """Click or touch: theme button while the overlay shows, otherwise activate."""
        pos = self.to_logical(screen_x, screen_y)
        if pos is None:
            return

        if self.world.overlay_visible and hits_theme_button(*pos):
            self.event_bus.emit(toggle_theme_event(source="pointer"))
        else:
            self.event_bus.emit(activate_event(source="pointer"))

    # ----- frame -----

    def step(self) -> None:
        """One frame of logic and drawing, without pacing."""
        try:
            self.controller.update()
            self.renderer.render(self.world, self._buffer)
        except Exception:
            # A bad frame is dropped; the next one starts clean
            logger.exception(f"Frame {self.world.frame} failed")

        self.controller.end_frame()

    def _present(self) -> None:
        if self._screen is None:
            return
        surface = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
        if self._viewport.size != surface.get_size():
            surface = pygame.transform.scale(surface, self._viewport.size)
        self._screen.fill(self.config.letterbox_color)
        self._screen.blit(surface, self._viewport.topleft)
        pygame.display.flip()

    def _capture_screenshot(self) -> None:
        """Save the current logical frame as a PNG."""
        filename = f"neonflap_{self.world.frame}.png"
        surface = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
        pygame.image.save(surface, filename)
        logger.info(f"Screenshot saved: {filename}")

    def _toggle_fullscreen(self) -> None:
        """Toggle fullscreen mode."""
        self.config.fullscreen = not self.config.fullscreen
        self._set_mode()
        logger.info(f"Fullscreen: {self.config.fullscreen}")

    async def run(self) -> None:
        """Main game loop."""
        self._init_pygame()
        self._running = True

        logger.info("Game loop started")

        while self._running:
            self._handle_events()
            if not self._running:
                break

            self.step()
            self._present()

            if self._clock:
                self._clock.tick(self.config.fps)

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        self._unsubscribe_quit()
        pygame.quit()
        logger.info("Game loop stopped")

    def stop(self) -> None:
        """Stop the game loop."""
        self._running = False
