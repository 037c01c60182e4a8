"""
Main entry point for NEON FLAP.

Wires settings, persistence, the world, the controller, audio and the
window together, then runs the frame loop.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from config.settings import Settings, get_settings
from config.themes.base import ThemeName, load_themes
from neonflap.core.events import EventBus, EventType


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


async def run_game(settings: Settings) -> None:
    """Build the game from settings and run it until the window closes."""
    from neonflap.audio.engine import get_audio_engine
    from neonflap.display.window import GameWindow, WindowConfig
    from neonflap.game.controller import GameController
    from neonflap.game.scoring import BestScoreStore, MemoryScoreStore, Score
    from neonflap.game.world import World
    from neonflap.graphics.renderer import GameRenderer

    logger = logging.getLogger(__name__)

    if settings.persist_best:
        store = BestScoreStore(settings.best_score_path)
    else:
        store = MemoryScoreStore()
    score = Score(store)
    logger.info(f"Best score: {score.best}")

    # Create shared components
    event_bus = EventBus()
    world = World(
        score=score,
        themes=load_themes(settings.themes_path),
        theme_name=ThemeName(settings.theme),
    )
    controller = GameController(world, event_bus)

    audio = get_audio_engine(enabled=settings.audio_enabled)
    # Open the mixer first so pygame.init() does not pick its own format
    audio.init()
    event_bus.subscribe(EventType.SOUND_PLAY, audio.handle_event)

    display = settings.display
    window = GameWindow(
        world=world,
        controller=controller,
        event_bus=event_bus,
        renderer=GameRenderer(),
        config=WindowConfig(
            title=display.title,
            fps=display.fps,
            scale=display.scale,
            fullscreen=display.fullscreen,
        ),
    )

    try:
        await window.run()
    finally:
        controller.close()
        audio.cleanup()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug, settings.log_file)

    logger = logging.getLogger(__name__)
    logger.info("NEON FLAP starting...")

    try:
        asyncio.run(run_game(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("NEON FLAP stopped")


if __name__ == "__main__":
    main()
