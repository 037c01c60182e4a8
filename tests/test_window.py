"""Window input mapping and frame stepping, without opening a display."""
from __future__ import annotations

import random

import pygame
import pytest

from config.themes.base import ThemeName
from neonflap.core.events import Event, EventType
from neonflap.core.state import GameState
from neonflap.display.window import GameWindow, WindowConfig, hits_theme_button
from neonflap.game.constants import THEME_BUTTON_RECT
from neonflap.graphics.renderer import GameRenderer


@pytest.fixture
def window(world, controller, bus):
    return GameWindow(
        world=world,
        controller=controller,
        event_bus=bus,
        renderer=GameRenderer(rng=random.Random(0)),
        config=WindowConfig(scale=2),
    )


def button_centre_on_screen(scale: int = 2) -> tuple[int, int]:
    x, y, w, h = THEME_BUTTON_RECT
    return (x + w // 2) * scale, (y + h // 2) * scale


def test_hits_theme_button():
    x, y, w, h = THEME_BUTTON_RECT
    assert hits_theme_button(x, y)
    assert hits_theme_button(x + w - 1, y + h - 1)
    assert not hits_theme_button(x + w, y)
    assert not hits_theme_button(x - 1, y + 1)


def test_to_logical(window, world):
    assert window.to_logical(0, 0) == (0, 0)
    assert window.to_logical(world.width * 2 - 2, 10) == (world.width - 1, 5)
    assert window.to_logical(-1, 10) is None
    assert window.to_logical(10, world.height * 2) is None


def test_click_on_button_toggles_theme(window, world, bus):
    window.handle_pointer(*button_centre_on_screen())

    assert world.theme_name is ThemeName.RETRO
    assert world.state is GameState.READY
    assert bus.get_history(EventType.ACTIVATE) == []


def test_click_elsewhere_starts(window, world):
    window.handle_pointer(20, 20)
    assert world.state is GameState.PLAYING


def test_button_inactive_while_playing(window, world):
    """Once the overlay is gone the button area is part of the playfield."""
    window.handle_pointer(20, 20)
    window.handle_pointer(*button_centre_on_screen())

    assert world.theme_name is ThemeName.NEON
    assert world.bird.velocity == -4.6


def test_step_advances_one_frame(window, world):
    window.step()
    window.step()

    assert world.frame == 2


def test_failed_frame_is_skipped(window, world, monkeypatch):
    """An exception in one frame is logged and the loop moves on."""

    def explode(*args, **kwargs):
        raise RuntimeError("draw failed")

    monkeypatch.setattr(window.renderer, "render", explode)
    window.step()

    assert world.frame == 1


def test_quit_event_stops_loop(window, bus):
    window._running = True
    bus.emit(Event(EventType.QUIT))
    assert not window.running


def touch_tap(window, screen_x: float, screen_y: float) -> None:
    """Deliver a tap the way SDL does: FINGERDOWN plus its mouse mirror."""
    w, h = window._window_size
    window.handle_event(
        pygame.event.Event(pygame.FINGERDOWN, x=screen_x / w, y=screen_y / h, touch_id=0, finger_id=0)
    )
    window.handle_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(int(screen_x), int(screen_y)), button=1, touch=True)
    )


def test_touch_tap_on_button_toggles_once(window, world, bus):
    touch_tap(window, *button_centre_on_screen())

    assert world.theme_name is ThemeName.RETRO
    assert len(bus.get_history(EventType.TOGGLE_THEME)) == 1


def test_touch_tap_elsewhere_activates_once(window, world, bus):
    touch_tap(window, 20, 20)

    assert world.state is GameState.PLAYING
    assert len(bus.get_history(EventType.ACTIVATE)) == 1


def test_mouse_click_still_activates(window, world, bus):
    window.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(20, 20), button=1, touch=False))

    assert world.state is GameState.PLAYING
    assert len(bus.get_history(EventType.ACTIVATE)) == 1


def test_window_close_goes_through_quit_event(window, bus):
    window._running = True
    window.handle_event(pygame.event.Event(pygame.QUIT))

    assert not window.running
    assert [e.source for e in bus.get_history(EventType.QUIT)] == ["window"]


def test_escape_goes_through_quit_event(window, bus):
    window._running = True
    window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))

    assert not window.running
    assert [e.source for e in bus.get_history(EventType.QUIT)] == ["keyboard"]
