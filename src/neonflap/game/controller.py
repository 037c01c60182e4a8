"""
Game controller: turns input into state transitions and runs the
per-frame update pass.

    READY --activate--> PLAYING --collision--> GAME_OVER --activate (after cooldown)--> READY
"""

import logging

from config.themes.base import next_theme
from neonflap.core.events import Event, EventBus, EventType, sound_event
from neonflap.core.state import GameState
from neonflap.game.constants import (
    CUE_CRASH,
    CUE_JUMP,
    CUE_SCORE,
    RESTART_COOLDOWN_FRAMES,
    SHAKE_START,
)
from neonflap.game.world import World

logger = logging.getLogger(__name__)


class GameController:
    """Orchestrates the bird, pipes, particles and score for one world.

    The controller is the only writer of gameplay state. It never
    draws and never advances the frame clock; the frame driver does
    that after rendering.
    """

    TRAIL_EVERY = 5  # frames between trail particles while playing

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

        self._unsubscribers = [
            event_bus.subscribe(EventType.ACTIVATE, self._on_activate),
            event_bus.subscribe(EventType.TOGGLE_THEME, self._on_toggle_theme),
        ]
        world.state_machine.add_listener(self._on_state_changed)

    def close(self) -> None:
        """Detach from the event bus and state machine."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        self.world.state_machine.remove_listener(self._on_state_changed)

    # ----- input -----

    def _on_activate(self, event: Event) -> None:
        self.activate()

    def _on_toggle_theme(self, event: Event) -> None:
        self.toggle_theme()

    def activate(self) -> None:
        """Single player action: start, flap, or restart depending on state."""
        world = self.world
        state = world.state

        if state is GameState.READY:
            self._start_run()
        elif state is GameState.PLAYING:
            self._flap()
        elif state is GameState.GAME_OVER:
            if self.can_restart():
                self._restart()
            else:
                logger.debug(
                    f"Restart ignored, {world.clock.elapsed_since(world.die_frame)} "
                    f"of {RESTART_COOLDOWN_FRAMES} cooldown frames elapsed"
                )

    def can_restart(self) -> bool:
        """True once the post-crash cooldown has elapsed."""
        world = self.world
        return (
            world.state is GameState.GAME_OVER
            and world.clock.elapsed_since(world.die_frame) >= RESTART_COOLDOWN_FRAMES
        )

    def toggle_theme(self) -> None:
        """Swap to the other visual theme. Gameplay is untouched."""
        world = self.world
        world.theme_name = next_theme(world.theme_name)
        logger.info(f"Theme switched to {world.theme_name.value}")
        self.event_bus.emit(Event(
            EventType.THEME_CHANGED,
            data={"theme": world.theme_name.value},
            source="controller",
        ))

    # ----- transitions -----

    def _start_run(self) -> None:
        if not self.world.state_machine.transition(GameState.PLAYING):
            return
        self.world.overlay_visible = False
        self._play(CUE_JUMP)

    def _flap(self) -> None:
        world = self.world
        world.bird.flap()
        self._play(CUE_JUMP)
        x, y = world.bird.trail_origin
        world.particles.burst_trail(x, y, world.theme.particle_color)

    def game_over(self, reason: str = "pipe") -> bool:
        """End the current run.

        Calling this outside PLAYING (including a second time in the
        same crash) does nothing.

        Returns:
            True if the run actually ended now
        """
        world = self.world
        if not world.state_machine.transition(GameState.GAME_OVER):
            return False

        world.die_frame = world.clock.frame
        world.shake = SHAKE_START
        cx, cy = world.bird.center
        world.particles.burst_explosion(cx, cy)
        self._play(CUE_CRASH)
        logger.info(
            f"Game over ({reason}) at frame {world.die_frame}, "
            f"score {world.score.value}, best {world.score.best}"
        )
        return True

    def _restart(self) -> None:
        world = self.world
        if not world.state_machine.transition(GameState.READY):
            return

        world.bird.reset()
        world.pipes.reset()
        world.score.reset()
        world.particles.clear()
        world.shake = 0.0
        world.overlay_visible = True
        world.clock.reset()
        logger.info("Game reset, waiting for player")

    def _on_state_changed(self, old: GameState, new: GameState) -> None:
        self.event_bus.emit(Event(
            EventType.STATE_CHANGED,
            data={"from": old.name, "to": new.name},
            source="controller",
        ))

    # ----- per-frame update -----

    def update(self) -> None:
        """Run one frame of game logic."""
        world = self.world
        bird = world.bird
        frame = world.clock.frame

        if world.state is GameState.READY:
            bird.idle(frame)
        else:
            on_ground = bird.step()
            if on_ground and world.state is GameState.PLAYING:
                self.game_over("ground")

        if world.state is GameState.PLAYING:
            self._update_pipes(frame)

        if world.state is GameState.PLAYING and world.clock.every(self.TRAIL_EVERY):
            x, y = bird.trail_origin
            world.particles.emit_trail(x, y, world.theme.particle_color)

        world.particles.update()
        world.damp_shake()

    def _update_pipes(self, frame: int) -> None:
        world = self.world
        pipes = world.pipes

        pipes.maybe_spawn(frame)
        pipes.advance()

        if pipes.any_collision(world.bird):
            self.game_over("pipe")
            return

        for _ in range(pipes.retire_offscreen()):
            self._score_point()

    def _score_point(self) -> None:
        score = self.world.score
        new_best = score.record_pass()
        self._play(CUE_SCORE)
        self.event_bus.emit(Event(
            EventType.SCORED,
            data={"value": score.value, "best": score.best},
            source="controller",
        ))
        if new_best:
            self.event_bus.emit(Event(
                EventType.NEW_BEST, data={"best": score.best}, source="controller"
            ))

    def end_frame(self) -> int:
        """Advance the frame clock once the frame has been drawn."""
        return self.world.clock.advance()

    def _play(self, cue: str) -> None:
        self.event_bus.emit(sound_event(cue, source="controller"))
