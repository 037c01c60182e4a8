"""Unit tests for PipeManager."""
from __future__ import annotations

import random

from neonflap.game.bird import Bird
from neonflap.game.constants import CANVAS_WIDTH, GROUND_Y
from neonflap.game.pipes import Pipe, PipeManager


def make_manager(seed: int = 7) -> PipeManager:
    return PipeManager(rng=random.Random(seed), spawn_x=CANVAS_WIDTH, ground_y=GROUND_Y)


def test_spawn_only_on_period():
    manager = make_manager()
    assert manager.maybe_spawn(1) is None
    assert manager.maybe_spawn(99) is None

    pipe = manager.maybe_spawn(100)
    assert pipe is not None
    assert pipe.x == CANVAS_WIDTH
    assert len(manager) == 1


def test_pipe_after_fifty_frames():
    """A pipe spawned on frame 0 sits at width - 100 after 50 frames and is kept."""
    manager = make_manager()
    for frame in range(50):
        manager.maybe_spawn(frame)
        manager.advance()
        assert manager.retire_offscreen() == 0

    assert len(manager) == 1
    assert manager.pipes[0].x == CANVAS_WIDTH - 100


def test_gap_within_bounds():
    manager = make_manager(seed=99)
    for _ in range(500):
        gap_top = manager.random_gap_top()
        assert 50 <= gap_top <= GROUND_Y - manager.GAP - 40


def test_gap_floor_applies():
    """Low random draws are lifted to the minimum gap position."""

    class ZeroRandom(random.Random):
        def random(self):
            return 0.0

    manager = PipeManager(rng=ZeroRandom(), ground_y=GROUND_Y)
    assert manager.random_gap_top() == 50


def test_pipes_stay_ordered():
    manager = make_manager()
    for frame in range(0, 450):
        manager.maybe_spawn(frame)
        manager.advance()
        manager.retire_offscreen()

    xs = [p.x for p in manager]
    assert xs == sorted(xs)
    assert len(xs) >= 2


def test_retire_only_from_front():
    """Retirement pops leading offscreen pipes and stops at the first visible one."""
    manager = make_manager()
    manager.pipes.extend([
        Pipe(x=-60, gap_top=100),
        Pipe(x=-50, gap_top=100),
        Pipe(x=-49, gap_top=100),
        Pipe(x=200, gap_top=100),
    ])

    assert manager.retire_offscreen() == 2
    assert [p.x for p in manager] == [-49, 200]


def test_collides_when_hitting_top_pipe():
    manager = make_manager()
    bird = Bird()
    bird.y = 100.0
    pipe = Pipe(x=bird.x, gap_top=200)

    assert manager.collides(pipe, bird)


def test_safe_inside_gap():
    manager = make_manager()
    bird = Bird()
    bird.y = 150.0
    pipe = Pipe(x=bird.x, gap_top=140)

    assert not manager.collides(pipe, bird)


def test_padding_allows_near_miss():
    """Overlaps of up to the padding are forgiven on every side."""
    manager = make_manager()
    bird = Bird()

    # Bird's top edge 3px into the top pipe
    bird.y = 97.0
    assert not manager.collides(Pipe(x=bird.x, gap_top=100), bird)

    # Bird's right edge 4px into the pipe horizontally, pipe blocks the bird's height
    bird.y = 300.0
    assert not manager.collides(Pipe(x=bird.x + bird.WIDTH - 4, gap_top=350), bird)
    assert manager.collides(Pipe(x=bird.x + bird.WIDTH - 5, gap_top=350), bird)


def test_advance_and_reset():
    manager = make_manager()
    manager.pipes.append(Pipe(x=100, gap_top=100))
    manager.advance()
    assert manager.pipes[0].x == 98

    manager.reset()
    assert len(manager) == 0
