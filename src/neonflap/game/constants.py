"""Playfield geometry and game-flow timings (all in logical pixels / frames)."""

# Logical canvas
CANVAS_WIDTH = 320
CANVAS_HEIGHT = 480

# Ground band at the bottom of the canvas
GROUND_HEIGHT = 80
GROUND_Y = CANVAS_HEIGHT - GROUND_HEIGHT

# Frames that must pass after a crash before a restart is accepted
RESTART_COOLDOWN_FRAMES = 30

# Camera shake
SHAKE_START = 20.0
SHAKE_DAMPING = 0.9
SHAKE_CUTOFF = 0.5

# Sound cue names
CUE_JUMP = "jump"
CUE_SCORE = "score"
CUE_CRASH = "crash"

# Theme toggle button on the ready screen: x, y, width, height
THEME_BUTTON_RECT = (100, 300, 120, 24)
