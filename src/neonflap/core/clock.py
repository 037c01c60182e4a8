"""Frame counter driving every per-frame update."""

import logging

logger = logging.getLogger(__name__)


class FrameClock:
    """Monotonic frame counter.

    Advanced exactly once per rendered frame. Game logic is expressed
    in frames, not seconds, so gameplay speed follows the frame rate.
    """

    def __init__(self) -> None:
        self._frame = 0

    @property
    def frame(self) -> int:
        """Index of the frame currently being processed."""
        return self._frame

    def advance(self) -> int:
        """Move to the next frame and return its index."""
        self._frame += 1
        return self._frame

    def reset(self) -> None:
        """Restart counting from frame 0."""
        logger.debug(f"Frame clock reset at frame {self._frame}")
        self._frame = 0

    def elapsed_since(self, frame: int) -> int:
        """Frames elapsed since the given frame index."""
        return self._frame - frame

    def every(self, period: int) -> bool:
        """True on frames that are a multiple of ``period``."""
        return self._frame % period == 0
