"""Run score, best score and the best-score slot on disk."""

from pathlib import Path
import json
import logging

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "neon_flap_best"


class BestScoreStore:
    """Single key-value slot holding the best score as a decimal string.

    Reads fall back to 0 and writes are best-effort: storage problems
    are logged and never interrupt the game.
    """

    def __init__(self, path: Path, key: str = BEST_SCORE_KEY):
        self.path = Path(path)
        self.key = key

    def load(self) -> int:
        """Read the stored best score, or 0 if absent or unreadable."""
        if not self.path.exists():
            return 0

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            best = int(str(data[self.key]))
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Failed to load best score from {self.path}: {e}")
            return 0

        if best < 0:
            logger.warning(f"Ignoring negative best score {best} in {self.path}")
            return 0

        logger.info(f"Loaded best score {best}")
        return best

    def save(self, best: int) -> None:
        """Write the best score."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({self.key: str(best)}, f)
        except OSError as e:
            logger.error(f"Failed to save best score to {self.path}: {e}")


class MemoryScoreStore:
    """In-process slot, used when no file should be touched."""

    def __init__(self, best: int = 0):
        self.best = best
        self.saves: list[int] = []

    def load(self) -> int:
        return self.best

    def save(self, best: int) -> None:
        self.best = best
        self.saves.append(best)


class Score:
    """Current run score plus the best score across runs.

    ``best`` is read once from the store and can only change when a
    point is scored.
    """

    def __init__(self, store: BestScoreStore | MemoryScoreStore):
        self._store = store
        self.value = 0
        self.best = store.load()

    def record_pass(self) -> bool:
        """Add one point for a passed pipe.

        Returns:
            True if this point set a new best score
        """
        self.value += 1
        if self.value > self.best:
            self.best = self.value
            self._store.save(self.best)
            logger.info(f"New best score: {self.best}")
            return True
        return False

    def reset(self) -> None:
        """Start a new run. The best score is kept."""
        self.value = 0
