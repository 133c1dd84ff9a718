from typing import Optional, Union
from pathlib import Path
import json
import logging

from .settings import SAVE_KEY_SCORE

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Single persisted high score.

    With no path the value only lives in memory, which is what tests and
    throwaway sessions use.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None, key: str = SAVE_KEY_SCORE) -> None:
        self.path = Path(path) if path is not None else None
        self.key = key
        self._value = 0

    def load(self) -> int:
        """Highest of the persisted score and anything saved this session"""
        if self.path is None or not self.path.exists():
            return self._value
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
            value = int(data[self.key])
        except (json.JSONDecodeError, IOError, KeyError, TypeError, ValueError) as e:
            logger.warning("Ignoring unreadable high score in %s: %s", self.path, e)
            return self._value
        return max(value, self._value)

    def save(self, score: int) -> None:
        self._value = score
        if self.path is None:
            return
        try:
            with open(self.path, 'w') as f:
                json.dump({self.key: score}, f)
        except OSError as e:
            # The in-memory high score stays authoritative for the session
            logger.warning("Could not save high score to %s: %s", self.path, e)
