
"""High score persistence (single JSON number under ~/.tetris)"""
import json
import logging
import os
from typing import Optional
from tetris_config import CONFIG

log = logging.getLogger(__name__)

class HighScoreStore:
    def __init__(self, path: Optional[str] = None):
        self.path = path or CONFIG["HIGHSCORE_PATH"]

    def load_high_score(self) -> int:
        """Stored high score, or 0 if the file is missing or unreadable."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            value = int(data["high_score"])
        except FileNotFoundError:
            return 0
        except (OSError, ValueError, TypeError, KeyError, OverflowError) as e:
            log.debug("ignoring unreadable high score file %s: %s", self.path, e)
            return 0
        return max(value, 0)

    def save_high_score(self, value: int):
        try:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({"high_score": int(value)}, f)
        except OSError as e:
            log.warning("could not save high score to %s: %s", self.path, e)


class MemoryStore:
    """In-process store for headless sessions."""
    def __init__(self, value: int = 0):
        self.value = value
    def load_high_score(self) -> int:
        return self.value
    def save_high_score(self, value: int):
        self.value = value
