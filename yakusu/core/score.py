from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class ScoreBackend(Protocol):
    """Anything that can load and save the best level."""

    def load(self) -> int: ...

    def save(self, level: int) -> None: ...


class ScoreStore:
    """Persists the best level reached. File: ~/.yakusu/score.json by default.

    Storage problems never reach the player: an unreadable file loads as 0
    and a failed write is logged and dropped.
    """

    def __init__(self, file_path: Optional[Path] = None) -> None:
        self._file_path = file_path or Path.home() / ".yakusu" / "score.json"

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> int:
        if not self._file_path.exists():
            return 0
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning("Could not load best level from %s: %s", self._file_path, e)
            return 0
        if not isinstance(payload, dict):
            logger.warning("Ignoring malformed score file %s", self._file_path)
            return 0
        try:
            level = int(payload.get("best_level", 0))
        except (TypeError, ValueError, OverflowError):
            logger.warning("Ignoring malformed best level in %s", self._file_path)
            return 0
        return max(level, 0)

    def save(self, level: int) -> None:
        """Write ``level`` unconditionally; callers only pass a new best."""
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps({"best_level": int(level)}, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save best level to %s: %s", self._file_path, e)


class MemoryScoreStore:
    """Same surface as ScoreStore, kept in memory."""

    def __init__(self, level: int = 0) -> None:
        self.level = level
        self.saves: list[int] = []

    def load(self) -> int:
        return self.level

    def save(self, level: int) -> None:
        self.level = level
        self.saves.append(level)
