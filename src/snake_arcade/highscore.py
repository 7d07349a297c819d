"""Persisted high score.

The best score lives in a tiny key/value store that outlives a game session.
Storage is injected so tests can hand in a :class:`MemoryStorage`; passing
``None`` means there is nowhere to persist to and every read returns 0.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from .config import HIGH_SCORE_KEY

log = logging.getLogger(__name__)


class ScoreStorage(Protocol):
    """String key/value store, shaped like the browser's ``localStorage``."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """In-process store; lost when the process exits."""

    def __init__(self, items: Optional[Dict[str, str]] = None) -> None:
        self.items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class JsonFileStorage:
    """Store backed by a JSON object on disk.

    A missing file reads as an empty store. Unreadable or malformed files
    raise ``OSError`` / ``ValueError`` and are dealt with by the callers below.
    """

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get_item(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._load()
        except ValueError:
            log.warning("Overwriting malformed high score file %s", self.path)
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8") as fh:
                json.dump(data, fh)
            os.replace(tmp, self.path)
        finally:
            if tmp.exists():
                tmp.unlink()


def default_path() -> Path:
    return Path.home() / ".snake_arcade" / "highscore.json"


def get_high_score(storage: Optional[ScoreStorage], key: str = HIGH_SCORE_KEY) -> int:
    """Return the stored high score, or 0 when nothing usable is stored."""
    if storage is None:
        return 0
    try:
        saved = storage.get_item(key)
    except (OSError, ValueError) as exc:
        log.warning("Could not read high score: %s", exc)
        return 0
    if not saved:
        return 0
    try:
        value = int(saved)
    except ValueError:
        log.warning("Ignoring non-numeric high score %r", saved)
        return 0
    return max(value, 0)


def save_high_score(storage: Optional[ScoreStorage], score: int, key: str = HIGH_SCORE_KEY) -> bool:
    """Persist ``score`` if it beats the stored value. Returns True if written."""
    if storage is None:
        return False
    if score <= get_high_score(storage, key):
        return False
    try:
        storage.set_item(key, str(score))
    except OSError as exc:
        log.warning("Could not save high score %d: %s", score, exc)
        return False
    return True
