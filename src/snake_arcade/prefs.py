from __future__ import annotations

import json
import logging
from collections import namedtuple
from pathlib import Path

from . import config

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "best_score"
THEME_KEY = "theme"
SKIN_KEY = "skin"

ApplyResult = namedtuple("ApplyResult", ["ok", "reason"])
# reason: None on success, else "game_in_progress" or "invalid_skin"


class PreferenceStore:
    """
    Flat key-value preferences kept in a JSON file.

    Storage problems never stop the game: a missing, unreadable or corrupt
    file starts the store empty, and a failed write only logs a warning while
    the value stays available in memory.
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else config.PREFS_PATH
        self._values: dict = {}
        self.load()

    def load(self) -> None:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self._values = {}
            return
        except OSError as e:
            logger.warning("Could not read preferences from %s: %s", self.path, e)
            self._values = {}
            return

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring corrupt preferences file %s: %s", self.path, e)
            data = {}
        if not isinstance(data, dict):
            logger.warning("Ignoring preferences file %s: expected a JSON object", self.path)
            data = {}
        self._values = data

    def save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._values, indent=2, sort_keys=True), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save preferences to %s: %s", self.path, e)

    def get(self, key: str, default=None):
        return self._values.get(key, default)

    def set(self, key: str, value) -> None:
        self._values[key] = value
        self.save()

    def best_score(self) -> int:
        value = self._values.get(BEST_SCORE_KEY, 0)
        if type(value) is not int or value < 0:
            return 0
        return value

    def record_score(self, score: int) -> bool:
        """Store ``score`` if it beats the best so far; True when it did."""
        if score <= self.best_score():
            return False
        self.set(BEST_SCORE_KEY, score)
        logger.info("New best score: %d", score)
        return True


class ThemeManager:
    def __init__(self, store: PreferenceStore):
        self.store = store
        stored = store.get(THEME_KEY)
        self.current = stored if isinstance(stored, str) and stored in config.THEMES else config.DEFAULT_THEME

    @property
    def is_dark(self) -> bool:
        return self.current == "dark"

    def toggle(self) -> str:
        self.current = "light" if self.is_dark else "dark"
        self.store.set(THEME_KEY, self.current)
        return self.current


class SkinManager:
    def __init__(self, store: PreferenceStore):
        self.store = store
        stored = store.get(SKIN_KEY)
        self.current = stored if isinstance(stored, str) and stored in config.SKINS else config.DEFAULT_SKIN
        logger.debug("Skin initialised to %s", self.current)

    def apply(self, skin: str) -> bool:
        if skin not in config.SKINS:
            return False
        self.current = skin
        self.store.set(SKIN_KEY, skin)
        logger.debug("Skin applied: %s", skin)
        return True

    def apply_if_allowed(self, skin: str, game_in_progress: bool) -> ApplyResult:
        """Skins are locked while a run is in progress."""
        if game_in_progress:
            return ApplyResult(ok=False, reason="game_in_progress")
        if not self.apply(skin):
            return ApplyResult(ok=False, reason="invalid_skin")
        return ApplyResult(ok=True, reason=None)
