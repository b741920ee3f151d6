"""Theme preference repository (the only durable client-side state)."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from planchat.events.Event_Bus import GLOBAL_EVENT_BUS, THEME_CHANGED
from planchat.infra.paths import THEME_FILE
from planchat.utilities.constants import DEFAULT_THEME, THEMES, THEME_KEY

logger = logging.getLogger(__name__)


class ThemeStore:
    def __init__(self, path: Optional[Path] = None, event_bus=None):
        self.path = Path(path) if path else THEME_FILE
        self._event_bus = event_bus or GLOBAL_EVENT_BUS
        self.current = DEFAULT_THEME

    def _read_store(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                store = json.load(f)
            return store if isinstance(store, dict) else {}
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Unreadable theme file {self.path}: {e}")
            return {}

    def _atomic_write(self, store: dict) -> None:
        os.makedirs(self.path.parent, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".theme_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(store, tmp, indent=2)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def load(self) -> str:
        """Read the saved theme (default 'light') and apply it."""
        saved = self._read_store().get(THEME_KEY)
        return self.set(saved if saved in THEMES else DEFAULT_THEME)

    def set(self, theme: str) -> str:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme {theme!r}; expected one of {THEMES}")
        store = self._read_store()
        store[THEME_KEY] = theme
        try:
            self._atomic_write(store)
        except OSError as e:
            logger.error(f"Failed to persist theme preference: {e}")
        self.current = theme
        self._event_bus.publish(THEME_CHANGED, {"theme": theme})
        return theme

    def toggle(self) -> str:
        return self.set("dark" if self.current == "light" else "light")
