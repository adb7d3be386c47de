"""Persisted display preferences."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .config import PREFS_FILE

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")


def detect_system_theme() -> str:
    """Ambient color scheme: WORKLOG_COLOR_SCHEME, then COLORFGBG, then light."""
    explicit = os.environ.get("WORKLOG_COLOR_SCHEME", "").strip().lower()
    if explicit in THEMES:
        return explicit

    # COLORFGBG is "fg;bg" (sometimes "fg;default;bg"); bg 0-6 or 8 is a dark palette color
    colorfgbg = os.environ.get("COLORFGBG", "")
    if colorfgbg:
        bg = colorfgbg.split(";")[-1]
        if bg.isdigit() and (int(bg) <= 6 or int(bg) == 8):
            return "dark"
    return "light"


@dataclass
class Preferences:
    """User display preferences, written through on every change."""

    theme: str = "light"
    path: Path = PREFS_FILE

    def save(self) -> None:
        """Save preferences to file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"theme": self.theme}))

    @classmethod
    def load(cls, path: Path | None = None) -> "Preferences":
        """Load preferences, falling back to the ambient theme."""
        path = path or PREFS_FILE
        theme = None
        if path.exists():
            try:
                theme = json.loads(path.read_text()).get("theme")
            except (json.JSONDecodeError, AttributeError) as e:
                logger.warning(f"Ignoring unreadable preferences file {path}: {e}")
        if theme not in THEMES:
            theme = detect_system_theme()
        return cls(theme=theme, path=path)

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme {theme!r}, expected one of {', '.join(THEMES)}")
        self.theme = theme
        self.save()

    def toggle(self) -> str:
        """Flip between light and dark. Returns the new theme."""
        self.set_theme("light" if self.theme == "dark" else "dark")
        return self.theme
