"""User preferences stored as a small JSON file in the home directory."""

import json
import os
from pathlib import Path

from loguru import logger

APP_NAME = "pocketcalc"
CONFIG_FILE = Path.home() / f".{APP_NAME}_config.json"

THEMES = ("light", "dark")

DEFAULT_CONFIG = {
    "theme": "light",
    "font_family": "Helvetica",
    "font_size": 20,
}


def default_config_path():
    env = os.getenv("POCKETCALC_CONFIG")
    return Path(env).expanduser() if env else CONFIG_FILE


def validate(key, value):
    """Check a preference value and return it in its stored type."""
    if key not in DEFAULT_CONFIG:
        raise ValueError(f"Unknown preference: {key}")
    if key == "theme":
        if value not in THEMES:
            raise ValueError(f"Theme must be one of {', '.join(THEMES)}, got {value!r}")
        return value
    if key == "font_size":
        try:
            size = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Font size must be an integer, got {value!r}") from None
        if isinstance(value, bool) or size <= 0:
            raise ValueError(f"Font size must be positive, got {value!r}")
        return size
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Font family must be a non-empty string")
    return value.strip()


class Config:
    def __init__(self, path=None):
        self.path = Path(path) if path else default_config_path()
        self.data = DEFAULT_CONFIG.copy()
        self._load()

    def _load(self):
        if not self.path.exists():
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                obj = json.load(f)
        except (OSError, ValueError) as exc:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            logger.warning("Ignoring preferences file {}: {}", self.path, exc)
            return
        if not isinstance(obj, dict):
            logger.warning("Ignoring preferences file {}: not a JSON object", self.path)
            return
        for key, value in obj.items():
            try:
                self.data[key] = validate(key, value)
            except ValueError as exc:
                logger.warning("Preference {!r} in {} ignored: {}", key, self.path, exc)

    def get(self, key):
        return self.data[key]

    def set(self, key, value):
        self.data[key] = validate(key, value)

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=2)
        logger.info("Preferences saved to {}", self.path)
