"""JSON-backed settings for the command-line defaults."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

_SETTINGS_DIR = "dirsize"
_SETTINGS_FILE = "settings.json"

DEFAULTS: dict[str, Any] = {
    "sort.property": "size",
    "sort.direction": "ascending",
    "listing.tolerate_errors": True,
}


def config_dir() -> Path:
    """Return $XDG_CONFIG_HOME/dirsize, with XDG_CONFIG_HOME defaulting to ~/.config."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / _SETTINGS_DIR


class Settings:
    """Read-only settings loaded from a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("sort.property")  # reads data["sort"]["property"]

    Keys missing from the file fall back to ``DEFAULTS``. The file is
    edited by hand; nothing here writes it.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (config_dir() / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        if default is None:
            default = DEFAULTS.get(key)
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_bool(self, key: str) -> bool:
        """Get a boolean; anything other than JSON true/false falls back to the default."""
        value = self.get(key)
        if isinstance(value, bool):
            return value
        log.warning("Ignoring setting '%s': expected true or false, got %r", key, value)
        return bool(DEFAULTS.get(key))

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Ignoring settings in %s: expected a JSON object", self._path)
            return
        self._data = data
