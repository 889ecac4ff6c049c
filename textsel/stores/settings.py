"""Settings file holding the textobject select options."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(os.environ.get("TEXTSEL_CONFIG_DIR", Path.home() / ".textsel"))


def _resolve_settings_path() -> Path:
    override = os.environ.get("TEXTSEL_SETTINGS_PATH", "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "settings.json"


class SettingsStore:
    """Read-only view of settings kept as a JSON object.

    The file defaults to ~/.textsel/settings.json; select options live under
    the "textobjects.select" key. A missing, unreadable or non-object file
    reads as no settings.
    """

    def __init__(self, file_path: Path | None = None) -> None:
        self.file_path = file_path or _resolve_settings_path()

    def exists(self) -> bool:
        return self.file_path.exists()

    def load_all(self) -> dict[str, Any]:
        if not self.exists():
            return {}
        try:
            data = json.loads(self.file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.debug("Ignoring unreadable settings file %s: %s", self.file_path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self.load_all().get(key, default)


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Load settings from an explicit path, or from the resolved settings file."""
    return SettingsStore(path).load_all()
