"""Settings persistence for textsel."""

from .settings import SettingsStore, load_settings

__all__ = [
    "SettingsStore",
    "load_settings",
]
