"""Persistent storage for index generator settings."""

from .settings import IndexSettings, SettingsStorage

__all__ = [
    "IndexSettings",
    "SettingsStorage",
]
