"""Persistent settings for the strings writer."""

from .preferences import WriterSettings, load_preferences, resolve_settings

__all__ = [
    "WriterSettings",
    "load_preferences",
    "resolve_settings",
]
