"""User preferences persistence for the strings writer.

Stores defaults for the project name, base language and output root in a
JSON file in the user's home directory. The location can be overridden
with the ``JARGON_STRINGS_CONFIG`` environment variable or an explicit
path.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

CONFIG_ENV_VAR = "JARGON_STRINGS_CONFIG"
_PREFERENCES_PATH = Path.home() / ".jargon_strings.json"

DEFAULT_PREFERENCES: Dict[str, Any] = {
    "project": "",
    "base_lang": "default",
    "output_root": "",  # Empty means the current working directory
}


def get_preferences_path() -> Path:
    """Return the preferences file location, honoring the env override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override).expanduser() if override else _PREFERENCES_PATH


def load_preferences(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return stored user preferences, merged with defaults.

    Missing, unreadable or malformed files yield the defaults.

    Args:
        path: Preferences file; uses get_preferences_path() if omitted.

    Returns:
        A dictionary containing all preference keys with their current values.
    """
    prefs_path = path or get_preferences_path()
    result = DEFAULT_PREFERENCES.copy()

    if not prefs_path.exists():
        return result

    try:
        data = json.loads(prefs_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return result

    if not isinstance(data, dict):
        return result

    result.update(data)
    return result


def save_preferences(preferences: Dict[str, Any], path: Optional[Path] = None) -> None:
    """Persist user preferences to disk.

    Args:
        preferences: The complete preferences dictionary to save.
        path: Preferences file; uses get_preferences_path() if omitted.

    Raises:
        OSError: If the file cannot be written.
    """
    prefs_path = path or get_preferences_path()
    prefs_path.parent.mkdir(parents=True, exist_ok=True)
    serialized = json.dumps(preferences, indent=2, sort_keys=True)
    prefs_path.write_text(serialized, encoding="utf-8")


@dataclass
class WriterSettings:
    """Resolved options for a write run.

    Attributes:
        project: Project folder name.
        base_lang: Base language selector, ``"default"`` for the first one.
        output_root: Directory that holds the project folder; empty for
            the current working directory.
    """

    project: str
    base_lang: str = "default"
    output_root: str = ""

    @property
    def root(self) -> Optional[Path]:
        return Path(self.output_root).expanduser() if self.output_root else None


def resolve_settings(
    preferences: Dict[str, Any],
    project: Optional[str] = None,
    base_lang: Optional[str] = None,
    output_root: Optional[str] = None,
) -> WriterSettings:
    """Combine stored preferences with explicit overrides.

    Explicit arguments win over stored values when they are not None.

    Raises:
        ValueError: If no project name is available.
    """
    resolved_project = project if project is not None else preferences.get("project", "")
    if not resolved_project:
        raise ValueError("No project name given and none stored in preferences")

    return WriterSettings(
        project=str(resolved_project),
        base_lang=str(
            base_lang if base_lang is not None else preferences.get("base_lang") or "default"
        ),
        output_root=str(
            output_root if output_root is not None else preferences.get("output_root") or ""
        ),
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_PREFERENCES",
    "WriterSettings",
    "get_preferences_path",
    "load_preferences",
    "resolve_settings",
    "save_preferences",
]
