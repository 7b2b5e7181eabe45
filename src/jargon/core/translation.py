"""Translation data model and JSON input loading.

A Translation holds one language's strings. The loader reads the simple
JSON layout consumed by the command-line tool::

    {
        "en": {"greeting": "Hello %s"},
        "fr": {"greeting": "Bonjour %s"}
    }

Languages and keys keep the order in which they appear in the file.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping


class TranslationFormatError(ValueError):
    """Raised when a translations document does not have the expected shape."""


@dataclass(frozen=True)
class Translation:
    """A single language's complete set of localized strings.

    Attributes:
        lang: Language identifier, e.g. "en" or "pt-BR".
        translations: Mapping of string key to localized value. Iteration
            order is the order entries are written in.
    """

    lang: str
    translations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "translations", MappingProxyType(dict(self.translations))
        )

    def __len__(self) -> int:
        return len(self.translations)


def _is_encodable(*texts: str) -> bool:
    try:
        for text in texts:
            text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _parse_document(data: Any, source: str) -> List[Translation]:
    if not isinstance(data, dict):
        raise TranslationFormatError(
            f"{source}: expected an object mapping languages to strings"
        )

    result: List[Translation] = []
    for lang, entries in data.items():
        if not isinstance(entries, dict):
            raise TranslationFormatError(
                f"{source}: strings for {lang!r} must be an object"
            )
        if not _is_encodable(lang):
            raise TranslationFormatError(
                f"{source}: language {lang!r} cannot be encoded as UTF-8"
            )
        for key, value in entries.items():
            if not isinstance(value, str):
                raise TranslationFormatError(
                    f"{source}: value for {lang!r}.{key!r} must be a string"
                )
            if not _is_encodable(key, value):
                raise TranslationFormatError(
                    f"{source}: {lang!r}.{key!r} cannot be encoded as UTF-8"
                )
        result.append(Translation(lang=lang, translations=entries))
    return result


def load_translations(path: Path | str) -> List[Translation]:
    """Read translations from a JSON file.

    Args:
        path: Location of the JSON document.

    Returns:
        One Translation per language, in file order.

    Raises:
        OSError: If the file cannot be read.
        TranslationFormatError: If the file is not UTF-8 encoded JSON, does
            not map languages to objects of strings, or holds text that
            cannot be written back as UTF-8.
    """

    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TranslationFormatError(f"{source}: not valid UTF-8 ({exc})") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TranslationFormatError(f"{source}: invalid JSON ({exc})") from exc
    return _parse_document(data, str(source))


__all__ = ["Translation", "TranslationFormatError", "load_translations"]
