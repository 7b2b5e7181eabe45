"""Core data models for the strings writer.

Exports:
    Translation: One language's key to string mapping.
    TranslationFormatError: Raised when translation input is malformed.
    load_translations: Read translations from a JSON document.
"""

from .translation import Translation, TranslationFormatError, load_translations

__all__ = [
    "Translation",
    "TranslationFormatError",
    "load_translations",
]
