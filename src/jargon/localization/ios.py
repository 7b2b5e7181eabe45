"""iOS ``Localizable.strings`` writer.

Formats each Translation into ``"key" = "value";`` lines and writes one
file per language under ``<root>/<project>/<lang>.lproj/``. A copy of the
selected base translation is written to ``Base.lproj``.

Usage::

    from jargon.localization.ios import write_ios

    paths = write_ios(translations, "MyApp", "default")
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..core import Translation

logger = logging.getLogger(__name__)

DEFAULT_BASE_LANG = "default"
BASE_DIR_NAME = "Base"
STRINGS_FILENAME = "Localizable.strings"

# Applied in order; later rules see the output of earlier ones.
REPLACEMENT_RULES: List[Tuple[re.Pattern[str], str]] = [
    (re.compile(r"%s", re.IGNORECASE), "%@"),
    (re.compile(r"%([0-9]+\$)s", re.IGNORECASE), r"%\1@"),
    (re.compile(r"%newline%", re.IGNORECASE), r"\\n"),
    (re.compile(r'"', re.IGNORECASE), r'\\"'),
    (re.compile(r"\n", re.IGNORECASE), r"\\n"),
]


def normalize(value: str) -> str:
    """Convert a translated value into a quoted-string-safe iOS value.

    Args:
        value: The raw translated string.

    Returns:
        The value with printf-style string specifiers turned into object
        specifiers, newline placeholders escaped and quotes escaped.
    """

    for pattern, replacement in REPLACEMENT_RULES:
        value = pattern.sub(replacement, value)
    return value


def build_line(key: str, value: str) -> str:
    """Return a single ``.strings`` entry for a key/value pair."""
    return f'"{key}" = "{normalize(value)}";'


def file_contents(translation: Translation) -> str:
    """Render a translation as ``.strings`` file text.

    Entries follow the translation's mapping order and are joined with
    ``\\n``; no trailing newline is added.
    """
    lines = [build_line(key, value) for key, value in translation.translations.items()]
    return "\n".join(lines)


def build_file_path(
    project: str,
    lang: str,
    is_base: bool = False,
    root: Optional[Path | str] = None,
) -> Path:
    """Compute the destination file and create its directory.

    Args:
        project: Project folder name placed directly under ``root``.
        lang: Language identifier used for the ``.lproj`` folder.
        is_base: Use ``Base.lproj`` instead of the language folder.
        root: Directory the project folder lives in; defaults to the
            current working directory.

    Returns:
        Absolute path of the ``Localizable.strings`` file.

    Raises:
        OSError: If the working directory cannot be determined or the
            directories cannot be created.
    """

    base_dir = Path(root).resolve() if root is not None else Path.cwd()
    dir_name = BASE_DIR_NAME if is_base else lang
    lproj_dir = base_dir / project / f"{dir_name}.lproj"
    lproj_dir.mkdir(parents=True, exist_ok=True)
    return lproj_dir / STRINGS_FILENAME


def write_translation(
    translation: Translation,
    project: str,
    is_base: bool = False,
    root: Optional[Path | str] = None,
) -> Path:
    """Write one translation to disk, replacing any existing file.

    Raises:
        UnicodeEncodeError: If a key or value holds unpaired surrogates.
            Nothing is created on disk in that case.
        OSError: Most often a permission problem or a full disk.
    """

    data = file_contents(translation).encode("utf-8")
    file_path = build_file_path(project, translation.lang, is_base=is_base, root=root)
    file_path.write_bytes(data)
    logger.debug(
        "Wrote %d strings for '%s' to %s", len(translation), translation.lang, file_path
    )
    return file_path


def select_base_translation(
    translations: Sequence[Translation], base_lang: str
) -> Optional[Translation]:
    """Pick the translation that is copied into ``Base.lproj``.

    Args:
        translations: Translations in input order.
        base_lang: A language identifier, or ``"default"`` for the first
            translation.

    Returns:
        The first matching translation, or None when nothing matches.
    """

    if base_lang == DEFAULT_BASE_LANG:
        return translations[0] if translations else None
    for translation in translations:
        if translation.lang == base_lang:
            return translation
    return None


def write_ios(
    translations: Sequence[Translation],
    project: str,
    base_lang: str,
    root: Optional[Path | str] = None,
) -> List[Path]:
    """Write every translation, then the base copy if one is selected.

    Files written before a failure stay on disk.

    Args:
        translations: Translations to write, in order.
        project: Project folder name.
        base_lang: Base language selector (see select_base_translation).
        root: Directory the project folder is created in; defaults to the
            current working directory.

    Returns:
        Written file paths: one per translation in input order, followed by
        the base file when one was produced.

    Raises:
        OSError: The first filesystem failure, unchanged.
    """

    paths = [write_translation(t, project, root=root) for t in translations]

    base = select_base_translation(translations, base_lang)
    if base is not None:
        paths.append(write_translation(base, project, is_base=True, root=root))
    elif translations:
        logger.info("No translation matches base language '%s'; skipping Base", base_lang)

    logger.info("Wrote %d strings files for project '%s'", len(paths), project)
    return paths


__all__ = [
    "BASE_DIR_NAME",
    "DEFAULT_BASE_LANG",
    "REPLACEMENT_RULES",
    "STRINGS_FILENAME",
    "build_file_path",
    "build_line",
    "file_contents",
    "normalize",
    "select_base_translation",
    "write_ios",
    "write_translation",
]
