"""iOS strings formatting, writing and reporting operations."""

from __future__ import annotations

from .ios import (
    BASE_DIR_NAME,
    DEFAULT_BASE_LANG,
    REPLACEMENT_RULES,
    STRINGS_FILENAME,
    build_file_path,
    build_line,
    file_contents,
    normalize,
    select_base_translation,
    write_ios,
    write_translation,
)
from .operations import OperationResult, StringsOperations

__all__ = [
    "BASE_DIR_NAME",
    "DEFAULT_BASE_LANG",
    "REPLACEMENT_RULES",
    "STRINGS_FILENAME",
    "OperationResult",
    "StringsOperations",
    "build_file_path",
    "build_line",
    "file_contents",
    "normalize",
    "select_base_translation",
    "write_ios",
    "write_translation",
]
