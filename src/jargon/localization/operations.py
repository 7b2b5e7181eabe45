"""Reporting wrapper around the iOS writer.

Provides StringsOperations, used by the CLI to run writes and previews and
collect their outcome in an OperationResult instead of raising.

Usage::

    from jargon.localization.operations import StringsOperations
    from jargon.utils.preferences import WriterSettings

    ops = StringsOperations(WriterSettings(project="MyApp"))
    result = ops.write(translations)
    if not result.success:
        print(result.errors)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..core import Translation
from ..utils.preferences import WriterSettings
from .ios import file_contents, write_ios

logger = logging.getLogger(__name__)


@dataclass
class OperationResult:
    """Outcome of a write or preview run, as shown by the CLI.

    Attributes:
        name: Which run produced this result, "write" or "preview".
        success: False once any error has been recorded.
        logs: One line per written file, plus notes such as a skipped Base.
        errors: Reasons the run stopped, e.g. the path that could not be
            created.
        details: ``files`` and ``languages`` for writes, ``contents`` for
            previews.
    """

    name: str
    success: bool
    logs: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    details: Dict[str, object] = field(default_factory=dict)

    def add_log(self, message: str) -> None:
        self.logs.append(message)

    def add_error(self, message: str) -> None:
        """Record why the run failed and flip ``success`` off."""
        self.errors.append(message)
        self.success = False


def _describe_os_error(exc: OSError) -> str:
    if exc.filename is None:
        return f"{type(exc).__name__}: {exc}"
    reason = exc.strerror or str(exc)
    return f"{type(exc).__name__} on {exc.filename}: {reason}"


class StringsOperations:
    """High-level write and preview operations for one project.

    Attributes:
        settings: Project name, base language and output root to use.
            Only needed for writing.
    """

    def __init__(self, settings: Optional[WriterSettings] = None):
        self.settings = settings

    def write(self, translations: Sequence[Translation]) -> OperationResult:
        """Write all translations plus the base copy.

        Args:
            translations: Translations to write, in order.

        Returns:
            An OperationResult whose ``details["files"]`` lists written
            paths. On a filesystem or encoding error the result is failed
            and says why; files written earlier are left in place.
        """

        result = OperationResult("write", True)
        settings = self.settings
        if settings is None:
            result.add_error("No project settings configured")
            return result
        try:
            paths = write_ios(
                translations,
                settings.project,
                settings.base_lang,
                root=settings.root,
            )
        except UnicodeEncodeError as exc:
            logger.debug("Encoding strings for '%s' failed: %s", settings.project, exc)
            result.add_error(f"Strings cannot be encoded as UTF-8: {exc}")
            return result
        except OSError as exc:
            logger.debug("Writing project '%s' failed: %s", settings.project, exc)
            result.add_error(_describe_os_error(exc))
            return result

        for path in paths:
            result.add_log(f"Wrote {path}")
        result.details["files"] = [str(path) for path in paths]
        result.details["languages"] = [t.lang for t in translations]
        if len(paths) == len(translations):
            result.add_log(f"No base file written for selector '{settings.base_lang}'")
        return result

    def preview(
        self, translations: Sequence[Translation], lang: str
    ) -> OperationResult:
        """Render one language's file contents without writing it.

        Args:
            translations: Available translations.
            lang: Language to render.

        Returns:
            An OperationResult with ``details["contents"]`` on success.
        """

        result = OperationResult("preview", True)
        match: Optional[Translation] = next(
            (t for t in translations if t.lang == lang), None
        )
        if match is None:
            result.add_error(f"No translation for language '{lang}'")
            return result

        result.details["contents"] = file_contents(match)
        result.add_log(f"Rendered {len(match)} strings for '{lang}'")
        return result


__all__ = ["OperationResult", "StringsOperations"]
