#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Tests for the iOS strings formatter and writer.

Usage:
    python -m pytest tests/test_ios_writer.py -v
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add src to path for imports
SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from jargon.core import Translation
from jargon.localization.ios import (
    build_file_path,
    build_line,
    file_contents,
    normalize,
    select_base_translation,
    write_ios,
    write_translation,
)


@pytest.fixture
def en():
    return Translation("en", {"hello": "Hello %s", "bye": "Bye"})


@pytest.fixture
def fr():
    return Translation("fr", {"hello": "Bonjour %s", "bye": "Au revoir"})


class TestNormalize:
    """Tests for value normalization."""

    def test_string_specifier(self):
        assert normalize("%s") == "%@"

    def test_string_specifier_is_case_insensitive(self):
        assert normalize("%S and %s") == "%@ and %@"

    def test_positional_specifier(self):
        assert normalize("%1$s") == "%1$@"

    def test_multi_digit_positional_specifier(self):
        assert normalize("%2$s of %12$S") == "%2$@ of %12$@"

    def test_already_normalized_is_unchanged(self):
        assert normalize("%@") == "%@"
        assert normalize("%1$@") == "%1$@"

    def test_other_specifiers_untouched(self):
        assert normalize("%d items, %.2f%%") == "%d items, %.2f%%"

    def test_newline_placeholder(self):
        assert normalize("Line1%newline%Line2") == "Line1\\nLine2"

    def test_newline_placeholder_is_case_insensitive(self):
        assert normalize("a%NewLine%b") == "a\\nb"

    def test_quotes_are_escaped(self):
        assert normalize('She said "hi"') == 'She said \\"hi\\"'

    def test_escaped_newline_sequence_is_kept(self):
        """A backslash-n already in the value passes through unchanged."""
        assert normalize("a\\nb") == "a\\nb"

    def test_newline_character_is_escaped(self):
        """The last rule's pattern matches real line breaks."""
        assert normalize("a\nb") == "a\\nb"

    def test_placeholder_and_newline_rules_do_not_double_escape(self):
        assert normalize("x%newline%y\nz") == "x\\ny\\nz"

    def test_backslashes_are_not_escaped(self):
        assert normalize("C:\\path") == "C:\\path"

    def test_combined(self):
        value = 'Hi %s,%newline%"%1$s" has %d items'
        assert normalize(value) == 'Hi %@,\\n\\"%1$@\\" has %d items'


class TestFileContents:
    """Tests for line and file rendering."""

    def test_build_line(self):
        assert build_line("greeting", "Hello %s") == '"greeting" = "Hello %@";'

    def test_key_is_written_as_is(self):
        assert build_line('a"b', "v") == '"a"b" = "v";'

    def test_lines_follow_insertion_order(self, en):
        assert file_contents(en) == '"hello" = "Hello %@";\n"bye" = "Bye";'

    def test_no_trailing_newline(self, en):
        assert not file_contents(en).endswith("\n")

    def test_empty_translation(self):
        assert file_contents(Translation("en", {})) == ""


class TestBuildFilePath:
    """Tests for destination path construction."""

    def test_language_path(self, tmp_path):
        path = build_file_path("MyApp", "fr", root=tmp_path)
        assert path == tmp_path.resolve() / "MyApp" / "fr.lproj" / "Localizable.strings"
        assert path.parent.is_dir()
        assert not path.exists()

    def test_base_path(self, tmp_path):
        path = build_file_path("MyApp", "fr", is_base=True, root=tmp_path)
        assert path.parent.name == "Base.lproj"

    def test_defaults_to_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = build_file_path("MyApp", "en")
        assert path.is_absolute()
        assert path == Path.cwd() / "MyApp" / "en.lproj" / "Localizable.strings"

    def test_relative_root_becomes_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = build_file_path("MyApp", "en", root="out")
        assert path.is_absolute()
        assert path.parents[2] == tmp_path.resolve() / "out"

    def test_existing_directory_is_fine(self, tmp_path):
        first = build_file_path("MyApp", "en", root=tmp_path)
        second = build_file_path("MyApp", "en", root=tmp_path)
        assert first == second

    def test_file_in_the_way_raises(self, tmp_path):
        (tmp_path / "MyApp").write_text("not a directory", encoding="utf-8")
        with pytest.raises(OSError):
            build_file_path("MyApp", "en", root=tmp_path)


class TestWriteTranslation:
    """Tests for writing a single file."""

    def test_writes_utf8_without_bom(self, tmp_path):
        translation = Translation("ja", {"title": "こんにちは"})
        path = write_translation(translation, "MyApp", root=tmp_path)
        data = path.read_bytes()
        assert data == '"title" = "こんにちは";'.encode("utf-8")
        assert not data.startswith(b"\xef\xbb\xbf")

    def test_overwrites_existing_file(self, tmp_path, en):
        path = build_file_path("MyApp", "en", root=tmp_path)
        path.write_text("stale contents that are longer than the new ones " * 10)
        written = write_translation(en, "MyApp", root=tmp_path)
        assert written == path
        assert path.read_text(encoding="utf-8") == file_contents(en)

    def test_rewrite_does_not_duplicate(self, tmp_path, en):
        write_translation(en, "MyApp", root=tmp_path)
        write_translation(en, "MyApp", root=tmp_path)
        files = list((tmp_path / "MyApp").rglob("*.strings"))
        assert len(files) == 1


class TestSelectBaseTranslation:
    """Tests for base translation selection."""

    def test_default_picks_first(self, en, fr):
        assert select_base_translation([en, fr], "default") is en

    def test_default_with_no_translations(self):
        assert select_base_translation([], "default") is None

    def test_named_language(self, en, fr):
        assert select_base_translation([en, fr], "fr") is fr

    def test_unknown_language(self, en, fr):
        assert select_base_translation([en, fr], "de") is None

    def test_first_match_wins(self, en):
        other = Translation("en", {"hello": "Howdy"})
        assert select_base_translation([en, other], "en") is en

    def test_match_is_exact(self, en):
        assert select_base_translation([en], "EN") is None


class TestWriteIOS:
    """Tests for the full write."""

    def test_default_base_writes_three_files(self, tmp_path, en, fr):
        paths = write_ios([en, fr], "MyApp", "default", root=tmp_path)

        project = tmp_path.resolve() / "MyApp"
        assert paths == [
            project / "en.lproj" / "Localizable.strings",
            project / "fr.lproj" / "Localizable.strings",
            project / "Base.lproj" / "Localizable.strings",
        ]
        assert paths[2].read_text(encoding="utf-8") == file_contents(en)

    def test_named_base(self, tmp_path, en, fr):
        paths = write_ios([en, fr], "MyApp", "fr", root=tmp_path)
        assert len(paths) == 3
        assert paths[-1].read_text(encoding="utf-8") == file_contents(fr)

    def test_unmatched_base_writes_no_base(self, tmp_path, en):
        de = Translation("de", {"hello": "Hallo %s"})
        paths = write_ios([en, de], "MyApp", "fr", root=tmp_path)
        assert len(paths) == 2
        assert not (tmp_path / "MyApp" / "Base.lproj").exists()

    def test_empty_input(self, tmp_path):
        assert write_ios([], "MyApp", "default", root=tmp_path) == []
        assert not (tmp_path / "MyApp").exists()

    def test_uses_working_directory(self, tmp_path, monkeypatch, en):
        monkeypatch.chdir(tmp_path)
        paths = write_ios([en], "MyApp", "default")
        assert all(path.is_absolute() for path in paths)
        assert (tmp_path / "MyApp" / "Base.lproj" / "Localizable.strings").exists()

    def test_duplicate_languages_overwrite(self, tmp_path, en):
        later = Translation("en", {"hello": "Howdy"})
        paths = write_ios([en, later], "MyApp", "xx", root=tmp_path)
        assert paths[0] == paths[1]
        assert paths[0].read_text(encoding="utf-8") == '"hello" = "Howdy";'

    def test_failure_keeps_earlier_files(self, tmp_path, en, fr):
        project = tmp_path / "MyApp"
        project.mkdir()
        (project / "fr.lproj").write_text("blocking file", encoding="utf-8")

        with pytest.raises(OSError):
            write_ios([en, fr], "MyApp", "default", root=tmp_path)

        assert (project / "en.lproj" / "Localizable.strings").exists()
        assert not (project / "Base.lproj").exists()

    def test_unencodable_value_creates_nothing(self, tmp_path):
        translation = Translation("fr", {"a": "\ud800"})
        with pytest.raises(UnicodeEncodeError):
            write_translation(translation, "MyApp", root=tmp_path)
        assert not (tmp_path / "MyApp").exists()
