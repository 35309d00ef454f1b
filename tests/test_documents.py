"""
Tests for document reading, discovery, pairing and changed-file lookup.
"""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from wordsik_validator.documents import (
    find_json_files,
    find_source_file,
    get_changed_files,
    json_files_in_directory,
    load_unit,
    parse_content_path,
    parse_json,
    read_text,
)
from wordsik_validator.errors import DocumentParseError, DocumentReadError


class TestReadingDocuments:
    """Test reading and parsing documents."""

    def test_read_missing_file(self, data_root):
        """Test that a missing file raises a read error naming the path."""
        missing = data_root / "nope.json"

        with pytest.raises(DocumentReadError) as exc_info:
            read_text(missing)

        assert "File not found" in str(exc_info.value)
        assert exc_info.value.path == str(missing)

    def test_read_invalid_utf8(self, write_raw):
        path = write_raw("bad.json", b'{"word": "\xff\xfe"}')

        with pytest.raises(DocumentReadError) as exc_info:
            read_text(path)

        assert "Invalid UTF-8" in str(exc_info.value)

    def test_parse_json_reports_position(self):
        """Test that parse failures carry the decoder's line and column."""
        with pytest.raises(DocumentParseError) as exc_info:
            parse_json('{\n  "week": 1,\n  "theme": \n}', "unit.json")

        error = exc_info.value
        assert error.path == "unit.json"
        assert error.line == 4
        assert error.column is not None
        assert "Invalid JSON in unit.json" in str(error)

    def test_load_unit_fills_language_and_grade_from_path(self, write_unit, make_word):
        path = write_unit("vocabulary", "es", "grade-2", "week-1.json",
                          words=[make_word("cat", "gato")], language=None, grade=None)

        unit = load_unit(path)

        assert unit.language == "es"
        assert unit.grade == "grade-2"
        assert unit.source_path == path
        assert unit.words[0].translation == "gato"


class TestContentPaths:
    """Test path parsing and file discovery."""

    def test_parse_content_path(self):
        location = parse_content_path("data/grammar/fr/grade-3/unit-2.json")

        assert location.content_type == "grammar"
        assert location.language == "fr"
        assert location.grade == "grade-3"

    def test_parse_content_path_without_layout(self):
        location = parse_content_path("unit.json")

        assert location.content_type is None
        assert location.language is None
        assert location.grade is None

    def test_find_json_files_is_sorted_and_recursive(self, write_unit, write_raw, data_root):
        """Test that discovery finds nested JSON files only, in sorted order."""
        b = write_unit("vocabulary", "es", "grade-1", "week-2.json", words=[])
        a = write_unit("vocabulary", "en", "grade-1", "week-1.json", words=[])
        write_raw("vocabulary/en/grade-1/notes.txt", "not json")

        assert find_json_files(data_root) == [a, b]

    def test_find_json_files_missing_root(self, tmp_path):
        assert find_json_files(tmp_path / "missing") == []

    def test_json_files_in_directory_is_not_recursive(self, write_unit, data_root):
        direct = write_unit("vocabulary", "en", "grade-1", "week-1.json", words=[])

        assert json_files_in_directory(data_root / "vocabulary" / "en" / "grade-1") == [direct]
        assert json_files_in_directory(data_root / "vocabulary") == []
        assert json_files_in_directory(data_root / "missing") == []


class TestFindSourceFile:
    """Test pairing target-language files with source-language files."""

    def test_finds_counterpart(self, write_unit):
        source = write_unit("vocabulary", "en", "grade-1", "week-1.json", words=[])
        target = write_unit("vocabulary", "es", "grade-1", "week-1.json", words=[])

        assert find_source_file(target) == source

    def test_missing_counterpart(self, write_unit):
        target = write_unit("vocabulary", "fr", "grade-1", "week-9.json", words=[])

        assert find_source_file(target) is None

    def test_path_without_language(self):
        assert find_source_file("data/vocabulary/week-1.json") is None


class TestGetChangedFiles:
    """Test changed-file lookup through git."""

    @patch("wordsik_validator.documents.subprocess.run")
    def test_returns_changed_json_files(self, mock_run):
        """Test that only JSON paths from the diff are returned."""
        mock_run.return_value = MagicMock(
            returncode=0,
            stdout="data/vocabulary/es/grade-1/week-1.json\nREADME.md\n\n"
                   "data/vocabulary/fr/grade-1/week-1.json\n",
            stderr="",
        )

        assert get_changed_files("main") == [
            "data/vocabulary/es/grade-1/week-1.json",
            "data/vocabulary/fr/grade-1/week-1.json",
        ]
        cmd = mock_run.call_args[0][0]
        assert cmd == ["git", "diff", "--name-only", "origin/main...HEAD"]

    @patch("wordsik_validator.documents.subprocess.run")
    def test_git_failure_returns_empty(self, mock_run):
        mock_run.return_value = MagicMock(returncode=128, stdout="", stderr="fatal: bad revision")

        assert get_changed_files() == []

    @patch("wordsik_validator.documents.subprocess.run", side_effect=FileNotFoundError("git"))
    def test_missing_git_returns_empty(self, mock_run):
        assert get_changed_files() == []

    @patch("wordsik_validator.documents.subprocess.run",
           side_effect=subprocess.TimeoutExpired(cmd="git", timeout=30))
    def test_timeout_returns_empty(self, mock_run):
        assert get_changed_files() == []
