"""
Tests for the command-line interface.
"""

import json
import logging

import pytest

from wordsik_validator import __version__
from wordsik_validator.main import build_parser, main


@pytest.fixture(autouse=True)
def restore_root_logging():
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCommandLine:
    """Test the validate, status and template commands end to end."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "wordsik-validate" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_parser_defaults(self):
        args = build_parser().parse_args(["validate"])

        assert args.output == "text"
        assert args.files == []
        assert not args.fail_on_warnings

    def test_validate_clean_files(self, write_unit, make_word, data_root, capsys):
        path = write_unit("vocabulary", "en", "grade-1", "week-1.json", words=[make_word("cat")])

        code = main(["validate", "--json", "--content", "-f", path,
                     "--data-root", str(data_root), "-o", "json"])

        assert code == 0
        report = json.loads(capsys.readouterr().out)
        assert report["success"] is True
        assert report["summary"]["totalFiles"] == 2

    def test_validate_broken_file_exits_nonzero(self, write_raw, data_root, capsys):
        path = write_raw("vocabulary/en/grade-1/week-1.json", "{broken")

        code = main(["validate", "-j", "-f", path, "--data-root", str(data_root), "-q"])

        assert code == 1
        assert "❌ Validation failed" in capsys.readouterr().out

    def test_fail_on_warnings(self, write_unit, make_word, data_root, capsys):
        """Test that warnings only fail the run with --fail-on-warnings."""
        path = write_unit("vocabulary", "en", "grade-1", "week-1.json",
                          words=[make_word("cat"), make_word("cat")])
        base_args = ["validate", "-c", "-f", path, "--data-root", str(data_root), "-q"]

        assert main(base_args) == 0
        assert main(base_args + ["--fail-on-warnings"]) == 1

    def test_status(self, write_unit, make_word, data_root, capsys):
        write_unit("vocabulary", "en", "grade-1", "week-1.json", words=[make_word("cat", "cat")])

        code = main(["status", "--data-root", str(data_root), "-o", "markdown"])

        assert code == 0
        assert "| en | 1 | 1 | 0 |" in capsys.readouterr().out

    def test_template_to_file(self, write_unit, make_word, tmp_path, capsys):
        source = write_unit("vocabulary", "en", "grade-1", "week-1.json", words=[make_word("cat")])
        output = tmp_path / "out" / "week-1.es.json"

        code = main(["template", source, "es", "-o", str(output)])

        assert code == 0
        assert "Template saved" in capsys.readouterr().out
        template = json.loads(output.read_text(encoding="utf-8"))
        assert template["language"] == "es"
        assert template["words"][0]["word"] == "cat"

    def test_template_unsupported_language(self, write_unit, make_word, capsys):
        source = write_unit("vocabulary", "en", "grade-1", "week-1.json", words=[make_word("cat")])

        code = main(["template", source, "xx"])

        assert code == 1
        assert "Unsupported language" in capsys.readouterr().err
