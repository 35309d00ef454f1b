"""
Tests for locale validation: directory walk, character sets and theme
coverage.
"""

from wordsik_validator.errors import IssueCategory
from wordsik_validator.validation.config import ValidationConfig
from wordsik_validator.validation.locale_validator import LocaleValidator


def messages(issues):
    return [issue.message for issue in issues]


class TestDirectoryWalk:
    """Test the data/<type>/<language>/<grade> walk."""

    def test_complete_tree_has_no_issues(self, write_unit, make_word, small_config):
        write_unit("vocabulary", "en", "grade-1", "week-1.json", words=[make_word("cat", "cat")])
        write_unit("vocabulary", "es", "grade-1", "week-1.json", words=[make_word("cat", "gato")])
        validator = LocaleValidator(small_config)

        validator.validate_all_languages()
        result = validator.get_result()

        assert result.success
        assert result.warnings == []
        assert result.summary.total_files == 2
        assert result.summary.total_words == 2
        assert [s.language for s in result.summary.languages] == ["en", "es"]

    def test_missing_content_type_directory(self, small_config):
        """Test that an absent content type is only a warning."""
        validator = LocaleValidator(small_config)

        validator.validate_all_languages()
        result = validator.get_result()

        assert result.success
        assert len(result.warnings) == 1
        assert "Content type directory not found" in result.warnings[0].message

    def test_missing_language_directory(self, write_unit, make_word, small_config):
        write_unit("vocabulary", "en", "grade-1", "week-1.json", words=[make_word("cat", "cat")])
        validator = LocaleValidator(small_config)

        validator.validate_all_languages()
        result = validator.get_result()

        assert result.success
        assert len(result.warnings) == 1
        assert "Language directory not found" in result.warnings[0].message
        assert result.warnings[0].file.endswith("es")

    def test_missing_and_empty_grade_directories(self, write_unit, make_word, data_root):
        config = ValidationConfig(
            data_root=data_root,
            supported_languages=["en"],
            content_types=["vocabulary"],
            grade_levels=["grade-1", "grade-2", "grade-3"],
        )
        write_unit("vocabulary", "en", "grade-1", "week-1.json", words=[make_word("cat", "cat")])
        (data_root / "vocabulary" / "en" / "grade-2").mkdir()
        validator = LocaleValidator(config)

        validator.validate_all_languages()
        warnings = messages(validator.get_result().warnings)

        assert len(warnings) == 2
        assert warnings[0].startswith("No JSON files found in")
        assert warnings[1].startswith("Grade directory not found")

    def test_unreadable_file_is_an_error(self, write_raw, small_config):
        write_raw("vocabulary/en/grade-1/week-1.json", "{oops")
        validator = LocaleValidator(small_config)

        validator.validate_all_languages()
        result = validator.get_result()

        assert not result.success
        assert len(result.errors) == 1
        assert result.errors[0].category == IssueCategory.PARSE_FAILURE


class TestCharacterSets:
    """Test per-language translation character checks."""

    def test_foreign_characters_are_a_warning(self, write_unit, make_word, small_config):
        """Test that character-set violations warn and name the offending characters."""
        path = write_unit("vocabulary", "es", "grade-1", "week-1.json",
                          words=[make_word("cat", "gato"), make_word("dog", "perro7")])
        validator = LocaleValidator(small_config)

        validator.validate_file(path)
        result = validator.get_result()

        assert result.success
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.category == IssueCategory.CHARACTER_SET
        assert "perro7" in warning.message
        assert "word 1" in warning.message
        assert "Spanish" in warning.context
        assert "7" in warning.context

    def test_arabic_and_korean_blocks(self, write_unit, make_word, validation_config):
        arabic = write_unit("vocabulary", "ar", "grade-1", "week-1.json",
                            words=[make_word("cat", "قطة")])
        korean = write_unit("vocabulary", "ko", "grade-1", "week-1.json",
                            words=[make_word("cat", "고양이"), make_word("dog", "dog")])
        validator = LocaleValidator(validation_config)

        validator.validate_file(arabic)
        validator.validate_file(korean)
        warnings = validator.get_result().warnings

        assert len(warnings) == 1
        assert "Non-ko characters" in warnings[0].message

    def test_blank_translation_is_a_warning(self, write_unit, make_word, small_config):
        path = write_unit("vocabulary", "es", "grade-1", "week-1.json",
                          words=[make_word("cat", "  ")])
        validator = LocaleValidator(small_config)

        validator.validate_file(path)
        warnings = validator.get_result().warnings

        assert len(warnings) == 1
        assert warnings[0].category == IssueCategory.MISSING_TRANSLATION

    def test_path_without_language(self, write_raw, small_config):
        path = write_raw("vocabulary/week-1.json", '{"words": []}')
        validator = LocaleValidator(small_config)

        validator.validate_file(path)
        warnings = validator.get_result().warnings

        assert len(warnings) == 1
        assert "Could not determine language" in warnings[0].message


class TestThemeCoverage:
    """Test cross-language theme coverage warnings."""

    def test_theme_in_one_language_only(self, write_unit, make_word, small_config):
        """Test that a theme carried by one language out of several is flagged."""
        write_unit("vocabulary", "en", "grade-1", "week-1.json",
                   words=[make_word("cat", "cat")], theme="Animals")
        write_unit("vocabulary", "en", "grade-1", "week-2.json",
                   words=[make_word("apple", "apple")], theme="Food")
        write_unit("vocabulary", "es", "grade-1", "week-1.json",
                   words=[make_word("cat", "gato")], theme="Animals")
        validator = LocaleValidator(small_config)

        validator.validate_all_languages()
        warnings = validator.get_result().warnings

        assert len(warnings) == 1
        assert warnings[0].category == IssueCategory.THEME_COVERAGE
        assert 'Theme "Food" only found in en for vocabulary' in warnings[0].message

    def test_single_language_corpus_is_not_flagged(self, write_unit, make_word, data_root):
        config = ValidationConfig(
            data_root=data_root,
            supported_languages=["en"],
            content_types=["vocabulary"],
            grade_levels=["grade-1"],
        )
        write_unit("vocabulary", "en", "grade-1", "week-1.json",
                   words=[make_word("cat", "cat")], theme="Animals")
        validator = LocaleValidator(config)

        validator.validate_all_languages()

        assert validator.get_result().warnings == []

    def test_clear_forgets_themes(self, write_unit, make_word, small_config):
        """Test that a cleared validator reproduces the same coverage warnings."""
        write_unit("vocabulary", "en", "grade-1", "week-1.json",
                   words=[make_word("cat", "cat")], theme="Animals")
        write_unit("vocabulary", "es", "grade-1", "week-1.json",
                   words=[make_word("cat", "gato")], theme="Pets")
        validator = LocaleValidator(small_config)

        validator.validate_all_languages()
        first = validator.get_result()
        validator.clear()
        validator.validate_all_languages()
        second = validator.get_result()

        assert len(first.warnings) == 2
        assert first.warnings == second.warnings
        assert first.summary == second.summary
