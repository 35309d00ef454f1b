"""
Locale validation across the multi-language data tree.

Walks ``<data_root>/<content_type>/<language>/<grade>`` and checks that every
translation only uses characters sanctioned for its language. The corpus grows
one language at a time, so missing or empty directories are warnings, and so
are character-set violations: transliteration artifacts are common.
"""

from collections import OrderedDict
from pathlib import Path
from typing import Dict, List, Set

from ..documents import (
    json_files_in_directory,
    load_unit,
    parse_content_path,
)
from ..errors import DocumentParseError, DocumentReadError, IssueCategory
from ..languages import find_invalid_characters, get_language_name, validate_characters
from .base import BaseValidator


class LocaleValidator(BaseValidator):
    """Validates per-language character sets and the expected directory shape."""

    name = "languages"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # content_type -> theme -> languages carrying that theme
        self._themes: Dict[str, Dict[str, Set[str]]] = OrderedDict()

    def get_validation_methods(self) -> List[str]:
        return ["directory_structure", "character_set_check", "theme_coverage"]

    def clear(self) -> None:
        super().clear()
        self._themes.clear()

    def validate_all_languages(self) -> None:
        """Validate every content type, language and grade under the data root."""
        self.log("🌍 Validating multi-language content...")
        for content_type in self.config.content_types:
            self.log(f"📚 Checking {content_type} content...")
            self.validate_content_type(content_type)

    def validate_content_type(self, content_type: str) -> None:
        content_type_path = self.config.data_root / content_type
        if not content_type_path.is_dir():
            self.add_warning(
                f"Content type directory not found: {content_type_path}",
                file=str(content_type_path), category=IssueCategory.STRUCTURE,
            )
            return

        for language in self.config.supported_languages:
            language_path = content_type_path / language
            if not language_path.is_dir():
                self.add_warning(
                    f"Language directory not found: {language_path}",
                    file=str(language_path), category=IssueCategory.STRUCTURE,
                )
                continue
            self._validate_language(content_type_path, language)

        self._check_theme_coverage(content_type)

    def _validate_language(self, content_type_path: Path, language: str) -> None:
        self.log(f"  🌐 Validating {language}...")
        for grade in self.config.grade_levels:
            grade_path = content_type_path / language / grade
            if not grade_path.is_dir():
                self.add_warning(
                    f"Grade directory not found: {grade_path}",
                    file=str(grade_path), category=IssueCategory.STRUCTURE,
                )
                continue

            files = json_files_in_directory(grade_path)
            if not files:
                self.add_warning(
                    f"No JSON files found in {grade_path}",
                    file=str(grade_path), category=IssueCategory.STRUCTURE,
                )
                continue

            for file_path in files:
                self.validate_file(file_path)

    def _check_file(self, path: str) -> None:
        location = parse_content_path(path)
        language = location.language
        if language is None:
            self.add_warning(
                f"Could not determine language from file path: {path}",
                file=path, category=IssueCategory.STRUCTURE,
            )
            return

        try:
            unit = load_unit(path)
        except (DocumentReadError, DocumentParseError) as e:
            self.add_error(f"Error reading file {path}: {e}", file=path,
                           category=IssueCategory.PARSE_FAILURE)
            return

        for index, entry in enumerate(unit.words):
            if not entry.translation.strip():
                self.add_warning(
                    f"Missing translation in {path} word {index}",
                    file=path, category=IssueCategory.MISSING_TRANSLATION,
                )
                continue
            if not validate_characters(entry.translation, language):
                invalid = "".join(find_invalid_characters(entry.translation, language))
                self.add_warning(
                    f'Non-{language} characters in translation "{entry.translation}" '
                    f"in {path} word {index}",
                    file=path,
                    context=f"Characters not allowed in {get_language_name(language)}: {invalid}",
                    category=IssueCategory.CHARACTER_SET,
                )

        if location.content_type and unit.theme:
            themes = self._themes.setdefault(location.content_type, OrderedDict())
            themes.setdefault(unit.theme, set()).add(language)

        self.record_file(path, words=unit.word_count)

    def _check_theme_coverage(self, content_type: str) -> None:
        """Warn about themes that only one language carries."""
        self.log(f"  🔍 Checking cross-language consistency for {content_type}...")
        themes = self._themes.get(content_type, {})
        languages_with_content = set().union(*themes.values()) if themes else set()
        if len(languages_with_content) < 2:
            return

        for theme, languages in themes.items():
            if len(languages) == 1:
                only = next(iter(languages))
                self.add_warning(
                    f'Theme "{theme}" only found in {only} for {content_type} '
                    f"- consider adding to other languages",
                    category=IssueCategory.THEME_COVERAGE,
                )
            else:
                self.log(f'    ✅ Theme "{theme}" found in: {", ".join(sorted(languages))}')
