"""
Translation consistency validation.

Compares each target-language unit with its source-language counterpart (same
content type, grade and week; the source file is found by swapping the
language segment of the path). Words are matched on a case-insensitive key
and reported with the source casing.

Every finding is recorded twice: as an error or warning on the validator, and
on the :class:`TranslationComparison` for the pair, which is a structured view
of the same findings.
"""

from collections import OrderedDict
from typing import List, Optional

from ..documents import find_source_file, load_unit
from ..errors import DocumentParseError, DocumentReadError, IssueCategory
from ..languages import extract_language_from_path
from ..models import VocabularyUnit, WordEntry
from .base import BaseValidator
from .models import TranslationComparison, TranslationError, TranslationErrorType


class TranslationValidator(BaseValidator):
    """Diffs target-language units against the base-language units."""

    name = "translations"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._comparisons: List[TranslationComparison] = []

    @property
    def comparisons(self) -> List[TranslationComparison]:
        return list(self._comparisons)

    def get_validation_methods(self) -> List[str]:
        return [
            "source_pairing",
            "missing_word_detection",
            "extra_word_detection",
            "translation_accuracy",
            "difficulty_consistency",
        ]

    def clear(self) -> None:
        super().clear()
        self._comparisons.clear()

    def validate_changes(self, changed_files: List[str]) -> List[TranslationComparison]:
        """
        Compare every changed target-language file with its source file.

        Args:
            changed_files: Paths of changed documents; base-language files and
                files outside the supported languages are ignored

        Returns:
            Comparisons produced for this call, in language then file order
        """
        if not changed_files:
            self.log("No files changed, skipping translation validation")
            return []

        self.log("🔍 Starting translation validation...")
        comparisons: List[TranslationComparison] = []
        for language, files in self.group_files_by_language(changed_files).items():
            if language == self.config.base_language:
                continue
            self.log(f"📝 Validating translations for {language}...")
            for file_path in files:
                comparison = self._validate_target_file(file_path, language)
                if comparison is not None:
                    comparisons.append(comparison)
        return comparisons

    def _check_file(self, path: str) -> None:
        language = extract_language_from_path(path)
        if language is None or language not in self.config.supported_languages:
            self.log(f"Skipping {path}: no supported language in path")
            return
        if language == self.config.base_language:
            self.log(f"Skipping {path}: base language file")
            return
        self._validate_target_file(path, language)

    def group_files_by_language(self, files: List[str]) -> "OrderedDict[str, List[str]]":
        groups: "OrderedDict[str, List[str]]" = OrderedDict()
        for file_path in files:
            language = extract_language_from_path(file_path)
            if language and language in self.config.supported_languages:
                groups.setdefault(language, []).append(str(file_path))
        return groups

    def _validate_target_file(self, target_file: str, language: str) -> Optional[TranslationComparison]:
        source_file = find_source_file(target_file, self.config.base_language)
        if source_file is None:
            self.add_warning(
                f"No corresponding source file found for {target_file}",
                file=target_file, category=IssueCategory.UNPAIRED_FILE,
            )
            return None
        return self.compare_files(source_file, target_file, language)

    def compare_files(self, source_file: str, target_file: str,
                      language: str) -> Optional[TranslationComparison]:
        """Load both documents and compare them; a load failure is one error."""
        try:
            source_unit = load_unit(source_file)
            target_unit = load_unit(target_file)
        except (DocumentReadError, DocumentParseError) as e:
            self.add_error(
                f"Error comparing translations in {target_file}: {e}",
                file=target_file, category=IssueCategory.PARSE_FAILURE,
            )
            return None

        comparison = self.compare_units(source_unit, target_unit, source_file, target_file, language)
        self.record_file(target_file, words=target_unit.word_count)
        return comparison

    def compare_units(self, source_unit: VocabularyUnit, target_unit: VocabularyUnit,
                      source_file: str, target_file: str,
                      language: str) -> TranslationComparison:
        """
        Diff two normalized units and record the findings.

        missing_words and extra_words are exact set differences over the
        normalized word keys; per-word checks only run for keys present in
        both units.
        """
        comparison = TranslationComparison(
            source_file=source_file,
            target_file=target_file,
            language=language,
        )
        source_map = source_unit.word_map()
        target_map = target_unit.word_map()

        for key, source_entry in source_map.items():
            if key not in target_map:
                comparison.missing_words.append(source_entry.word)
                self.add_error(
                    f'Missing translation for word "{source_entry.word}" in {target_file}',
                    file=target_file, category=IssueCategory.MISSING_TRANSLATION,
                )

        for key, target_entry in target_map.items():
            if key not in source_map:
                comparison.extra_words.append(target_entry.word)
                self.add_warning(
                    f'Extra word "{target_entry.word}" in {target_file} not found in '
                    f"source version",
                    file=target_file, category=IssueCategory.EXTRA_WORD,
                )

        for key, target_entry in target_map.items():
            source_entry = source_map.get(key)
            if source_entry is not None:
                self._check_translation_accuracy(source_entry, target_entry, comparison)

        self._comparisons.append(comparison)
        return comparison

    def _check_translation_accuracy(self, source_entry: WordEntry, target_entry: WordEntry,
                                    comparison: TranslationComparison) -> None:
        word = source_entry.word
        target_file = comparison.target_file
        translation = target_entry.translation.strip()

        if not translation:
            self._record(
                comparison, word, TranslationErrorType.EMPTY_TRANSLATION, "Empty translation",
            )
            self.add_error(
                f'Empty translation for word "{word}" in {target_file}',
                file=target_file, category=IssueCategory.EMPTY_TRANSLATION,
            )
        elif translation.casefold() == word.strip().casefold():
            self._record(
                comparison, word, TranslationErrorType.SAME_AS_ENGLISH,
                "Translation appears to be the same as the source word",
            )
            self.add_warning(
                f'Translation "{target_entry.translation}" for word "{word}" in {target_file} '
                f"appears to be the same as the source word",
                file=target_file, category=IssueCategory.SAME_AS_SOURCE,
            )

        if not target_entry.definition.strip():
            self._record(comparison, word, TranslationErrorType.MISSING_DEFINITION, "Missing definition")
            self.add_error(
                f'Missing definition for word "{word}" in {target_file}',
                file=target_file, category=IssueCategory.MISSING_DEFINITION,
            )

        if not target_entry.example.strip():
            self._record(comparison, word, TranslationErrorType.MISSING_EXAMPLE, "Missing example")
            self.add_error(
                f'Missing example for word "{word}" in {target_file}',
                file=target_file, category=IssueCategory.MISSING_EXAMPLE,
            )

        if (target_entry.difficulty and source_entry.difficulty
                and target_entry.difficulty != source_entry.difficulty):
            self.add_warning(
                f'Difficulty level mismatch for word "{word}" in {target_file}: '
                f"{target_entry.difficulty} vs {source_entry.difficulty}",
                file=target_file, category=IssueCategory.DIFFICULTY_MISMATCH,
            )

    @staticmethod
    def _record(comparison: TranslationComparison, word: str,
                kind: TranslationErrorType, message: str) -> None:
        comparison.translation_errors.append(TranslationError(word=word, kind=kind, message=message))
