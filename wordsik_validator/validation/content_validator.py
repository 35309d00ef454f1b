"""
Content validation for word-list documents.

Checks structural completeness of each unit, scans text for disallowed
language and applies length heuristics to words, definitions and examples.
Vocabulary units are checked against the four-field word schema; grammar and
spelling units, which are rule based, only need a rules or words list.
"""

import logging
from pathlib import PurePath
from typing import Any, Iterator, List, Optional, Tuple

from ..config import Config
from ..content_filter import ContentFilter
from ..documents import load_json_document, parse_content_path
from ..errors import DocumentParseError, DocumentReadError, IssueCategory
from ..languages import get_language_name
from ..models import VocabularyUnit, WordEntry
from .base import BaseValidator
from .config import ValidationConfig


RULE_BASED_CONTENT_TYPES = ("grammar", "spelling")


class ContentValidator(BaseValidator):
    """
    Validates the content of word-list documents.

    The disallowed-content oracle is any object with an ``is_flagged(text)``
    method; a :class:`ContentFilter` with the default word list is used when
    none is given.
    """

    name = "content"

    def __init__(self, config: Optional[ValidationConfig] = None,
                 logger: Optional[logging.Logger] = None,
                 content_filter: Optional[ContentFilter] = None):
        super().__init__(config, logger)
        self.content_filter = content_filter or ContentFilter()

    def get_validation_methods(self) -> List[str]:
        return [
            "structure_check",
            "required_field_check",
            "difficulty_check",
            "length_heuristics",
            "disallowed_content_scan",
            "duplicate_detection",
            "capitalization_check",
        ]

    def _check_file(self, path: str) -> None:
        self.log(f"Validating content: {path}")

        try:
            data = load_json_document(path)
        except (DocumentReadError, DocumentParseError) as e:
            category = (
                IssueCategory.PARSE_FAILURE if isinstance(e, DocumentParseError)
                else IssueCategory.FILE_SYSTEM
            )
            self.add_error(f"Error validating content in {path}: {e}", file=path, category=category)
            return

        location = parse_content_path(path)
        if not isinstance(data, dict):
            self.add_error(
                f"Document root must be an object in {path}",
                file=path, category=IssueCategory.STRUCTURE,
            )
            return

        if location.content_type in RULE_BASED_CONTENT_TYPES:
            word_count = self._validate_rule_unit(data, path)
        else:
            unit = VocabularyUnit.from_document(
                data, path=path, language=location.language, grade=location.grade
            )
            word_count = self._validate_vocabulary_unit(data, unit, path)

        self.record_file(path, words=word_count)

    def _validate_vocabulary_unit(self, data: dict, unit: VocabularyUnit, path: str) -> int:
        """Validate a vocabulary unit against the word schema; returns its word count."""
        for field_name in Config.REQUIRED_UNIT_FIELDS:
            if not getattr(unit, field_name):
                self.add_error(
                    f"Missing required field '{field_name}' in {path}",
                    file=path, category=IssueCategory.MISSING_FIELD,
                )
        self._check_unit_text(data, path)

        if not unit.has_word_list:
            if self._declares_words(data):
                self.add_error(
                    f"'words' field must be an array in {path}",
                    file=path, category=IssueCategory.STRUCTURE,
                )
            else:
                self.add_error(
                    f"Missing required field 'words' in {path}",
                    file=path, category=IssueCategory.MISSING_FIELD,
                )
            return 0

        alphabet_unit = self._is_alphabet_unit(unit, path)
        base_language_unit = unit.language == self.config.base_language
        for index, (raw, entry) in enumerate(zip(unit.raw_words, unit.words)):
            if not isinstance(raw, dict):
                self.add_error(
                    f"Word {index} in {path} must be an object",
                    file=path, category=IssueCategory.STRUCTURE,
                )
                continue
            self._validate_word_structure(raw, path, index)
            self._validate_word_lengths(entry, path, index, alphabet_unit)
            if base_language_unit:
                self._validate_capitalization(entry, path)
            self._check_disallowed_content(raw, path, index)

        by_key = unit.word_map()
        for key in unit.duplicate_keys():
            self.add_warning(
                f'Duplicate word "{by_key[key].word}" found in {path}',
                file=path, category=IssueCategory.DUPLICATE_WORD,
            )

        return unit.word_count

    def _validate_word_structure(self, raw: dict, path: str, index: int) -> None:
        for field_name in Config.REQUIRED_WORD_FIELDS:
            value = raw.get(field_name)
            if field_name not in raw or value is None:
                self.add_error(
                    f"Missing required field '{field_name}' in word {index} of {path}",
                    file=path, category=IssueCategory.MISSING_FIELD,
                )
            elif not isinstance(value, str):
                self.add_error(
                    f"Field '{field_name}' must be a string in word {index} of {path}",
                    file=path, category=IssueCategory.INVALID_FIELD,
                )
            elif not value.strip():
                self.add_error(
                    f"Empty required field '{field_name}' in word {index} of {path}",
                    file=path, category=IssueCategory.MISSING_FIELD,
                )

        difficulty = raw.get("difficulty")
        if difficulty is not None and difficulty not in Config.DIFFICULTY_LEVELS:
            self.add_warning(
                f"Invalid difficulty level '{difficulty}' in word {index} of {path}",
                file=path, category=IssueCategory.INVALID_FIELD,
            )

    def _validate_word_lengths(self, entry: WordEntry, path: str, index: int,
                               alphabet_unit: bool) -> None:
        thresholds = self.config.thresholds
        word = entry.word.strip()
        definition = entry.definition.strip()
        example = entry.example.strip()

        if word and len(word) < thresholds.min_word_length and not alphabet_unit:
            self.add_warning(
                f'Very short word in {path} word {index}: "{entry.word}"',
                file=path, category=IssueCategory.SHORT_CONTENT,
            )
        if len(word) > thresholds.max_word_length:
            self.add_warning(
                f"Very long word in {path} word {index}: {len(word)} characters "
                f"(max {thresholds.max_word_length})",
                file=path, context=entry.word, category=IssueCategory.LONG_CONTENT,
            )
        if definition and len(definition) < thresholds.min_definition_length:
            self.add_warning(
                f'Very short definition in {path} word {index}: "{entry.definition}"',
                file=path, category=IssueCategory.SHORT_CONTENT,
            )
        if len(definition) > thresholds.max_definition_length:
            self.add_warning(
                f"Very long definition in {path} word {index}: {len(definition)} characters "
                f"(max {thresholds.max_definition_length})",
                file=path, context=entry.word, category=IssueCategory.LONG_CONTENT,
            )
        if example and len(example) < thresholds.min_example_length:
            self.add_warning(
                f'Very short example in {path} word {index}: "{entry.example}"',
                file=path, category=IssueCategory.SHORT_CONTENT,
            )

    def _validate_capitalization(self, entry: WordEntry, path: str) -> None:
        """Base-language words are either all lowercase or Capitalized."""
        word = entry.word.strip()
        if word and word != word.lower() and word != word[:1].upper() + word[1:].lower():
            language = get_language_name(self.config.base_language)
            self.add_warning(
                f'Unusual capitalization in {language} word "{entry.word}" in {path}',
                file=path, category=IssueCategory.CAPITALIZATION,
            )

    def _check_disallowed_content(self, raw: dict, path: str, index: int) -> None:
        for location, value in _iter_strings(raw):
            field_name = location.lstrip(".")
            if value and self.content_filter.is_flagged(value):
                self.add_error(
                    f'Disallowed content detected in {field_name} field of word {index} '
                    f'in {path}: "{value}"',
                    file=path, context=_root_name(field_name),
                    category=IssueCategory.DISALLOWED_CONTENT,
                )

    def _check_unit_text(self, data: dict, path: str) -> None:
        """Scan unit-level strings such as theme, metadata and activities."""
        for key, value in data.items():
            if key in ("words", "rules"):
                continue
            if key == "vocabulary" and isinstance(value, dict):
                value = {k: v for k, v in value.items() if k != "words"}
            for location, text in _iter_strings(value, key):
                if self.content_filter.is_flagged(text):
                    self.add_error(
                        f'Disallowed content detected in {location} in {path}: "{text}"',
                        file=path, context=key, category=IssueCategory.DISALLOWED_CONTENT,
                    )

    def _validate_rule_unit(self, data: dict, path: str) -> int:
        """Validate a grammar or spelling unit; returns its word count."""
        rules = data.get("rules")
        words = data.get("words")
        vocabulary = data.get("vocabulary")
        if words is None and isinstance(vocabulary, dict):
            words = vocabulary.get("words")

        has_rules = isinstance(rules, list) and len(rules) > 0
        has_words = isinstance(words, list) and len(words) > 0
        if not has_rules and not has_words:
            self.add_error(
                f"Missing non-empty 'rules' or 'words' list in {path}",
                file=path, category=IssueCategory.MISSING_FIELD,
            )
            return 0

        self._check_unit_text(data, path)
        for list_name, items in (("rules", rules), ("words", words)):
            if not isinstance(items, list):
                continue
            for index, item in enumerate(items):
                for location, value in _iter_strings(item):
                    if self.content_filter.is_flagged(value):
                        self.add_error(
                            f'Disallowed content detected in {list_name}[{index}]{location} '
                            f'in {path}: "{value}"',
                            file=path, context=list_name,
                            category=IssueCategory.DISALLOWED_CONTENT,
                        )

        return len(words) if isinstance(words, list) else 0

    @staticmethod
    def _declares_words(data: dict) -> bool:
        vocabulary = data.get("vocabulary")
        return "words" in data or (isinstance(vocabulary, dict) and "words" in vocabulary)

    @staticmethod
    def _is_alphabet_unit(unit: VocabularyUnit, path: str) -> bool:
        haystacks = (unit.theme.lower(), PurePath(path).stem.lower())
        return any(
            marker in haystack
            for marker in Config.ALPHABET_UNIT_MARKERS
            for haystack in haystacks
        )


def _iter_strings(value: Any, location: str = "") -> Iterator[Tuple[str, str]]:
    """Yield (location, text) for every string nested inside value."""
    if isinstance(value, str):
        yield location, value
    elif isinstance(value, dict):
        for key, item in value.items():
            yield from _iter_strings(item, f"{location}.{key}")
    elif isinstance(value, list):
        for index, item in enumerate(value):
            yield from _iter_strings(item, f"{location}[{index}]")


def _root_name(location: str) -> str:
    """Top-level field of a nested location: 'syllables[0]' -> 'syllables'."""
    return location.split(".")[0].split("[")[0]
