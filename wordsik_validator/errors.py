"""
Error definitions for the WordsIK content validator.

Loader and helper functions raise the exceptions defined here. Validators
catch them at the point of use and turn each one into a single validation
issue, so one unreadable document never aborts a validation run.
"""

from enum import Enum
from typing import Optional


class IssueCategory(Enum):
    """Categories of issues that validators report."""
    PARSE_FAILURE = "parse_failure"
    FILE_SYSTEM = "file_system"
    STRUCTURE = "structure"
    MISSING_FIELD = "missing_field"
    INVALID_FIELD = "invalid_field"
    DISALLOWED_CONTENT = "disallowed_content"
    SHORT_CONTENT = "short_content"
    LONG_CONTENT = "long_content"
    DUPLICATE_WORD = "duplicate_word"
    CHARACTER_SET = "character_set"
    THEME_COVERAGE = "theme_coverage"
    MISSING_TRANSLATION = "missing_translation"
    EMPTY_TRANSLATION = "empty_translation"
    SAME_AS_SOURCE = "same_as_source"
    MISSING_DEFINITION = "missing_definition"
    MISSING_EXAMPLE = "missing_example"
    EXTRA_WORD = "extra_word"
    DIFFICULTY_MISMATCH = "difficulty_mismatch"
    UNPAIRED_FILE = "unpaired_file"
    CAPITALIZATION = "capitalization"
    GENERAL = "general"


class WordsIKError(Exception):
    """Base exception for WordsIK validator errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class DocumentReadError(WordsIKError):
    """Raised when a document cannot be found, read or decoded."""
    pass


class DocumentParseError(WordsIKError):
    """Raised when a document is not valid JSON."""

    def __init__(self, message: str, path: Optional[str] = None,
                 line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        super().__init__(message, path)


class TemplateGenerationError(WordsIKError):
    """Raised when a translation template cannot be generated."""
    pass
