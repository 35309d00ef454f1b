"""
Core data models for the validation system.

Defines issues, results, summaries and the structured translation comparison
produced by the consistency engine.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..errors import IssueCategory


class IssueKind(Enum):
    """Issue kinds. Errors fail a result; warnings never do."""

    ERROR = "error"
    WARNING = "warning"


class TranslationErrorType(Enum):
    """Per-word findings recorded on a translation comparison."""

    MISSING_TRANSLATION = "missing_translation"
    EMPTY_TRANSLATION = "empty_translation"
    SAME_AS_ENGLISH = "same_as_english"
    SAME_AS_SOURCE = "same_as_english"
    MISSING_DEFINITION = "missing_definition"
    MISSING_EXAMPLE = "missing_example"


@dataclass(frozen=True)
class ValidationIssue:
    """A single error or warning produced by a validator."""

    kind: IssueKind
    message: str
    file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    context: Optional[str] = None
    category: IssueCategory = IssueCategory.GENERAL

    @property
    def is_error(self) -> bool:
        return self.kind == IssueKind.ERROR

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.kind.value,
            "category": self.category.value,
            "message": self.message,
        }
        for name in ("file", "line", "column", "context"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data


@dataclass
class LanguageSummary:
    """Per-language counters."""

    language: str
    files: int = 0
    words: int = 0
    errors: int = 0
    warnings: int = 0


@dataclass
class ValidationSummary:
    """Aggregate counters for a validation result."""

    total_files: int = 0
    total_words: int = 0
    errors: int = 0
    warnings: int = 0
    languages: List[LanguageSummary] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "ValidationSummary":
        return cls()

    def get_language(self, language: str) -> Optional[LanguageSummary]:
        for summary in self.languages:
            if summary.language == language:
                return summary
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalFiles": self.total_files,
            "totalWords": self.total_words,
            "errors": self.errors,
            "warnings": self.warnings,
            "languages": [asdict(language) for language in self.languages],
        }


@dataclass
class ValidationResult:
    """Snapshot of a validator's accumulated issues."""

    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    summary: ValidationSummary = field(default_factory=ValidationSummary)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0

    @property
    def issues(self) -> List[ValidationIssue]:
        return self.errors + self.warnings

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
            "summary": self.summary.to_dict(),
        }


@dataclass(frozen=True)
class TranslationError:
    """A per-word finding for a word present in both source and target."""

    word: str
    kind: TranslationErrorType
    message: str


@dataclass
class TranslationComparison:
    """Structured diff of one target-language unit against its source unit."""

    source_file: str
    target_file: str
    language: str
    missing_words: List[str] = field(default_factory=list)
    extra_words: List[str] = field(default_factory=list)
    translation_errors: List[TranslationError] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        return bool(self.missing_words or self.extra_words or self.translation_errors)

    def errors_for(self, word: str) -> List[TranslationError]:
        return [error for error in self.translation_errors if error.word == word]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sourceFile": self.source_file,
            "targetFile": self.target_file,
            "language": self.language,
            "missingWords": list(self.missing_words),
            "extraWords": list(self.extra_words),
            "translationErrors": [
                {"word": e.word, "type": e.kind.value, "message": e.message}
                for e in self.translation_errors
            ],
        }
