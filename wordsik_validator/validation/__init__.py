"""
Validation system for the WordsIK content validator.

Four validator kinds share one contract (``validate_file``, ``get_result``,
``clear``): JSON syntax, content, locale and translation consistency. The
coordinator runs a selection of them and merges their results.
"""

from .models import (
    IssueKind,
    ValidationIssue,
    ValidationResult,
    ValidationSummary,
    LanguageSummary,
    TranslationComparison,
    TranslationError,
    TranslationErrorType,
)

from .config import ValidationConfig, ValidationStrictness, ValidationThresholds
from .base import BaseValidator, IssueSink
from .syntax_validator import JsonSyntaxValidator
from .content_validator import ContentValidator
from .locale_validator import LocaleValidator
from .translation_validator import TranslationValidator
from .coordinator import ValidationCoordinator, ValidationOptions
from .report import ReportGenerator

__all__ = [
    "IssueKind",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSummary",
    "LanguageSummary",
    "TranslationComparison",
    "TranslationError",
    "TranslationErrorType",
    "ValidationConfig",
    "ValidationStrictness",
    "ValidationThresholds",
    "BaseValidator",
    "IssueSink",
    "JsonSyntaxValidator",
    "ContentValidator",
    "LocaleValidator",
    "TranslationValidator",
    "ValidationCoordinator",
    "ValidationOptions",
    "ReportGenerator",
]
