"""
Base classes and interfaces for the validation system.

Every validator owns an :class:`IssueSink` and exposes the same small
capability set (``validate_file``, ``get_result``, ``clear``) so the
coordinator can treat all validator kinds uniformly.
"""

import logging
from abc import ABC, abstractmethod
from collections import OrderedDict
from dataclasses import replace
from typing import Dict, List, Optional

from ..errors import IssueCategory
from ..languages import extract_language_from_path
from .config import ValidationConfig, default_validation_config
from .models import (
    IssueKind,
    LanguageSummary,
    ValidationIssue,
    ValidationResult,
    ValidationSummary,
)


class IssueSink:
    """Accumulates the errors and warnings of one validator."""

    def __init__(self):
        self.errors: List[ValidationIssue] = []
        self.warnings: List[ValidationIssue] = []

    def add(self, issue: ValidationIssue) -> None:
        if issue.kind == IssueKind.ERROR:
            self.errors.append(issue)
        else:
            self.warnings.append(issue)

    def add_error(self, message: str, **details) -> ValidationIssue:
        issue = ValidationIssue(kind=IssueKind.ERROR, message=message, **details)
        self.add(issue)
        return issue

    def add_warning(self, message: str, **details) -> ValidationIssue:
        issue = ValidationIssue(kind=IssueKind.WARNING, message=message, **details)
        self.add(issue)
        return issue

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def clear(self) -> None:
        self.errors.clear()
        self.warnings.clear()

    def snapshot(self, summary: ValidationSummary) -> ValidationResult:
        """Immutable view of the accumulated issues; does not clear them."""
        return ValidationResult(
            errors=list(self.errors),
            warnings=list(self.warnings),
            summary=summary,
        )


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Defines the interface that all validators must implement so the
    validation coordinator can run and merge them uniformly. The logger is
    the injected logging collaborator; emitting to it never affects the
    validation outcome.
    """

    name = "base"

    def __init__(self, config: Optional[ValidationConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """Initialize the validator with configuration and a logger."""
        self.config = config or default_validation_config
        self.logger = logger or logging.getLogger(self.__class__.__module__)
        self._sink = IssueSink()
        self._total_files = 0
        self._total_words = 0
        self._languages: Dict[str, LanguageSummary] = OrderedDict()

    def validate_file(self, path: str) -> None:
        """
        Validate one document, recording any issues.

        Never raises: a failure while checking the file becomes a single
        error tagged with the path and the run continues with the next file.
        """
        path = str(path)
        try:
            self._check_file(path)
        except Exception as e:
            self.add_error(
                f"Error validating {path}: {e}", file=path, category=IssueCategory.GENERAL
            )

    @abstractmethod
    def _check_file(self, path: str) -> None:
        """Run this validator's checks on one document."""
        pass

    @abstractmethod
    def get_validation_methods(self) -> List[str]:
        """
        Get list of validation methods used by this validator.

        Returns:
            List[str]: Names of validation methods implemented
        """
        pass

    def get_result(self) -> ValidationResult:
        """Snapshot of the accumulated issues and summary; callable repeatedly."""
        return self._sink.snapshot(self._generate_summary())

    def clear(self) -> None:
        """Reset accumulated issues and counters so the validator can be reused."""
        self._sink.clear()
        self._total_files = 0
        self._total_words = 0
        self._languages.clear()

    def add_error(
        self,
        message: str,
        file: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        context: Optional[str] = None,
        category: IssueCategory = IssueCategory.GENERAL,
    ) -> ValidationIssue:
        """Record an error and emit it to the logger."""
        issue = self._sink.add_error(
            message, file=file, line=line, column=column, context=context, category=category
        )
        stats = self._language_stats(file)
        if stats is not None:
            stats.errors += 1
        self._emit(logging.ERROR, f"❌ {message}")
        return issue

    def add_warning(
        self,
        message: str,
        file: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        context: Optional[str] = None,
        category: IssueCategory = IssueCategory.GENERAL,
    ) -> ValidationIssue:
        """Record a warning and emit it to the logger."""
        issue = self._sink.add_warning(
            message, file=file, line=line, column=column, context=context, category=category
        )
        stats = self._language_stats(file)
        if stats is not None:
            stats.warnings += 1
        self._emit(logging.WARNING, f"⚠️  {message}")
        return issue

    def record_file(self, path: Optional[str], words: int = 0) -> None:
        """Count a successfully processed file (and its words) in the summary."""
        self._total_files += 1
        self._total_words += words
        stats = self._language_stats(path)
        if stats is not None:
            stats.files += 1
            stats.words += words

    def log(self, message: str) -> None:
        """Emit a progress message at debug level."""
        self._emit(logging.DEBUG, message)

    def _generate_summary(self) -> ValidationSummary:
        return ValidationSummary(
            total_files=self._total_files,
            total_words=self._total_words,
            errors=len(self._sink.errors),
            warnings=len(self._sink.warnings),
            languages=[replace(stats) for stats in self._languages.values()],
        )

    def _language_stats(self, path: Optional[str]) -> Optional[LanguageSummary]:
        if not path:
            return None
        language = extract_language_from_path(path)
        if language is None:
            return None
        if language not in self._languages:
            self._languages[language] = LanguageSummary(language=language)
        return self._languages[language]

    def _emit(self, level: int, message: str) -> None:
        # Logging is fire-and-forget; a failing handler must not change results
        try:
            self.logger.log(level, message)
        except Exception:
            pass
