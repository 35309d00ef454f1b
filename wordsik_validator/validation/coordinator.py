"""
Validation coordinator that orchestrates the validator kinds.

Resolves which validators to run, feeds each its file set, and merges the
per-validator results into one aggregate result for the report renderer.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ..config import Config
from ..content_filter import ContentFilter
from ..documents import find_json_files, get_changed_files, load_unit
from ..errors import DocumentParseError, DocumentReadError, TemplateGenerationError
from ..languages import is_valid_language
from .config import ValidationConfig
from .content_validator import ContentValidator
from .locale_validator import LocaleValidator
from .models import LanguageSummary, ValidationResult, ValidationSummary
from .syntax_validator import JsonSyntaxValidator
from .translation_validator import TranslationValidator


VALIDATOR_ORDER = ["json", "content", "translations", "languages"]


@dataclass
class ValidationOptions:
    """Validator selection and run options, one field per CLI flag."""

    all: bool = False
    json: bool = False
    content: bool = False
    translations: bool = False
    languages: bool = False
    files: List[str] = field(default_factory=list)
    output: str = "text"
    verbose: bool = False
    quiet: bool = False
    fail_on_warnings: bool = False
    data_root: Optional[Path] = None


class ValidationCoordinator:
    """
    Orchestrates validation runs across the validator kinds.

    The coordinator is responsible for:
    - Selecting validators from the run options (all of them when none is chosen)
    - Resolving the file set each validator receives
    - Merging results: success is the AND of all results, issues are
      concatenated in invocation order and summary counters are summed
    """

    def __init__(self, options: Optional[ValidationOptions] = None,
                 config: Optional[ValidationConfig] = None,
                 logger: Optional[logging.Logger] = None,
                 changed_files_provider: Optional[Callable[[], List[str]]] = None,
                 content_filter: Optional[ContentFilter] = None):
        """Initialize the validation coordinator."""
        self.options = options or ValidationOptions()
        self.config = config or ValidationConfig(
            data_root=self.options.data_root or Config.DATA_DIR,
            fail_on_warnings=self.options.fail_on_warnings,
        )
        self.logger = logger or logging.getLogger(__name__)
        self.changed_files_provider = changed_files_provider or get_changed_files
        self.content_filter = content_filter

        self._runners: Dict[str, Callable[[], ValidationResult]] = {
            "json": self.validate_json,
            "content": self.validate_content,
            "translations": self.validate_translations,
            "languages": self.validate_languages,
        }

    def selected_validators(self) -> List[str]:
        """Validator names to run, in invocation order."""
        flags = {name: getattr(self.options, name) for name in VALIDATOR_ORDER}
        if self.options.all or not any(flags.values()):
            return list(VALIDATOR_ORDER)
        return [name for name in VALIDATOR_ORDER if flags[name]]

    def run_validation(self) -> ValidationResult:
        """Run every selected validator to completion and merge the results."""
        selected = self.selected_validators()
        self.logger.info(f"Starting validation: {', '.join(selected)}")

        results = []
        for name in selected:
            result = self._runners[name]()
            self.logger.info(
                f"Validation '{name}' completed: success={result.success}, "
                f"errors={len(result.errors)}, warnings={len(result.warnings)}"
            )
            results.append(result)

        merged = self.merge_results(results)
        self.logger.info(
            f"Validation finished: success={merged.success}, "
            f"{len(merged.errors)} errors, {len(merged.warnings)} warnings"
        )
        return merged

    def validate_json(self) -> ValidationResult:
        validator = JsonSyntaxValidator(self.config, self._validator_logger("json"))
        for file_path in self.get_files_to_validate():
            validator.validate_file(file_path)
        return validator.get_result()

    def validate_content(self) -> ValidationResult:
        validator = ContentValidator(
            self.config, self._validator_logger("content"), content_filter=self.content_filter
        )
        for file_path in self.get_files_to_validate():
            validator.validate_file(file_path)
        return validator.get_result()

    def validate_translations(self) -> ValidationResult:
        changed_files = self.get_changed_files()
        if not changed_files:
            # No changes means nothing to compare: vacuously successful
            self.logger.info("No changed files, skipping translation validation")
            return ValidationResult(summary=ValidationSummary.empty())

        validator = TranslationValidator(self.config, self._validator_logger("translations"))
        validator.validate_changes(changed_files)
        return validator.get_result()

    def validate_languages(self) -> ValidationResult:
        validator = LocaleValidator(self.config, self._validator_logger("languages"))
        validator.validate_all_languages()
        return validator.get_result()

    def get_files_to_validate(self) -> List[str]:
        if self.options.files:
            return list(self.options.files)
        return find_json_files(self.config.data_root)

    def get_changed_files(self) -> List[str]:
        if self.options.files:
            return list(self.options.files)
        return list(self.changed_files_provider())

    def should_fail(self, result: ValidationResult) -> bool:
        """Whether a run with this result should exit non-zero."""
        if not result.success:
            return True
        fail_on_warnings = self.options.fail_on_warnings or self.config.fail_on_warnings
        return fail_on_warnings and len(result.warnings) > 0

    @staticmethod
    def merge_results(results: List[ValidationResult]) -> ValidationResult:
        """Merge results in order: issues concatenated, counters summed."""
        merged = ValidationResult(summary=ValidationSummary.empty())
        languages: "OrderedDict[str, LanguageSummary]" = OrderedDict()

        for result in results:
            merged.errors.extend(result.errors)
            merged.warnings.extend(result.warnings)

            summary = result.summary
            merged.summary.total_files += summary.total_files
            merged.summary.total_words += summary.total_words
            merged.summary.errors += summary.errors
            merged.summary.warnings += summary.warnings

            for language_summary in summary.languages:
                existing = languages.get(language_summary.language)
                if existing is None:
                    languages[language_summary.language] = replace(language_summary)
                else:
                    existing.files += language_summary.files
                    existing.words += language_summary.words
                    existing.errors += language_summary.errors
                    existing.warnings += language_summary.warnings

        merged.summary.languages = list(languages.values())
        return merged

    def generate_translation_template(self, source_file: str, target_language: str) -> Dict[str, Any]:
        """
        Build a target-language skeleton from a source-language unit.

        Words keep their key, difficulty and category; translation, definition
        and example are left blank for translators to fill in.

        Raises:
            ValueError: If the target language is not supported
            TemplateGenerationError: If the source file cannot be read
        """
        if not is_valid_language(target_language):
            raise ValueError(
                f"Unsupported language: {target_language} "
                f"(supported: {', '.join(Config.SUPPORTED_LANGUAGES)})"
            )

        try:
            unit = load_unit(source_file)
        except (DocumentReadError, DocumentParseError) as e:
            raise TemplateGenerationError(
                f"Cannot generate template from {source_file}: {e}", source_file
            ) from e

        words = []
        for entry in unit.words:
            word: Dict[str, Any] = {
                "word": entry.word,
                "translation": "",
                "definition": "",
                "example": "",
            }
            if entry.difficulty:
                word["difficulty"] = entry.difficulty
            if entry.category:
                word["category"] = entry.category
            words.append(word)

        self.logger.info(
            f"Generated {target_language} template with {len(words)} words from {source_file}"
        )
        return {
            "week": unit.week,
            "theme": unit.theme,
            "language": target_language,
            "grade": unit.grade,
            "words": words,
        }

    def _validator_logger(self, name: str) -> logging.Logger:
        return self.logger.getChild(name)
