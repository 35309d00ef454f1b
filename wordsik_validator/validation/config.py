"""
Configuration system for the validation framework.

Provides configurable strictness levels, content-length thresholds and the
warning policy used when deciding whether a run fails.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config import Config


class ValidationStrictness(Enum):
    """Validation strictness levels."""

    LENIENT = "lenient"
    NORMAL = "normal"
    STRICT = "strict"


@dataclass
class ValidationThresholds:
    """Length thresholds for content heuristics."""

    min_word_length: int = 2
    min_definition_length: int = 10
    min_example_length: int = 10
    max_word_length: int = 50
    max_definition_length: int = 200


@dataclass
class ValidationConfig:
    """Configuration for the validation system."""

    # Core settings
    strictness: ValidationStrictness = ValidationStrictness.NORMAL
    fail_on_warnings: bool = False

    # Corpus layout
    data_root: Path = Config.DATA_DIR
    base_language: str = Config.BASE_LANGUAGE
    supported_languages: List[str] = field(default_factory=lambda: list(Config.SUPPORTED_LANGUAGES))
    content_types: List[str] = field(default_factory=lambda: list(Config.CONTENT_TYPES))
    grade_levels: List[str] = field(default_factory=lambda: list(Config.GRADE_LEVELS))

    # Content thresholds
    thresholds: Optional[ValidationThresholds] = None

    def __post_init__(self):
        """Initialize default values based on strictness level."""
        self.data_root = Path(self.data_root)
        if self.thresholds is None:
            self.thresholds = self._get_default_thresholds()

    def _get_default_thresholds(self) -> ValidationThresholds:
        """Get default thresholds based on strictness level."""
        if self.strictness == ValidationStrictness.LENIENT:
            return ValidationThresholds(
                min_word_length=1,
                min_definition_length=5,
                min_example_length=5,
                max_word_length=80,
                max_definition_length=400,
            )
        elif self.strictness == ValidationStrictness.STRICT:
            return ValidationThresholds(
                min_word_length=2,
                min_definition_length=15,
                min_example_length=15,
                max_word_length=30,
                max_definition_length=150,
            )
        else:  # NORMAL
            return ValidationThresholds()

    def set_strictness(self, strictness: ValidationStrictness) -> None:
        """Update strictness level and recalculate thresholds."""
        self.strictness = strictness
        self.thresholds = self._get_default_thresholds()

    def update_threshold(self, threshold_name: str, value: int) -> None:
        """Update a specific threshold value."""
        if hasattr(self.thresholds, threshold_name):
            setattr(self.thresholds, threshold_name, value)
        else:
            raise ValueError(f"Unknown threshold: {threshold_name}")

    def get_config_summary(self) -> Dict[str, Any]:
        """Get a summary of current configuration."""
        return {
            "strictness": self.strictness.value,
            "fail_on_warnings": self.fail_on_warnings,
            "data_root": str(self.data_root),
            "base_language": self.base_language,
            "supported_languages": list(self.supported_languages),
            "thresholds": {
                "min_word_length": self.thresholds.min_word_length,
                "min_definition_length": self.thresholds.min_definition_length,
                "min_example_length": self.thresholds.min_example_length,
                "max_word_length": self.thresholds.max_word_length,
                "max_definition_length": self.thresholds.max_definition_length,
            },
        }


# Default validation configuration instance
default_validation_config = ValidationConfig()
