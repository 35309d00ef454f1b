"""
Pytest configuration and fixtures for validation tests.
"""

import logging

import pytest

from wordsik_validator.validation.config import ValidationConfig, ValidationStrictness


@pytest.fixture
def validation_config(data_root):
    """Standard configuration rooted at the temporary data directory."""
    return ValidationConfig(data_root=data_root)


@pytest.fixture
def small_config(data_root):
    """Configuration limited to one content type, two languages and one grade."""
    return ValidationConfig(
        data_root=data_root,
        supported_languages=["en", "es"],
        content_types=["vocabulary"],
        grade_levels=["grade-1"],
    )


@pytest.fixture
def strict_validation_config(data_root):
    """Strict configuration rooted at the temporary data directory."""
    return ValidationConfig(strictness=ValidationStrictness.STRICT, data_root=data_root)


@pytest.fixture
def lenient_validation_config(data_root):
    """Lenient configuration rooted at the temporary data directory."""
    return ValidationConfig(strictness=ValidationStrictness.LENIENT, data_root=data_root)


@pytest.fixture
def validator_logger():
    return logging.getLogger("wordsik_validator.tests")
