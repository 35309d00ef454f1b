"""
Configuration settings for the WordsIK content validator.
"""

from pathlib import Path


class Config:
    """Configuration class for application settings."""

    # Project paths
    DATA_DIR = Path("data")
    DATA_GLOB = "**/*.json"

    # Content layout: data/<content_type>/<language>/<grade>/<unit>.json
    CONTENT_TYPES = ["vocabulary", "grammar", "spelling"]
    SUPPORTED_LANGUAGES = ["en", "es", "fr", "ar", "ko"]
    GRADE_LEVELS = ["grade-1", "grade-2", "grade-3", "grade-4", "grade-5"]
    BASE_LANGUAGE = "en"

    # Word schema
    REQUIRED_UNIT_FIELDS = ["week", "theme"]
    REQUIRED_WORD_FIELDS = ["word", "translation", "definition", "example"]
    DIFFICULTY_LEVELS = ["easy", "medium", "hard"]

    # Units whose words are single letters by nature
    ALPHABET_UNIT_MARKERS = ["alphabet", "letters"]

    # Changed-file discovery
    DEFAULT_BASE_BRANCH = "main"
    GIT_TIMEOUT_SECONDS = 30
