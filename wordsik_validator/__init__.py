"""
WordsIK content validator.

Validates multilingual word-list documents: JSON syntax, content
appropriateness, per-language character sets and translation consistency
against the base language.
"""

__version__ = "1.0.0"
