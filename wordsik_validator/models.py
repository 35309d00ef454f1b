"""
Core data models for the WordsIK content validator.

Word-list documents come in two shapes: a flat one with ``words`` at the top
level and a nested one that wraps them under ``vocabulary.words`` next to
``metadata``, ``activities`` and ``assessment`` sections. Both are normalized
here, once, into a single :class:`VocabularyUnit`.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


def normalize_word_key(word: str) -> str:
    """Key used to match words across languages (case-insensitive)."""
    return word.strip().casefold()


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _optional_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


@dataclass(frozen=True)
class WordEntry:
    """Represents a single word of a vocabulary unit."""
    word: str
    translation: str
    definition: str
    example: str
    difficulty: Optional[str] = None
    category: Optional[str] = None
    phonetic: Optional[str] = None
    syllables: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "WordEntry":
        """Build an entry from a raw document item; non-string fields read as empty."""
        if not isinstance(data, dict):
            data = {}
        syllables = data.get("syllables")
        return cls(
            word=_text(data.get("word")),
            translation=_text(data.get("translation")),
            definition=_text(data.get("definition")),
            example=_text(data.get("example")),
            difficulty=_optional_text(data.get("difficulty")),
            category=_optional_text(data.get("category")),
            phonetic=_optional_text(data.get("phonetic")),
            syllables=tuple(s for s in syllables if isinstance(s, str))
            if isinstance(syllables, list) else (),
        )

    @property
    def key(self) -> str:
        return normalize_word_key(self.word)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "word": self.word,
            "translation": self.translation,
            "definition": self.definition,
            "example": self.example,
        }
        if self.difficulty:
            data["difficulty"] = self.difficulty
        if self.category:
            data["category"] = self.category
        if self.phonetic:
            data["phonetic"] = self.phonetic
        if self.syllables:
            data["syllables"] = list(self.syllables)
        return data


@dataclass(frozen=True)
class VocabularyUnit:
    """Canonical in-memory form of one word-list document."""
    week: str
    theme: str
    language: str
    grade: str
    words: Tuple[WordEntry, ...]
    raw_words: Tuple[Any, ...] = ()
    shape: str = "flat"
    has_word_list: bool = True
    source_path: Optional[str] = None
    rules: Tuple[Any, ...] = field(default=())

    @classmethod
    def from_document(cls, data: Any, path: Optional[str] = None,
                      language: Optional[str] = None,
                      grade: Optional[str] = None) -> "VocabularyUnit":
        """
        Normalize a parsed document into a unit.

        Args:
            data: Parsed JSON document (flat or nested shape)
            path: Path the document was read from, kept for reporting
            language: Fallback language when the document does not name one
            grade: Fallback grade when the document does not name one

        Returns:
            VocabularyUnit with words in document order
        """
        if not isinstance(data, dict):
            data = {}

        vocabulary = data.get("vocabulary")
        if isinstance(vocabulary, dict) and "words" in vocabulary:
            shape = "nested"
            raw_words = vocabulary.get("words")
            metadata = data.get("metadata") if isinstance(data.get("metadata"), dict) else {}
        else:
            shape = "flat"
            raw_words = data.get("words")
            metadata = {}

        has_word_list = isinstance(raw_words, list)
        items = tuple(raw_words) if has_word_list else ()
        rules = data.get("rules")

        def pick(name: str, fallback: Optional[str]) -> str:
            value = data.get(name, metadata.get(name))
            if value is None or value == "":
                return fallback or ""
            return str(value)

        return cls(
            week=pick("week", None),
            theme=pick("theme", None),
            language=pick("language", language),
            grade=pick("grade", grade),
            words=tuple(WordEntry.from_dict(item) for item in items),
            raw_words=items,
            shape=shape,
            has_word_list=has_word_list,
            source_path=path,
            rules=tuple(rules) if isinstance(rules, list) else (),
        )

    @property
    def word_count(self) -> int:
        return len(self.words)

    def word_map(self) -> "OrderedDict[str, WordEntry]":
        """Map normalized word keys to entries; the first occurrence of a key wins."""
        mapping: "OrderedDict[str, WordEntry]" = OrderedDict()
        for entry in self.words:
            if entry.key and entry.key not in mapping:
                mapping[entry.key] = entry
        return mapping

    def duplicate_keys(self) -> List[str]:
        """Normalized keys that occur more than once, in first-seen order."""
        seen = set()
        duplicates: List[str] = []
        for entry in self.words:
            if not entry.key:
                continue
            if entry.key in seen and entry.key not in duplicates:
                duplicates.append(entry.key)
            seen.add(entry.key)
        return duplicates
