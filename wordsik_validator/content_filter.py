"""
Disallowed-content filter for word-list text.

Wraps ``better_profanity``: the library's word list (with its leetspeak and
masked-character variants) is the default oracle, and deployments can add or
remove words on top of it. Validators only ever ask ``is_flagged``.
"""

import logging
from typing import Iterable, List, Optional, Set

from better_profanity import Profanity


logger = logging.getLogger(__name__)


def _normalize(words: Iterable[str]) -> List[str]:
    normalized: List[str] = []
    for word in words:
        word = word.strip().lower()
        if word and word not in normalized:
            normalized.append(word)
    return normalized


class ContentFilter:
    """
    Flags text containing disallowed words.

    Args:
        words: Replacement word list. When None the library's default list
            is used; an empty list flags nothing until words are added.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        self._use_default = words is None
        self._custom: List[str] = [] if words is None else _normalize(words)
        self._removed: Set[str] = set()
        self._profanity = Profanity()
        self._active = True
        self._reload()

    @property
    def words(self) -> List[str]:
        """Custom words currently added on top of (or instead of) the default list."""
        return [word for word in self._custom if word not in self._removed]

    @property
    def uses_default_list(self) -> bool:
        return self._use_default

    def add_words(self, *words: str) -> None:
        """Add words to the disallowed list."""
        for word in _normalize(words):
            self._removed.discard(word)
            if word not in self._custom:
                self._custom.append(word)
        self._reload()

    def remove_words(self, *words: str) -> None:
        """Remove words from the disallowed list, including default-list words."""
        self._removed.update(_normalize(words))
        self._reload()

    def is_flagged(self, text: str) -> bool:
        """Check whether text contains a disallowed word."""
        if not text or not self._active:
            return False
        return self._profanity.contains_profanity(text)

    def _reload(self) -> None:
        custom = self.words
        if self._use_default:
            self._profanity.load_censor_words(whitelist_words=sorted(self._removed))
            if custom:
                self._profanity.add_censor_words(custom)
        elif custom:
            self._profanity.load_censor_words(custom_words=custom)
        # An empty word set makes the library fall back to its default list
        self._active = self._use_default or bool(custom)
        logger.debug(
            f"Content filter loaded: default list={self._use_default}, "
            f"{len(custom)} custom words, {len(self._removed)} removed"
        )
