"""
In-memory word-set dictionary.

The offline stand-in for a spell checker: a word is "real" iff it is in the
set given at construction. Lookups are case-insensitive and whitespace is
ignored at the edges; anything non-alphabetic is never a word.
"""

from __future__ import annotations

import logging
from typing import Iterable, Set

from .base import BaseDictionary, register

logger = logging.getLogger(__name__)


@register
class WordSetDictionary(BaseDictionary):
    id = "wordset"
    name = "Word set (in memory)"

    def __init__(self, words: Iterable[str] = ()):
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}
        logger.debug("%s loaded with %d words", self.id, len(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def is_real_word(self, word: str) -> bool:
        w = word.strip().lower()
        if not w or not w.isalpha():
            return False
        return w in self._words
