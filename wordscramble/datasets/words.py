"""
Root-word source.

A game starts by picking one word uniformly at random from the start-word
list (one word per line). The list is re-read on every pick, i.e. once per
game start/reset.

Failure policy:
  - the list file is missing/unreadable -> WordListUnavailable. This is a
    packaging defect, not something a player can recover from; front ends
    abort startup.
  - the list loads but holds no words   -> the fallback word is used.

Blank and whitespace-only lines are dropped before selection.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Sequence

from wordscramble.config import DEFAULT_START_WORDS, FALLBACK_ROOT_WORD
from .io import read_words

logger = logging.getLogger(__name__)


class WordListUnavailable(RuntimeError):
    """The start-word list could not be loaded."""

    def __init__(self, path: Path | str, cause: BaseException | None = None):
        self.path = str(path)
        detail = f": {cause}" if cause else ""
        super().__init__(f"Could not load start words from {self.path}{detail}")


def load_start_words(path: Path | str = DEFAULT_START_WORDS) -> List[str]:
    """Load the start-word list, raising WordListUnavailable on any read error."""
    try:
        return read_words(path)
    except (OSError, UnicodeDecodeError) as e:
        raise WordListUnavailable(path, e) from e


def pick_root_word(words: Sequence[str], rng: random.Random,
                   fallback: str = FALLBACK_ROOT_WORD) -> str:
    """Uniform random element of `words`, or `fallback` when it is empty."""
    if not words:
        return fallback
    return words[rng.randrange(len(words))]


class WordSource:
    """Start-word list bound to a path and a (seedable) RNG."""

    def __init__(self, path: Path | str = DEFAULT_START_WORDS, *,
                 fallback: str = FALLBACK_ROOT_WORD,
                 rng: random.Random | None = None,
                 seed: int | None = None):
        self.path = Path(path)
        self.fallback = fallback.strip().lower()
        self.rng = rng if rng is not None else random.Random(seed)

    def load(self) -> List[str]:
        return load_start_words(self.path)

    def pick_root_word(self) -> str:
        words = self.load()
        if not words:
            logger.warning("start word list %s is empty; using fallback %r",
                           self.path, self.fallback)
        word = pick_root_word(words, self.rng, self.fallback)
        logger.debug("picked root word %r from %d candidates", word, len(words))
        return word


class FixedWordSource:
    """Always yields the same root word (replays and tests)."""

    def __init__(self, word: str):
        word = word.strip().lower()
        if not word:
            raise ValueError("root word must be a non-empty string")
        self.word = word

    def pick_root_word(self) -> str:
        return self.word
