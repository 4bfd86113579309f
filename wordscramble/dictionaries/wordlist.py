"""
File-backed dictionary: one word per line, UTF-8 (default: the bundled
datasets/data/dictionary.txt). `script/fetch_wordlist.py` can replace the
bundled file with a full English list.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from wordscramble.config import DEFAULT_DICTIONARY_PATH
from wordscramble.datasets.io import read_words
from .base import DictionaryUnavailable, register
from .wordset import WordSetDictionary

logger = logging.getLogger(__name__)


def load_wordlist(path: Path | str) -> List[str]:
    """Read a dictionary list, raising DictionaryUnavailable on any read error."""
    try:
        return read_words(path)
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryUnavailable(f"Could not load dictionary words from {path}: {e}") from e


@register
class WordListDictionary(WordSetDictionary):
    id = "wordlist"
    name = "Word list file"

    def __init__(self, path: Path | str = DEFAULT_DICTIONARY_PATH):
        self.path = Path(path)
        super().__init__(load_wordlist(self.path))
        logger.info("loaded %d dictionary words from %s", len(self), self.path)
