"""
NLTK English `words` corpus as a dictionary.

The corpus is looked up on nltk.data.path and fetched with nltk.download()
the first time it is missing, which needs network access once; after that
lookups are offline. Proper nouns in the corpus are capitalized and are
dropped, so "paris" is not a word but "stare" is.

The corpus is mostly headwords (few plurals or verb forms), so the default
"english" provider adds the bundled word list on top of it, and serves the
bundled list alone when the corpus cannot be had.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import nltk
from nltk.corpus.reader import WordListCorpusReader

from wordscramble.config import DEFAULT_DICTIONARY_PATH
from .base import DictionaryUnavailable, register
from .wordlist import load_wordlist
from .wordset import WordSetDictionary

logger = logging.getLogger(__name__)

CORPUS = "words"
FILEID = "en"


def _find_corpus():
    return nltk.data.find(f"corpora/{CORPUS}")


def load_corpus_words(*, download: bool = True) -> List[str]:
    """
    Lowercase entries of the NLTK `words` corpus (capitalized entries dropped).
    Raises DictionaryUnavailable if the corpus is missing and cannot be downloaded.
    """
    try:
        root = _find_corpus()
    except LookupError:
        if not download:
            raise DictionaryUnavailable(f"NLTK corpus {CORPUS!r} is not installed")
        logger.info("NLTK corpus %r not found; downloading", CORPUS)
        try:
            ok = nltk.download(CORPUS, quiet=True)
        except (OSError, ValueError) as e:
            raise DictionaryUnavailable(f"Could not download NLTK corpus {CORPUS!r}: {e}") from e
        if not ok:
            raise DictionaryUnavailable(f"Could not download NLTK corpus {CORPUS!r}")
        try:
            root = _find_corpus()
        except LookupError as e:
            raise DictionaryUnavailable(f"NLTK corpus {CORPUS!r} missing after download") from e

    # A fresh reader per load, so a changed nltk.data.path is honoured.
    reader = WordListCorpusReader(root, [FILEID])
    return [w.strip() for w in reader.words(FILEID) if w.strip().islower()]


@register
class NltkDictionary(WordSetDictionary):
    id = "nltk"
    name = "NLTK words corpus (en)"

    def __init__(self, download: bool = True):
        super().__init__(load_corpus_words(download=download))
        logger.info("loaded %d words from the NLTK corpus", len(self))


@register
class EnglishDictionary(WordSetDictionary):
    id = "english"
    name = "NLTK words corpus + bundled word list"

    def __init__(self, path: Path | str = DEFAULT_DICTIONARY_PATH, download: bool = True):
        self.path = Path(path)
        words = load_wordlist(self.path)
        try:
            corpus = load_corpus_words(download=download)
        except DictionaryUnavailable as e:
            logger.warning("%s; using %s only", e, self.path)
            corpus = []
        self.corpus_loaded = bool(corpus)
        super().__init__(corpus + words)
        logger.info("loaded %d English words (corpus=%s)", len(self), self.corpus_loaded)
