"""
Word validation pipeline.

This module answers the question: "Can this word be accepted right now?"
A normalized candidate is accepted iff, checked in this order:
  1. it has not been accepted already        (DuplicateWord)
  2. it can be spelled from the root's letters,
     each letter used at most as often as it
     occurs in the root                      (InfeasibleWord)
  3. the dictionary knows it                 (UnrecognizedWord)
  4. it has at least MIN_WORD_LENGTH letters (TooShort)
  5. it is not the root word itself          (SameAsRoot)

The first failing check wins, so e.g. a two-letter word that has already been
used is reported as a duplicate, not as too short.

An empty candidate (after normalization) is not an error: validate() returns
None and the caller is expected to do nothing.
"""

from __future__ import annotations

from typing import Iterable, Optional

from wordscramble.config import MIN_WORD_LENGTH
from wordscramble.dictionaries.base import DictionaryLookup
from .errors import (
    RejectionReason, DuplicateWord, InfeasibleWord, UnrecognizedWord, TooShort, SameAsRoot,
)


def normalize(raw: str) -> str:
    """Lowercase and strip surrounding whitespace."""
    return raw.lower().strip()


def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """
    True if `word` is a sub-multiset of `root_word`'s letters.

    Walks the candidate and removes one matching letter from a scratch copy
    of the root for each character; fails on the first letter with no copy
    left. "aabb" is possible from "abab" but not from "ab".
    """
    remaining = list(root_word)
    for ch in word:
        try:
            remaining.remove(ch)
        except ValueError:
            return False
    return True


def is_real(word: str, dictionary: DictionaryLookup) -> bool:
    return dictionary.is_real_word(word)


def is_long_enough(word: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return len(word) >= min_length


def is_not_root(word: str, root_word: str) -> bool:
    return word != root_word


def validate(
        candidate: str,
        root_word: str,
        used_words: Iterable[str],
        dictionary: DictionaryLookup,
        *,
        min_length: int = MIN_WORD_LENGTH,
) -> Optional[str]:
    """
    Run the pipeline on a raw candidate.

    Returns:
      - the normalized word if every check passes
      - None if the candidate is empty after normalization (silently ignored)

    Raises:
      RejectionReason subclass for the first failing check.
    """
    word = normalize(candidate)
    if not word:
        return None

    if not is_original(word, used_words):
        raise DuplicateWord()
    if not is_possible(word, root_word):
        raise InfeasibleWord(root_word)
    if not is_real(word, dictionary):
        raise UnrecognizedWord()
    if not is_long_enough(word, min_length):
        raise TooShort(min_length)
    if not is_not_root(word, root_word):
        raise SameAsRoot()
    return word


def check(
        candidate: str,
        root_word: str,
        used_words: Iterable[str],
        dictionary: DictionaryLookup,
        *,
        min_length: int = MIN_WORD_LENGTH,
) -> Optional[RejectionReason]:
    """Non-raising variant of validate(): the rejection, or None if acceptable/empty."""
    try:
        validate(candidate, root_word, used_words, dictionary, min_length=min_length)
    except RejectionReason as reason:
        return reason
    return None
