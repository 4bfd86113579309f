from __future__ import annotations
from typing import List
from .base import BaseDictionary, DictionaryLookup, DictionaryUnavailable, REGISTRY, register

from . import wordset  # noqa: F401
from . import wordlist  # noqa: F401
from . import nltk_words  # noqa: F401

from .wordset import WordSetDictionary
from .wordlist import WordListDictionary
from .nltk_words import NltkDictionary, EnglishDictionary


def create_dictionary(dictionary_id: str, **kwargs) -> BaseDictionary:
    """
    Factory: instantiate a registered dictionary provider by id.
    Keyword arguments are passed to the provider's constructor.
    """
    try:
        cls = REGISTRY[dictionary_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown dictionary id: {dictionary_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_dictionary_ids() -> List[str]:
    """
    Return all registered dictionary ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseDictionary", "DictionaryLookup", "DictionaryUnavailable", "REGISTRY", "register",
    "WordSetDictionary", "WordListDictionary", "NltkDictionary", "EnglishDictionary",
    "create_dictionary", "get_dictionary_ids",
]
