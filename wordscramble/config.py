"""
Game configuration.

Module constants are the single source of truth for the rules; GameConfig
bundles the knobs a front end may change (data paths, dictionary provider,
RNG seed). CLI flags override environment variables, which override the
defaults below.

Environment variables:
  WORDSCRAMBLE_START_WORDS       path to the start-word list
  WORDSCRAMBLE_DICTIONARY        dictionary provider id (see dictionaries)
  WORDSCRAMBLE_DICTIONARY_PATH   word list used by the "wordlist" provider
  WORDSCRAMBLE_SEED              integer seed for root-word selection
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

DATA_DIR = Path(__file__).resolve().parent / "datasets" / "data"

DEFAULT_START_WORDS = DATA_DIR / "start.txt"
DEFAULT_DICTIONARY_PATH = DATA_DIR / "dictionary.txt"
DEFAULT_DICTIONARY = "english"

# Rules
MIN_WORD_LENGTH = 3
FALLBACK_ROOT_WORD = "sensible"
LANGUAGE = "en"


@dataclass(frozen=True)
class GameConfig:
    start_words: Path = DEFAULT_START_WORDS
    dictionary: str = DEFAULT_DICTIONARY
    dictionary_path: Path = DEFAULT_DICTIONARY_PATH
    min_length: int = MIN_WORD_LENGTH
    fallback_word: str = FALLBACK_ROOT_WORD
    seed: Optional[int] = None

    def __post_init__(self):
        if self.min_length < 1:
            raise ValueError(f"min_length must be >= 1; got {self.min_length}")
        if not self.fallback_word.strip():
            raise ValueError("fallback_word must be a non-empty string")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GameConfig":
        env = os.environ if environ is None else environ
        cfg = cls()
        if env.get("WORDSCRAMBLE_START_WORDS"):
            cfg = replace(cfg, start_words=Path(env["WORDSCRAMBLE_START_WORDS"]))
        if env.get("WORDSCRAMBLE_DICTIONARY"):
            cfg = replace(cfg, dictionary=env["WORDSCRAMBLE_DICTIONARY"].strip().lower())
        if env.get("WORDSCRAMBLE_DICTIONARY_PATH"):
            cfg = replace(cfg, dictionary_path=Path(env["WORDSCRAMBLE_DICTIONARY_PATH"]))
        if env.get("WORDSCRAMBLE_SEED"):
            try:
                seed = int(env["WORDSCRAMBLE_SEED"])
            except ValueError as e:
                raise ValueError(
                    f"WORDSCRAMBLE_SEED must be an integer; got {env['WORDSCRAMBLE_SEED']!r}") from e
            cfg = replace(cfg, seed=seed)
        return cfg

    def override(self, **changes) -> "GameConfig":
        """Return a copy with every non-None value in `changes` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
