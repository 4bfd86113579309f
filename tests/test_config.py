from pathlib import Path

import pytest
from wordscramble.config import GameConfig, DEFAULT_START_WORDS, MIN_WORD_LENGTH


def test_defaults():
    cfg = GameConfig()
    assert cfg.start_words == DEFAULT_START_WORDS
    assert cfg.dictionary == "english"
    assert cfg.min_length == MIN_WORD_LENGTH == 3
    assert cfg.fallback_word == "sensible"
    assert cfg.seed is None


def test_from_env():
    cfg = GameConfig.from_env({
        "WORDSCRAMBLE_START_WORDS": "/tmp/start.txt",
        "WORDSCRAMBLE_DICTIONARY": " NLTK ",
        "WORDSCRAMBLE_SEED": "7",
    })
    assert cfg.start_words == Path("/tmp/start.txt")
    assert cfg.dictionary == "nltk"
    assert cfg.seed == 7


def test_from_env_bad_seed():
    with pytest.raises(ValueError):
        GameConfig.from_env({"WORDSCRAMBLE_SEED": "seven"})


def test_override_skips_none():
    cfg = GameConfig(seed=1).override(seed=None, dictionary="wordset")
    assert cfg.seed == 1 and cfg.dictionary == "wordset"


def test_invalid_values():
    with pytest.raises(ValueError):
        GameConfig(min_length=0)
    with pytest.raises(ValueError):
        GameConfig(fallback_word=" ")
