from __future__ import annotations

from wordscramble.config import GameConfig
from wordscramble.datasets.words import WordSource, WordListUnavailable
from wordscramble.dictionaries import BaseDictionary, DictionaryUnavailable, create_dictionary
from .state import GameState, Submission

# Providers that read config.dictionary_path
FILE_BACKED_DICTIONARIES = ("wordlist", "english")

# Everything that can stop a game from being wired up: missing start list,
# unloadable dictionary, unknown provider id or bad config value.
STARTUP_ERRORS = (WordListUnavailable, DictionaryUnavailable, ValueError)


def build_dictionary(config: GameConfig) -> BaseDictionary:
    """Instantiate the configured dictionary provider."""
    if config.dictionary in FILE_BACKED_DICTIONARIES:
        return create_dictionary(config.dictionary, path=config.dictionary_path)
    return create_dictionary(config.dictionary)


def new_game(config: GameConfig | None = None) -> GameState:
    """
    Wire a GameState from `config` (defaults: bundled lists, env overrides not
    applied) and start it. Any of STARTUP_ERRORS propagates to the caller.
    """
    config = config or GameConfig()
    source = WordSource(config.start_words, fallback=config.fallback_word, seed=config.seed)
    state = GameState(source, build_dictionary(config), min_length=config.min_length)
    state.start_or_reset_game()
    return state


__all__ = [
    "GameState", "Submission", "build_dictionary", "new_game",
    "FILE_BACKED_DICTIONARIES", "STARTUP_ERRORS",
]
