from .validator import validate_wordlist, validate_game_lists, pretty_summary
from .io import read_lines, read_words, write_lines
from .words import WordSource, FixedWordSource, WordListUnavailable, load_start_words, pick_root_word

__all__ = [
    "validate_wordlist", "validate_game_lists", "pretty_summary",
    "read_lines", "read_words", "write_lines",
    "WordSource", "FixedWordSource", "WordListUnavailable", "load_start_words", "pick_root_word",
]
