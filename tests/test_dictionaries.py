from pathlib import Path

import nltk
import pytest
from wordscramble.dictionaries import (
    DictionaryLookup, DictionaryUnavailable, WordSetDictionary, WordListDictionary,
    NltkDictionary, EnglishDictionary, create_dictionary, get_dictionary_ids,
)
from wordscramble.config import GameConfig
from wordscramble.datasets import FixedWordSource
from wordscramble.game import GameState, build_dictionary


def _corpus(root: Path, lines):
    d = root / "corpora" / "words"
    d.mkdir(parents=True)
    (d / "en").write_text("\n".join(lines) + "\n", encoding="utf-8")
    return root


@pytest.fixture
def no_corpus(monkeypatch, tmp_path: Path):
    """NLTK sees an empty data dir and cannot download."""
    monkeypatch.setattr(nltk.data, "path", [str(tmp_path)])
    monkeypatch.setattr(nltk, "download", lambda *a, **k: False)


@pytest.fixture
def small_corpus(monkeypatch, tmp_path: Path):
    root = _corpus(tmp_path / "nltk_data", ["stare", "tears", "Paris", "rates", "London", "zebu"])
    monkeypatch.setattr(nltk.data, "path", [str(root)])
    monkeypatch.setattr(nltk, "download", lambda *a, **k: False)
    return root


def test_wordset_lookup_is_case_insensitive():
    d = WordSetDictionary(["Ball", " call "])
    assert d.is_real_word("ball") and d.is_real_word("BALL") and d.is_real_word("call")
    assert not d.is_real_word("lab")
    assert not d.is_real_word("")
    assert not d.is_real_word("ba ll")
    assert "ball" in d and 3 not in d
    assert len(d) == 2


def test_wordlist_reads_file(tmp_path: Path):
    p = tmp_path / "dict.txt"
    p.write_text("stare\n\nTears\nrates\n", encoding="utf-8")
    d = WordListDictionary(p)
    assert len(d) == 3
    assert d.is_real_word("tears")


def test_wordlist_missing_file(tmp_path: Path):
    with pytest.raises(DictionaryUnavailable):
        WordListDictionary(tmp_path / "nope.txt")


def test_registry_and_factory(tmp_path: Path):
    assert {"wordset", "wordlist", "nltk", "english"} <= set(get_dictionary_ids())
    d = create_dictionary("wordset", words=["cab"])
    assert isinstance(d, DictionaryLookup)
    assert d.is_real_word("cab")
    with pytest.raises(ValueError):
        create_dictionary("klingon")


def test_build_dictionary_uses_config_path(tmp_path: Path):
    p = tmp_path / "dict.txt"
    p.write_text("cab\n", encoding="utf-8")
    d = build_dictionary(GameConfig(dictionary="wordlist", dictionary_path=p))
    assert d.is_real_word("cab") and not d.is_real_word("ball")


def test_bundled_dictionary_knows_start_words():
    d = create_dictionary("wordlist")
    assert d.is_real_word("sensible")
    assert d.is_real_word("ball")


# --- NLTK corpus ---
def test_nltk_corpus_drops_proper_nouns(small_corpus):
    d = NltkDictionary()
    assert d.is_real_word("stare") and d.is_real_word("Tears") and d.is_real_word("zebu")
    assert not d.is_real_word("paris")
    assert not d.is_real_word("london")
    assert len(d) == 4


def test_nltk_corpus_missing(no_corpus):
    with pytest.raises(DictionaryUnavailable):
        NltkDictionary()
    with pytest.raises(DictionaryUnavailable):
        NltkDictionary(download=False)


def test_english_merges_corpus_and_list(small_corpus, tmp_path: Path):
    p = tmp_path / "dict.txt"
    p.write_text("students\n", encoding="utf-8")
    d = EnglishDictionary(p)
    assert d.corpus_loaded is True
    assert d.is_real_word("zebu") and d.is_real_word("students")
    assert not d.is_real_word("paris")


def test_english_falls_back_to_list(no_corpus, tmp_path: Path):
    p = tmp_path / "dict.txt"
    p.write_text("students\n", encoding="utf-8")
    d = EnglishDictionary(p)
    assert d.corpus_loaded is False
    assert d.is_real_word("students") and len(d) == 1


def test_default_dictionary_accepts_common_words(no_corpus):
    # Even without the NLTK corpus, the default dictionary knows everyday words.
    state = GameState(FixedWordSource("absolute"), build_dictionary(GameConfig()))
    state.start_or_reset_game()
    for w in ["table", "stable", "lost", "bust", "tube", "salute", "bloat", "lobes"]:
        sub = state.submit(w)
        assert sub.accepted, (w, sub.reason)
    assert state.score == sum(len(w) for w in state.used_words)
