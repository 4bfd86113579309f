import pytest
from wordscramble.dictionaries import WordSetDictionary
from wordscramble.engine import (
    normalize, is_original, is_possible, is_long_enough, is_not_root, validate, check,
    DuplicateWord, InfeasibleWord, UnrecognizedWord, TooShort, SameAsRoot, RejectionReason,
)

WORDS = WordSetDictionary(["ball", "call", "all", "lab", "allb", "ballc", "bc", "ab", "cab"])


# --- feasibility: multiset containment, not substring ---
@pytest.mark.parametrize("word,root,expected", [
    ("ball", "ballc", True),
    ("balll", "ballc", False),
    ("aabb", "abab", True),
    ("aabb", "ab", False),
    ("cab", "ballc", True),
    ("", "ballc", True),
    ("x", "ballc", False),
    ("ballc", "ballc", True),
])
def test_is_possible(word, root, expected):
    assert is_possible(word, root) is expected


def test_is_possible_does_not_mutate_root():
    root = "ballc"
    is_possible("ball", root)
    assert root == "ballc"


def test_small_predicates():
    assert is_original("ball", ["call"]) is True
    assert is_original("ball", ["call", "ball"]) is False
    assert is_long_enough("abc") is True
    assert is_long_enough("ab") is False
    assert is_long_enough("ab", min_length=2) is True
    assert is_not_root("ball", "ballc") is True
    assert is_not_root("ballc", "ballc") is False


@pytest.mark.parametrize("raw,expected", [
    ("  Ball \n", "ball"),
    ("CALL", "call"),
    ("\t", ""),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_validate_accepts_and_normalizes():
    assert validate(" BALL ", "ballc", [], WORDS) == "ball"


@pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
def test_validate_empty_is_ignored(raw):
    assert validate(raw, "ballc", [], WORDS) is None
    assert check(raw, "ballc", [], WORDS) is None


def test_duplicate_wins_over_everything():
    # "bc" is too short, but originality is checked first
    with pytest.raises(DuplicateWord):
        validate("bc", "ballc", ["bc"], WORDS)
    with pytest.raises(DuplicateWord):
        validate("Ball", "ballc", ["ball", "call"], WORDS)


def test_infeasible_message_names_root():
    with pytest.raises(InfeasibleWord) as ei:
        validate("balll", "ballc", [], WORDS)
    assert ei.value.root_word == "ballc"
    assert "'ballc'" in ei.value.message
    assert ei.value.title == "Word not possible"


def test_feasibility_before_dictionary():
    # "zzz" is neither possible nor real; possibility is reported
    assert isinstance(check("zzz", "ballc", [], WORDS), InfeasibleWord)


def test_unrecognized_word():
    # "lac" is spellable from "ballc" but not in the fixture dictionary
    with pytest.raises(UnrecognizedWord):
        validate("lac", "ballc", [], WORDS)


@pytest.mark.parametrize("raw", ["ab", "bc"])
def test_short_real_feasible_original_word_is_too_short(raw):
    reason = check(raw, "ballc", [], WORDS)
    assert isinstance(reason, TooShort)
    assert reason.message == "Words less than 3 are not allowed"


def test_root_word_is_rejected():
    with pytest.raises(SameAsRoot):
        validate("BALLC ", "ballc", ["ball"], WORDS)


def test_rejection_reason_dict():
    d = DuplicateWord().as_dict()
    assert d == {"code": "duplicate", "title": "Word used already",
                 "message": "Try another combination"}
    assert issubclass(SameAsRoot, RejectionReason)
