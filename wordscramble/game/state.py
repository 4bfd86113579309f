"""
Game session state.

One GameState is one player's session: the root word, the accepted words
(most recent first) and the score. Two phases exist:

  - "awaiting_input"   : ready for the next submission
  - "displaying_error" : the last submission was rejected; `error` holds why

start_or_reset_game() is the only way to (re)initialize the root word, the
accepted words and the score, and it always does all three together. First
launch and an explicit reset behave the same.

Invariant: score == sum(len(w) for w in used_words).

Submissions are handled synchronously and to completion; the object is not
meant to be shared between threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Optional, Protocol, Tuple

from wordscramble.config import MIN_WORD_LENGTH
from wordscramble.dictionaries.base import DictionaryLookup
from wordscramble.engine import normalize, validate, RejectionReason

logger = logging.getLogger(__name__)

Phase = Literal["awaiting_input", "displaying_error"]
Status = Literal["accepted", "rejected", "ignored"]


class RootWordSource(Protocol):
    def pick_root_word(self) -> str: ...


@dataclass(frozen=True)
class Submission:
    """Outcome of one GameState.submit() call."""
    status: Status
    word: str = ""
    points: int = 0
    reason: Optional[RejectionReason] = None

    @property
    def accepted(self) -> bool:
        return self.status == "accepted"


class GameState:
    def __init__(self, word_source: RootWordSource, dictionary: DictionaryLookup, *,
                 min_length: int = MIN_WORD_LENGTH):
        self.word_source = word_source
        self.dictionary = dictionary
        self.min_length = min_length
        self._root_word = ""
        self._used_words: List[str] = []
        self._score = 0
        self._error: Optional[RejectionReason] = None
        self._started = False

    # ---- read-only views ----
    @property
    def root_word(self) -> str:
        return self._root_word

    @property
    def used_words(self) -> Tuple[str, ...]:
        return tuple(self._used_words)

    @property
    def score(self) -> int:
        return self._score

    @property
    def error(self) -> Optional[RejectionReason]:
        return self._error

    @property
    def phase(self) -> Phase:
        return "displaying_error" if self._error is not None else "awaiting_input"

    @property
    def started(self) -> bool:
        return self._started

    # ---- transitions ----
    def start_or_reset_game(self) -> str:
        """
        Pick a fresh root word and clear words, score and error.
        WordListUnavailable from the word source propagates unchanged.
        """
        root = self.word_source.pick_root_word()
        self._root_word = root
        self._used_words = []
        self._score = 0
        self._error = None
        self._started = True
        logger.info("new game with root word %r", root)
        return root

    def submit(self, raw_input: str) -> Submission:
        """
        Process one raw submission.

        Empty/whitespace-only input is ignored: nothing changes, including the
        error phase. A rejection leaves words and score untouched and moves to
        "displaying_error". An accepted word goes to the front of used_words
        and its length is added to the score.
        """
        if not self._started:
            raise RuntimeError("start_or_reset_game() must be called before submit()")

        if not normalize(raw_input):
            return Submission(status="ignored")

        try:
            word = validate(raw_input, self._root_word, self._used_words, self.dictionary,
                            min_length=self.min_length)
        except RejectionReason as reason:
            self._error = reason
            logger.debug("rejected %r (%s)", raw_input, reason.code)
            return Submission(status="rejected", word=normalize(raw_input), reason=reason)

        points = len(word)
        self._used_words.insert(0, word)
        self._score += points
        self._error = None
        logger.debug("accepted %r (+%d, score=%d)", word, points, self._score)
        return Submission(status="accepted", word=word, points=points)

    def acknowledge_error(self) -> None:
        """Dismiss the current rejection (the single "OK" button)."""
        self._error = None

    def snapshot(self) -> dict:
        """JSON-ready view of the session."""
        return {
            "root_word": self._root_word,
            "used_words": list(self._used_words),
            "score": self._score,
            "phase": self.phase,
            "error": self._error.as_dict() if self._error is not None else None,
        }
