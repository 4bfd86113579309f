"""
Rejection reasons.

Each failed check raises one of these. They are ordinary, recoverable
validation failures: the game catches them, shows `title` / `message` to the
player and carries on. `code` is a stable id for transcripts and tests.
"""

from __future__ import annotations


class RejectionReason(Exception):
    code = "rejected"
    title = "Not allowed"
    message = "That word is not allowed."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(f"{self.title}: {self.message}")

    def as_dict(self) -> dict:
        return {"code": self.code, "title": self.title, "message": self.message}


class DuplicateWord(RejectionReason):
    code = "duplicate"
    title = "Word used already"
    message = "Try another combination"


class InfeasibleWord(RejectionReason):
    code = "infeasible"
    title = "Word not possible"

    def __init__(self, root_word: str):
        self.root_word = root_word
        super().__init__(f"You cannot have this word combination from '{root_word}'!")


class UnrecognizedWord(RejectionReason):
    code = "unrecognized"
    title = "Word not recognized"
    message = "That is not a valid word."


class TooShort(RejectionReason):
    code = "too_short"
    title = "Word not allowed"

    def __init__(self, min_length: int = 3):
        self.min_length = min_length
        super().__init__(f"Words less than {min_length} are not allowed")


class SameAsRoot(RejectionReason):
    code = "same_as_root"
    title = "Not allowed"
    message = "That's the same as the root word!"
