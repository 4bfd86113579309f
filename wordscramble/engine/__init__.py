from .validation import (
    normalize, is_original, is_possible, is_real, is_long_enough, is_not_root, validate, check,
)
from .errors import (
    RejectionReason, DuplicateWord, InfeasibleWord, UnrecognizedWord, TooShort, SameAsRoot,
)

__all__ = [
    "normalize", "is_original", "is_possible", "is_real", "is_long_enough", "is_not_root",
    "validate", "check",
    "RejectionReason", "DuplicateWord", "InfeasibleWord", "UnrecognizedWord", "TooShort",
    "SameAsRoot",
]
