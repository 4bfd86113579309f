from __future__ import annotations
from typing import Dict, Protocol, Type, runtime_checkable

# ---- Global dictionary-provider registry ----
REGISTRY: Dict[str, Type["BaseDictionary"]] = {}


@runtime_checkable
class DictionaryLookup(Protocol):
    """Anything that can answer "is this a correctly spelled English word?"."""

    def is_real_word(self, word: str) -> bool: ...


def register(cls: Type["BaseDictionary"]) -> Type["BaseDictionary"]:
    """
    Decorator: @register on a dictionary class adds it to REGISTRY by its `id`.
    """
    did = getattr(cls, "id", None)
    if not did:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if did in REGISTRY:
        raise ValueError(f"Duplicate dictionary id: {did}")
    REGISTRY[did] = cls
    return cls


# ---- Base class that providers inherit ----
class BaseDictionary:
    id = "base"
    name = "Base"
    language = "en"

    def is_real_word(self, word: str) -> bool:
        raise NotImplementedError("Override in subclass")

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_real_word(word)


class DictionaryUnavailable(RuntimeError):
    """A dictionary provider could not load its word data."""
