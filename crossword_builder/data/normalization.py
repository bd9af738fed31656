"""Canonicalization of the incoming word -> clue mapping."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping

from ..core.exceptions import InputValidationError


def clean_word(text: str) -> str:
    """Return the trimmed, upper-cased form of ``text``.

    Characters are not filtered: anything the caller supplies ends up on the
    board, only surrounding whitespace is dropped.
    """

    if not isinstance(text, str):
        raise InputValidationError(f"Words must be strings, got {type(text).__name__}")
    return text.strip().upper()


def normalize_words(words: Mapping[str, str]) -> Dict[str, str]:
    """Return a new mapping keyed by cleaned words.

    Keys that collide after cleaning keep the position of the first
    occurrence and the clue of the last one.
    """

    normalized: Dict[str, str] = {}
    for raw_word, clue in words.items():
        word = clean_word(raw_word)
        if not word:
            raise InputValidationError(f"Word {raw_word!r} is empty after trimming")
        normalized[word] = clue
    return normalized


def sort_by_length(words: Iterable[str]) -> List[str]:
    """Longest first; equal lengths keep their input order."""
    return sorted(words, key=len, reverse=True)


__all__ = ["clean_word", "normalize_words", "sort_by_length"]
