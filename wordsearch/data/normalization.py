"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable, List

WORD_RE = re.compile(r"[^A-Za-z]")


def fold_word(text: str) -> str:
    """Fold accents to their base letter and uppercase, keeping every other character."""

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char)).upper()


def normalize_word(text: str) -> str:
    """Return a normalized uppercase ASCII representation of ``text``.

    Accents are folded to their base letter and anything that is not a
    letter is dropped, so ``"crème-brûlée"`` becomes ``"CREMEBRULEE"``.
    """

    return WORD_RE.sub("", fold_word(text))


def unique_words(words: Iterable[str]) -> List[str]:
    """Normalize ``words`` and drop blanks and repeats, keeping first occurrences."""

    seen = set()
    result: List[str] = []
    for word in words:
        cleaned = normalize_word(word)
        if not cleaned or cleaned in seen:
            continue
        seen.add(cleaned)
        result.append(cleaned)
    return result


def blank_words(words: Iterable[str]) -> List[str]:
    """Return the entries of ``words`` that normalize to nothing, without repeats."""

    result: List[str] = []
    for word in words:
        if not normalize_word(word) and word not in result:
            result.append(word)
    return result


__all__ = ["blank_words", "fold_word", "normalize_word", "unique_words"]
