"""Anagram detection."""

from __future__ import annotations

from collections import Counter


def _normalize(word: str) -> str:
    """Drop whitespace and fold case."""
    return "".join(char for char in word if not char.isspace()).lower()


def is_anagram(word1: str, word2: str) -> bool:
    """Return whether two strings use exactly the same letters.

    Whitespace and case are ignored, so ``"Ab"`` and ``"Ba"`` match while
    ``"DOG"`` and ``"GOOD"`` do not.

    :param word1: First string.
    :param word2: Second string.
    :return: ``True`` when both strings hold the same letter multiset.
    """
    clean1 = _normalize(word1)
    clean2 = _normalize(word2)
    if len(clean1) != len(clean2):
        return False
    return Counter(clean1) == Counter(clean2)
