"""Symmetric pair detection for two-letter tokens."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from setsmaps.models import SymmetricPair

logger = logging.getLogger(__name__)


def reverse_token(token: str) -> str:
    """Return ``token`` with its characters in reverse order.

    :param str token: Token to reverse.
    :return str: Reversed token.
    """

    return token[::-1]


def ordered_pair_key(token_a: str, token_b: str) -> tuple[str, str]:
    """Return a stable ordered key for two tokens.

    :param str token_a: First token.
    :param str token_b: Second token.
    :return tuple[str, str]: Lexicographically ordered token pair.
    """

    return (min(token_a, token_b), max(token_a, token_b))


def find_symmetric_pairs(tokens: Iterable[str]) -> set[SymmetricPair]:
    """Find all unordered pairs of tokens that are reverses of each other.

    Runs in linear time: every token is looked up once in a set of all
    tokens. Self-symmetric tokens such as ``"aa"`` never pair because the
    input holds no duplicates.

    :param Iterable[str] tokens: Two-letter lowercase tokens, no duplicates.
    :return set[SymmetricPair]: One canonical pair per reciprocal match.
    """

    token_list = list(tokens)
    known = set(token_list)
    pairs: set[SymmetricPair] = set()

    for token in token_list:
        reverse = reverse_token(token)
        if token == reverse:
            continue
        if reverse in known:
            pairs.add(SymmetricPair(*ordered_pair_key(token, reverse)))

    logger.debug("Found %d symmetric pairs among %d tokens", len(pairs), len(token_list))
    return pairs


def find_pairs(tokens: Sequence[str]) -> list[str]:
    """Return symmetric pairs formatted as ``"<small> & <big>"``.

    Example:
        >>> sorted(find_pairs(["am", "at", "ma", "if", "fi"]))
        ['am & ma', 'fi & if']

    :param Sequence[str] tokens: Two-letter lowercase tokens, no duplicates.
    :return list[str]: Formatted pairs, in no particular order.
    """

    return [str(pair) for pair in find_symmetric_pairs(tokens)]
