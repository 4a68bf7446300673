"""Pig latin rewrite of whitespace-delimited tokens."""

from __future__ import annotations

from typing import Tuple

from piglatin.tokenization import join_tokens, split_tokens

VOWELS = frozenset("aeiouAEIOU")


def transform_token(token: str) -> str:
    """Rewrite a single token.

    Tokens starting with an ASCII vowel get ``-hay`` appended. Anything else
    has its first character moved behind a hyphen and followed by ``ay``, so
    ``"hello"`` becomes ``"ello-hay"`` and ``"y"`` becomes ``"-yay"``.
    Punctuation is part of the token and is left where it is.
    """
    if not token:
        raise ValueError("token must be non-empty")

    first = token[0]
    if first in VOWELS:
        return f"{token}-hay"
    return f"{token[1:]}-{first}ay"


def transform_line_counted(line: str) -> Tuple[str, int]:
    """Return the transformed line together with its token count."""
    result = split_tokens(line)
    return join_tokens(transform_token(token) for token in result.tokens), result.count()


def transform_line(line: str) -> str:
    """Transform every token of a line and rejoin them with single spaces."""
    return transform_line_counted(line)[0]
