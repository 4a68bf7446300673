"""Whitespace tokenization for input lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List

# ASCII whitespace only; NBSP and other Unicode spaces stay inside a token.
_WHITESPACE = re.compile(r"[ \t\n\r\f\v]+")


@dataclass
class TokenizationResult:
    """Bundle the tokens of a line with the line they came from."""

    tokens: List[str]
    line: str

    def count(self) -> int:
        return len(self.tokens)


def split_tokens(line: str) -> TokenizationResult:
    """Split a line on runs of ASCII whitespace, dropping empty tokens."""
    tokens = [token for token in _WHITESPACE.split(line) if token]
    return TokenizationResult(tokens=tokens, line=line)


def join_tokens(tokens: Iterable[str]) -> str:
    return " ".join(tokens)
