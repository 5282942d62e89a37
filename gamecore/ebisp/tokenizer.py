"""Splitting source text into tokens of the embedded Lisp."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

_WHITESPACE = frozenset(" \t\n\v\f\r")
_FORBIDDEN_SYMBOL_CHARS = frozenset("()\"';.`,")
_SINGLE_CHAR_TOKENS = frozenset("().'`,")


@dataclass(frozen=True)
class Token:
    """A slice ``source[begin:end]``; empty when the input is exhausted."""

    text: str
    begin: int
    end: int


def _is_symbol_char(ch: str) -> bool:
    return ch not in _FORBIDDEN_SYMBOL_CHARS and ch not in _WHITESPACE


def _skip_whitespace(source: str, pos: int) -> int:
    while pos < len(source) and source[pos] in _WHITESPACE:
        pos += 1
    return pos


def next_token(source: str, position: int = 0) -> Token:
    """Return the token starting at or after ``position``."""
    pos = _skip_whitespace(source, position)
    while pos < len(source) and source[pos] == ";":
        newline = source.find("\n", pos + 1)
        pos = len(source) if newline < 0 else newline
        pos = _skip_whitespace(source, pos)

    if pos >= len(source):
        return Token("", pos, pos)

    ch = source[pos]
    if ch in _SINGLE_CHAR_TOKENS:
        end = pos + 1
    elif ch == '"':
        closing = source.find('"', pos + 1)
        end = len(source) if closing < 0 else closing + 1
    else:
        end = pos + 1
        while end < len(source) and _is_symbol_char(source[end]):
            end += 1
    return Token(source[pos:end], pos, end)


def tokenize(source: str) -> Iterator[Token]:
    """Yield every token of ``source`` in order."""
    position = 0
    while True:
        token = next_token(source, position)
        if token.begin == token.end:
            return
        yield token
        position = token.end