"""Reading s-expressions from strings and files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from gamecore.ebisp.expr import Cons, Expr, Number, String, Symbol, make_list
from gamecore.ebisp.tokenizer import Token, next_token

MAX_BUFFER_LENGTH = 5 * 1000 * 1000

_NUMBER_RE = re.compile(r"-?[0-9]+")
_QUOTE_PREFIXES = {"'": "quote", "`": "quasiquote", ",": "unquote"}


class ParseError(Exception):
    """A failure to read an expression.

    ``position`` is the offset into the source where the problem was found,
    or ``None`` when the failure is not tied to a place in the text.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position


@dataclass(frozen=True)
class ParseResult:
    """A parsed expression and the offset just past its text."""

    expr: Expr
    end: int


def _nil() -> Symbol:
    return Symbol("nil")


def _first_char(token: Token) -> str:
    return token.text[:1]


def _parse_list_end(token: Token) -> ParseResult:
    if _first_char(token) != ")":
        raise ParseError("Expected )", token.begin)
    return ParseResult(_nil(), token.end)


def _parse_cdr(source: str, token: Token) -> ParseResult:
    if _first_char(token) != ".":
        raise ParseError("Expected .", token.begin)
    cdr = read_expr_from_string(source, token.end)
    closing = next_token(source, cdr.end)
    if _first_char(closing) != ")":
        raise ParseError("Expected )", closing.begin)
    return ParseResult(cdr.expr, closing.end)


def _parse_list(source: str, token: Token) -> ParseResult:
    if _first_char(token) != "(":
        raise ParseError("Expected (", token.begin)

    token = next_token(source, token.end)
    if _first_char(token) == ")":
        return _parse_list_end(token)

    first = _parse_expr(source, token)
    head = Cons(first.expr, _nil())
    tail = head
    token = next_token(source, first.end)

    while token.text and _first_char(token) not in (".", ")"):
        item = _parse_expr(source, token)
        cell = Cons(item.expr, _nil())
        tail.cdr = cell
        tail = cell
        token = next_token(source, item.end)

    ending = (
        _parse_cdr(source, token)
        if _first_char(token) == "."
        else _parse_list_end(token)
    )
    tail.cdr = ending.expr
    return ParseResult(head, ending.end)


def _parse_string(token: Token) -> ParseResult:
    text = token.text
    if not text.startswith('"'):
        raise ParseError('Expected "', token.begin)
    if not text.endswith('"'):
        raise ParseError("Unclosed string", token.begin)
    return ParseResult(String(text[1:-1] if len(text) > 1 else ""), token.end)


def _parse_expr(source: str, token: Token) -> ParseResult:
    if not token.text:
        raise ParseError("EOF", token.begin)

    head = token.text[0]
    if head == "(":
        return _parse_list(source, token)
    if head == '"':
        return _parse_string(token)
    if head in _QUOTE_PREFIXES:
        inner = _parse_expr(source, next_token(source, token.end))
        quoted = make_list(Symbol(_QUOTE_PREFIXES[head]), inner.expr)
        return ParseResult(quoted, inner.end)

    if _NUMBER_RE.fullmatch(token.text):
        return ParseResult(Number(int(token.text)), token.end)

    return ParseResult(Symbol(token.text), token.end)


def read_expr_from_string(source: str, position: int = 0) -> ParseResult:
    """Read one expression starting at ``position``."""
    return _parse_expr(source, next_token(source, position))


def read_all_exprs_from_string(source: str) -> ParseResult:
    """Read every expression of ``source`` into a list."""
    token = next_token(source, 0)
    if not token.text:
        return ParseResult(_nil(), token.end)

    items: list[Expr] = []
    end = token.end
    while token.text:
        result = _parse_expr(source, token)
        items.append(result.expr)
        end = result.end
        token = next_token(source, result.end)

    return ParseResult(make_list(*items), end)


def _read_source_file(path: str | Path) -> str:
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ParseError(exc.strerror or str(exc)) from exc

    if not data:
        raise ParseError("File is empty")
    if len(data) >= MAX_BUFFER_LENGTH:
        raise ParseError("File is too big")

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError("Could not read the file") from exc


def read_expr_from_file(path: str | Path) -> ParseResult:
    """Read the first expression of a file."""
    return read_expr_from_string(_read_source_file(path))


def read_all_exprs_from_file(path: str | Path) -> ParseResult:
    """Read every expression of a file into a list."""
    return read_all_exprs_from_string(_read_source_file(path))


def format_parse_error(source: str, error: ParseError) -> str:
    """Describe ``error`` with a caret under the offending place of ``source``."""
    text = ""
    if error.position is not None:
        text += f"{source}\n{' ' * error.position}^\n"
    return text + f"{error.message}\n"