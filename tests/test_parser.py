import pytest

from gamecore.ebisp.expr import Number, String, Symbol, is_nil
from gamecore.ebisp.parser import (
    ParseError,
    format_parse_error,
    read_all_exprs_from_file,
    read_all_exprs_from_string,
    read_expr_from_file,
    read_expr_from_string,
)


def test_number():
    result = read_expr_from_string("42")
    assert isinstance(result.expr, Number)
    assert result.expr.value == 42
    assert result.end == 2


def test_negative_number():
    assert read_expr_from_string("-7").expr.value == -7


@pytest.mark.parametrize("text", ["-", "12abc", "foo", "+5"])
def test_symbols(text):
    expr = read_expr_from_string(text).expr
    assert isinstance(expr, Symbol)
    assert expr.name == text


def test_string():
    expr = read_expr_from_string('"hello world"').expr
    assert isinstance(expr, String)
    assert expr.value == "hello world"


def test_empty_string():
    expr = read_expr_from_string('""').expr
    assert isinstance(expr, String)
    assert expr.value == ""


@pytest.mark.parametrize(
    "text",
    ["(1 2 3)", "(a . b)", "(a (b c) \"s\")", "(1 2 . 3)"],
)
def test_round_trip(text):
    assert read_expr_from_string(text).expr.to_sexpr() == text


def test_empty_list_is_nil():
    assert is_nil(read_expr_from_string("()").expr)


@pytest.mark.parametrize(
    "text, name",
    [("'x", "quote"), ("`x", "quasiquote"), (",x", "unquote")],
)
def test_quote_prefixes(text, name):
    assert read_expr_from_string(text).expr.to_sexpr() == f"({name} x)"


def test_position_argument():
    result = read_expr_from_string("1 2", 1)
    assert result.expr.value == 2
    assert result.end == 3


def test_comments_are_skipped():
    assert read_expr_from_string("; comment\n 5").expr.value == 5


def test_eof_error():
    with pytest.raises(ParseError) as info:
        read_expr_from_string("   ")
    assert info.value.message == "EOF"


def test_unclosed_list():
    with pytest.raises(ParseError) as info:
        read_expr_from_string("(1 2")
    assert info.value.message == "Expected )"
    assert info.value.position == 4


def test_unclosed_string():
    with pytest.raises(ParseError) as info:
        read_expr_from_string('"abc')
    assert info.value.message == "Unclosed string"


def test_bad_dotted_pair():
    with pytest.raises(ParseError) as info:
        read_expr_from_string("(a . b c)")
    assert info.value.message == "Expected )"


def test_read_all():
    result = read_all_exprs_from_string("(a) (b) c\n")
    assert result.expr.to_sexpr() == "((a) (b) c)"


def test_read_all_empty():
    assert is_nil(read_all_exprs_from_string("  ").expr)


def test_read_all_propagates_errors():
    with pytest.raises(ParseError):
        read_all_exprs_from_string("(a) (b")


def test_files(tmp_path):
    path = tmp_path / "code.lisp"
    path.write_text("(set x 1)\n(set y 2)\n", encoding="utf-8")
    assert read_expr_from_file(path).expr.to_sexpr() == "(set x 1)"
    assert read_all_exprs_from_file(path).expr.to_sexpr() == "((set x 1) (set y 2))"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.lisp"
    path.write_bytes(b"")
    with pytest.raises(ParseError) as info:
        read_all_exprs_from_file(path)
    assert info.value.message == "File is empty"
    assert info.value.position is None


def test_missing_file(tmp_path):
    with pytest.raises(ParseError):
        read_expr_from_file(tmp_path / "missing.lisp")


def test_format_parse_error():
    source = "(1 2"
    with pytest.raises(ParseError) as info:
        read_expr_from_string(source)
    assert format_parse_error(source, info.value) == "(1 2\n    ^\nExpected )\n"


def test_format_parse_error_without_position():
    assert format_parse_error("x", ParseError("File is empty")) == "File is empty\n"