from gamecore.ebisp.tokenizer import Token, next_token, tokenize


def texts(source):
    return [token.text for token in tokenize(source)]


def test_simple_list():
    assert texts("(foo bar)") == ["(", "foo", "bar", ")"]


def test_punctuation_tokens_are_single_chars():
    assert texts("'`,.") == ["'", "`", ",", "."]


def test_quote_prefix_splits_from_symbol():
    assert texts("'abc") == ["'", "abc"]


def test_dot_separates_symbols():
    assert texts("(a . b)") == ["(", "a", ".", "b", ")"]


def test_string_token_includes_quotes():
    assert texts('(print "hello world")') == ["(", "print", '"hello world"', ")"]


def test_unclosed_string_runs_to_end():
    source = '"abc def'
    assert texts(source) == [source]


def test_comments_are_skipped():
    source = "; comment\n  ; another\nfoo ; trailing\nbar"
    assert texts(source) == ["foo", "bar"]


def test_comment_only_gives_empty_token():
    source = "; nothing here"
    token = next_token(source)
    assert token.text == ""
    assert token.begin == token.end == len(source)


def test_empty_source():
    assert next_token("") == Token("", 0, 0)
    assert list(tokenize("   \n\t")) == []


def test_positions_are_slices():
    source = "  (x 12)"
    for token in tokenize(source):
        assert source[token.begin:token.end] == token.text


def test_next_token_from_position():
    source = "  x  yz"
    first = next_token(source, 0)
    assert first.begin == source.index("x")
    second = next_token(source, first.end)
    assert second.text == "yz"
    assert second.begin == source.index("yz")


def test_numbers_and_minus_are_symbol_chars():
    assert texts("(-12 +3)") == ["(", "-12", "+3", ")"]


def test_unicode_symbol():
    assert texts("(λ (x) x)") == ["(", "λ", "(", "x", ")", "x", ")"]