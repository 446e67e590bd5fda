import pytest

from comma import (Command, parse, split, ParseError, EmptyCommandError,
                   UnterminatedQuoteError, TrailingEscapeError)


@pytest.mark.parametrize('line', ['', ' ', '   ', '\t', ' \t  \t', '\n'])
def test_blank_lines_give_empty_command(line):
    cmd = parse(line)
    assert cmd.name == ''
    assert cmd.arguments == ()
    assert not cmd


def test_single_word():
    cmd = parse('ping')
    assert cmd.name == 'ping'
    assert cmd.arguments == ()


def test_whitespace_collapses():
    assert parse('a   b') == parse('a b')
    assert parse('  a \t b  ') == Command('a', ['b'])


def test_quotes_keep_whitespace():
    cmd = parse('a "b c"')
    assert cmd.name == 'a'
    assert cmd.arguments == ('b c',)


def test_escaped_quotes_are_literal():
    assert parse('a \\"b\\"').arguments == ('"b"',)


def test_escaped_backslash():
    assert parse('a \\\\b').arguments == ('\\b',)


def test_escaped_space_joins_words():
    assert split('Augment\\ this x') == ['Augment this', 'x']


def test_quoted_text_joins_adjacent_text():
    assert split('Augment\\ this  "string"_\\"battle\\" ') == \
        ['Augment this', 'string_"battle"']


def test_sendmsg():
    cmd = parse('sendmsg joe "I say \\"hi\\" to you!"')
    assert cmd.name == 'sendmsg'
    assert cmd.arguments == ('joe', 'I say "hi" to you!')


def test_mixed_arguments():
    words = split('hello world \\"this is\\" a "quoted \\"string\\""')
    assert words == ['hello', 'world', '"this', 'is"', 'a',
                     'quoted "string"']


def test_quoted_name():
    cmd = parse('"send msg" joe')
    assert cmd.name == 'send msg'
    assert cmd.arguments == ('joe',)


def test_empty_quotes_produce_no_word():
    assert split('a "" b') == ['a', 'b']
    assert split('""') == []


def test_punctuation_is_literal():
    assert split("it's a-b c=d 'x'") == ["it's", 'a-b', 'c=d', "'x'"]


def test_unicode_whitespace_separates():
    assert split('a\xa0b\u3000c') == ['a', 'b', 'c']


def test_unterminated_quote_is_recovered():
    cmd = parse('a "b')
    assert cmd.name == 'a'
    assert cmd.arguments == ('b',)
    assert split('a "b  c') == ['a', 'b  c']


def test_trailing_escape_is_dropped():
    assert split('a b\\') == ['a', 'b']
    assert split('a "b\\') == ['a', 'b']
    assert split('\\') == []


def test_parsing_is_stable():
    line = 'cmd "x y" \\\\z'
    assert parse(line) == parse(line)
    assert parse(line) is not parse(line)


def test_strict_accepts_wellformed_lines():
    assert parse('a "b c"', strict=True) == Command('a', ['b c'])


def test_strict_unterminated_quote():
    with pytest.raises(UnterminatedQuoteError):
        parse('a "b', strict=True)


def test_strict_trailing_escape():
    with pytest.raises(TrailingEscapeError):
        parse('a "b\\', strict=True)


@pytest.mark.parametrize('line', ['', '   ', '""'])
def test_strict_empty(line):
    with pytest.raises(EmptyCommandError):
        parse(line, strict=True)


def test_strict_split_allows_empty_lines():
    assert split('  ', strict=True) == []


def test_parse_errors_are_value_errors():
    with pytest.raises(ValueError):
        split('"', strict=True)
    assert issubclass(EmptyCommandError, ParseError)
