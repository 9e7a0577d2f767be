"""
Tests for the Lox Language scanner.
"""
import pytest

from loxlang.exceptions import ScanException
from loxlang.lexer import scan
from loxlang.tokens import KEYWORDS, Token, TokenType


def kinds(source: str) -> list[TokenType]:
    """
    Return just the token kinds scanned from ``source``.
    """
    return [tok.type for tok in scan(source)]


def test_single_character_punctuation():
    """
    Each single-character punctuation mark maps to its own kind.
    """
    assert kinds("(){},.-+;/*") == [
        TokenType.LPAREN,
        TokenType.RPAREN,
        TokenType.LBRACE,
        TokenType.RBRACE,
        TokenType.COMMA,
        TokenType.DOT,
        TokenType.MINUS,
        TokenType.PLUS,
        TokenType.SEMICOLON,
        TokenType.SLASH,
        TokenType.STAR,
        TokenType.EOF,
    ]


def test_one_or_two_character_operators():
    """
    '!', '=', '>' and '<' absorb a following '='.
    """
    assert kinds("! != = == > >= < <=") == [
        TokenType.BANG,
        TokenType.BANG_EQUAL,
        TokenType.EQUAL,
        TokenType.EQUAL_EQUAL,
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
        TokenType.EOF,
    ]
    assert kinds("a!=b") == [
        TokenType.IDENTIFIER,
        TokenType.BANG_EQUAL,
        TokenType.IDENTIFIER,
        TokenType.EOF,
    ]


def test_every_reserved_word():
    """
    Every reserved word scans to its keyword kind.
    """
    for spelling, kind in KEYWORDS.items():
        tokens = scan(spelling.lower())
        assert tokens[0].type is kind
        assert tokens[0].lexeme == spelling.lower()
        assert tokens[1].type is TokenType.EOF


def test_reserved_words_are_case_insensitive():
    """
    Reserved words match regardless of case; the lexeme keeps the source spelling.
    """
    tokens = scan("PRINT While")
    assert [t.type for t in tokens[:2]] == [TokenType.PRINT, TokenType.WHILE]
    assert tokens[0].lexeme == "PRINT"


def test_identifiers():
    """
    Words that are not reserved become identifiers.
    """
    tokens = scan("foo _bar baz9 printer")
    assert [t.type for t in tokens] == [TokenType.IDENTIFIER] * 4 + [TokenType.EOF]
    assert [t.lexeme for t in tokens[:4]] == ["foo", "_bar", "baz9", "printer"]


def test_number_literals():
    """
    Numbers are converted to floats.
    """
    tokens = scan("42 3.25")
    assert tokens[0] == Token(TokenType.NUMBER, "42", 42.0, 1)
    assert tokens[1] == Token(TokenType.NUMBER, "3.25", 3.25, 1)


def test_malformed_number_is_an_error():
    """
    A digit run with more than one dot cannot be converted.
    """
    with pytest.raises(ScanException) as exc_info:
        scan("1.2.3")
    assert "invalid number literal" in exc_info.value.message


def test_string_literal_keeps_raw_content():
    """
    Strings keep their content between the quotes with no escape processing.
    """
    tokens = scan(r'"hello\n world"')
    assert tokens[0].type is TokenType.STRING
    assert tokens[0].literal == r"hello\n world"


def test_multiline_string_reports_start_line():
    """
    A string spanning lines reports the line it started on, and the lines
    inside it still count for the tokens that follow.
    """
    tokens = scan('print\n"one\ntwo\nthree";')
    assert tokens[0].line == 1
    assert tokens[1].type is TokenType.STRING
    assert tokens[1].line == 2
    assert tokens[2].type is TokenType.SEMICOLON
    assert tokens[2].line == 4
    assert tokens[-1] == Token(TokenType.EOF, "", None, 4)


def test_unterminated_string():
    """
    A string missing its closing quote is fatal.
    """
    with pytest.raises(ScanException) as exc_info:
        scan('print "oops;\n')
    assert exc_info.value.message == "unterminated string"
    assert exc_info.value.location == "scanner"
    assert exc_info.value.line == 1


def test_line_comments_are_skipped():
    """
    '//' comments run to the end of the line and count the newline.
    """
    tokens = scan("// a comment with ; and \"quotes\nprint 1; // trailing\n")
    assert [t.type for t in tokens] == [
        TokenType.PRINT,
        TokenType.NUMBER,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]
    assert tokens[0].line == 2
    assert tokens[-1].line == 3


def test_slash_is_not_a_comment():
    """
    A single '/' is division.
    """
    assert kinds("4 / 2") == [
        TokenType.NUMBER,
        TokenType.SLASH,
        TokenType.NUMBER,
        TokenType.EOF,
    ]


def test_whitespace_and_line_numbers():
    """
    Spaces, tabs and carriage returns are skipped; newlines advance the line.
    """
    tokens = scan("var\r\n\tx\n\n=  1;")
    assert [(t.type, t.line) for t in tokens] == [
        (TokenType.VAR, 1),
        (TokenType.IDENTIFIER, 2),
        (TokenType.EQUAL, 4),
        (TokenType.NUMBER, 4),
        (TokenType.SEMICOLON, 4),
        (TokenType.EOF, 4),
    ]


def test_unknown_character():
    """
    A character that starts no token is fatal and reports its line.
    """
    with pytest.raises(ScanException) as exc_info:
        scan("var x = 1;\nx @ 2;")
    assert exc_info.value.line == 2
    assert "failed to scan token" in str(exc_info.value)
    assert str(exc_info.value).startswith("[line 2] Error scanner:")


def test_exactly_one_eof():
    """
    Every scan ends with a single EOF token, even for empty input.
    """
    assert scan("") == [Token(TokenType.EOF, "", None, 1)]
    tokens = scan("print 1;\n")
    assert [t.type for t in tokens].count(TokenType.EOF) == 1
    assert tokens[-1].type is TokenType.EOF
