"""Lexer for Lox.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, source text, converted literal and source line number.

Tokens cover punctuation (with the two-character comparison forms), reserved
words, identifiers, string and number literals. Whitespace and ``//`` line
comments are skipped, while every newline (including those inside string
literals) advances the line counter so reported lines stay accurate. Any
failure is fatal: no partial token list is ever returned.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from loxlang.exceptions import ScanException
from loxlang.tokens import KEYWORDS, Token, TokenType


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Literals
    ('STRING',       r'"[^"]*"'),
    ('UNTERMINATED', r'"[^"]*'),
    ('NUMBER',       r'\d[\d.]*'),

    # Keywords and identifiers
    ('WORD',         r'[A-Za-z_][A-Za-z0-9_]*'),

    # Comments
    ('COMMENT',      r'//[^\n]*'),

    # Punctuation, two-character forms first
    ('OPERATOR',     r'!=|==|>=|<=|[(){},.\-+;/*!=<>]'),

    # Miscellaneous
    ('NEWLINE',      r'\n'),
    ('SKIP',         r'[ \r\t]+'),
    ('MISMATCH',     r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


def scan(source: str, file: str | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        source (str): The source code to tokenize.
        file (str): Optional script name used in error messages.

    Returns:
        list[Token]: The tokens in source order, terminated by one ``EOF``.

    Raises:
        ScanException: On an unterminated string, a malformed number or a
            character that starts no token.
    """
    tokens: list[Token] = []
    line_num = 1

    for match_obj in TOKEN_REGEX.finditer(source):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'NEWLINE':
            line_num += 1
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'MISMATCH':
            raise ScanException(f"failed to scan token {value!r}", line_num, file)
        if kind == 'UNTERMINATED':
            raise ScanException("unterminated string", line_num, file, incomplete=True)

        if kind == 'STRING':
            tokens.append(Token(TokenType.STRING, value, value[1:-1], line_num))
            line_num += value.count('\n')
        elif kind == 'NUMBER':
            try:
                number = float(value)
            except ValueError:
                raise ScanException(
                    f"invalid number literal {value!r}", line_num, file
                ) from None
            tokens.append(Token(TokenType.NUMBER, value, number, line_num))
        elif kind == 'WORD':
            keyword = KEYWORDS.get(value.upper(), TokenType.IDENTIFIER)
            tokens.append(Token(keyword, value, None, line_num))
        else:
            tokens.append(Token(TokenType(value), value, None, line_num))

    tokens.append(Token(TokenType.EOF, '', None, line_num))
    return tokens
