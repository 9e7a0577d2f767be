"""Token definitions.

The closed set of token kinds produced by the scanner and the immutable
:class:`Token` record handed to the parser. Token kinds are string-valued so
they print as the text they stand for.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TokenType(str, Enum):
    """
    Enumeration of lexical token kinds.
    """

    # Single character
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # One or two characters
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Keywords
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    # Literals
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"

    EOF = "EOF"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer error messages.
        """
        return self.value


# Reserved words keyed by their upper-cased spelling.
KEYWORDS: dict[str, TokenType] = {
    kind.value.upper(): kind
    for kind in (
        TokenType.AND,
        TokenType.CLASS,
        TokenType.ELSE,
        TokenType.FALSE,
        TokenType.FUN,
        TokenType.FOR,
        TokenType.IF,
        TokenType.NIL,
        TokenType.OR,
        TokenType.PRINT,
        TokenType.RETURN,
        TokenType.SUPER,
        TokenType.THIS,
        TokenType.TRUE,
        TokenType.VAR,
        TokenType.WHILE,
    )
}


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a type, its source text and line number.

    Attributes:
        type (TokenType): The token kind.
        lexeme (str): The source text the token was scanned from.
        literal (Any): Converted payload for string and number tokens.
        line (int): 1-based source line.
    """
    type: TokenType
    lexeme: str
    literal: Any
    line: int

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        if self.literal is not None:
            return f"Token({self.type.name}, {self.literal!r}, line={self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, line={self.line})"


__all__ = ["KEYWORDS", "Token", "TokenType"]
