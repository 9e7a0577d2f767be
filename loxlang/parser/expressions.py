"""
Expression parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity. Binary levels loop and fold to the
left; assignment recurses and so binds to the right.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.nodes import (
    Assignment,
    Binary,
    Grouping,
    Literal,
    Logical,
    Unary,
    Variable,
)
from loxlang.operations import BINARY_OPS, LOGICAL_OPS, UNARY_OPS
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


# ---- Highest precedence ----

def parse_primary(parser: 'Parser'):
    """Parse a literal, a variable reference, or a parenthesized expression."""
    tok = parser.curr_token

    if tok.type in (TokenType.NUMBER, TokenType.STRING):
        parser.advance()
        return Literal(tok.literal)

    if tok.type in (TokenType.TRUE, TokenType.FALSE):
        parser.advance()
        return Literal(tok.type is TokenType.TRUE)

    if tok.type is TokenType.NIL:
        parser.advance()
        return Literal(None)

    if tok.type is TokenType.IDENTIFIER:
        parser.advance()
        return Variable(tok)

    if tok.type is TokenType.LPAREN:
        parser.advance()
        inner = parser.expr()
        parser.eat(TokenType.RPAREN, "after expression")
        return Grouping(inner)

    raise parser.error(f"expected expression but got '{tok.type.value}'")


def parse_unary(parser: 'Parser'):
    """Parse prefix negation ('-') and logical not ('!')."""
    tok = parser.curr_token
    if tok.type in UNARY_OPS:
        parser.advance()
        return Unary(UNARY_OPS[tok.type], parser.unary(), tok.line)
    return parser.primary()


def parse_factor(parser: 'Parser'):
    """Parse multiplication and division expressions."""
    result = parser.unary()
    while parser.check(TokenType.STAR, TokenType.SLASH):
        op_tok = parser.advance()
        result = Binary(result, BINARY_OPS[op_tok.type], parser.unary(), op_tok.line)
    return result


def parse_term(parser: 'Parser'):
    """Parse addition and subtraction expressions."""
    result = parser.factor()
    while parser.check(TokenType.PLUS, TokenType.MINUS):
        op_tok = parser.advance()
        result = Binary(result, BINARY_OPS[op_tok.type], parser.factor(), op_tok.line)
    return result


def parse_comparison(parser: 'Parser'):
    """Parse comparison expressions (<, >, <=, >=)."""
    result = parser.term()
    while parser.check(
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
    ):
        op_tok = parser.advance()
        result = Binary(result, BINARY_OPS[op_tok.type], parser.term(), op_tok.line)
    return result


def parse_equality(parser: 'Parser'):
    """Parse equality expressions (==, !=)."""
    result = parser.comparison()
    while parser.check(TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL):
        op_tok = parser.advance()
        result = Binary(result, BINARY_OPS[op_tok.type], parser.comparison(), op_tok.line)
    return result


def parse_logic_and(parser: 'Parser'):
    """Parse logical AND expressions using the 'and' keyword."""
    result = parser.equality()
    while parser.check(TokenType.AND):
        tok = parser.advance()
        result = Logical(result, LOGICAL_OPS[tok.type], parser.equality(), tok.line)
    return result


def parse_logic_or(parser: 'Parser'):
    """Parse logical OR expressions using the 'or' keyword."""
    result = parser.logic_and()
    while parser.check(TokenType.OR):
        tok = parser.advance()
        result = Logical(result, LOGICAL_OPS[tok.type], parser.logic_and(), tok.line)
    return result


def parse_assignment(parser: 'Parser'):
    """
    Parse an assignment, or the ``or`` expression it would otherwise be.

    The target is parsed as an ordinary expression first; only when an '='
    follows is it checked to be a plain variable reference.
    """
    target = parser.logic_or()
    if parser.check(TokenType.EQUAL):
        equals = parser.advance()
        value = parser.assignment()
        if isinstance(target, Variable):
            return Assignment(target.name, value)
        raise parser.error("invalid assignment target", equals)
    return target


# ---- Entry point ----

def parse_expr(parser: 'Parser'):
    """Parse an expression starting from the lowest-precedence rule."""
    return parser.assignment()
