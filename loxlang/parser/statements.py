"""Statement parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
handle declarations and the various statement forms in the language such
as blocks, conditionals, loops, and print statements.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.nodes import (
    BlockStmt,
    ExprStmt,
    IfStmt,
    PrintStmt,
    VarDecl,
    WhileStmt,
)
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


def parse_declaration(parser: 'Parser'):
    """
    Parse a declaration.

    Syntax:
        var <identifier> (= <expression>)? ;
        <statement>

    Args:
        parser: The parser instance.

    Returns:
        A VarDecl node or any statement node.
    """
    if parser.check(TokenType.VAR):
        return parser.parse_var_declaration()
    return parser.statement()


def parse_var_declaration(parser: 'Parser') -> VarDecl:
    """
    Parse a `var` variable declaration.

    Syntax:
        var <identifier> (= <expression>)? ;

    Args:
        parser: The parser instance.

    Returns:
        VarDecl: The declaration, with ``initializer`` None when omitted.
    """
    parser.eat(TokenType.VAR)
    name = parser.eat(TokenType.IDENTIFIER, "after 'var'")
    initializer = None
    if parser.check(TokenType.EQUAL):
        parser.advance()
        initializer = parser.expr()
    parser.eat(TokenType.SEMICOLON, "after variable declaration")
    return VarDecl(name, initializer)


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Syntax:
        <statement>

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    tok = parser.curr_token
    if tok.type is TokenType.IF:
        return parser.parse_if()
    elif tok.type is TokenType.WHILE:
        return parser.parse_while()
    elif tok.type is TokenType.LBRACE:
        return parser.block()
    elif tok.type is TokenType.PRINT:
        return parser.parse_print()
    return parser.parse_expression_statement()


def parse_block(parser: 'Parser') -> BlockStmt:
    """
    Parse a block of declarations enclosed in braces.

    Syntax:
        { <declaration>* }

    Args:
        parser: The parser instance.

    Returns:
        BlockStmt: The block with its statements in source order.
    """
    tok = parser.eat(TokenType.LBRACE)
    statements = []
    while not parser.check(TokenType.RBRACE, TokenType.EOF):
        statements.append(parser.declaration())
    parser.eat(TokenType.RBRACE, "after block")
    return BlockStmt(tuple(statements), tok.line)


def parse_print(parser: 'Parser') -> PrintStmt:
    """
    Parse a 'print' statement.

    Syntax:
        print <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        PrintStmt: The print node.
    """
    tok = parser.eat(TokenType.PRINT)
    expr_node = parser.expr()
    parser.eat(TokenType.SEMICOLON, "after value")
    return PrintStmt(expr_node, tok.line)


def parse_if(parser: 'Parser') -> IfStmt:
    """
    Parse a conditional 'if' statement with an optional else branch.

    An ``else`` binds to the nearest preceding ``if``.

    Syntax:
        if ( <condition> ) <statement> (else <statement>)?

    Args:
        parser: The parser instance.

    Returns:
        IfStmt: The conditional node.
    """
    tok = parser.eat(TokenType.IF)
    parser.eat(TokenType.LPAREN, "after 'if'")
    condition = parser.expr()
    parser.eat(TokenType.RPAREN, "after if condition")
    then_branch = parser.statement()

    else_branch = None
    if parser.check(TokenType.ELSE):
        parser.advance()
        else_branch = parser.statement()

    return IfStmt(condition, then_branch, else_branch, tok.line)


def parse_while(parser: 'Parser') -> WhileStmt:
    """
    Parse a 'while' loop.

    Syntax:
        while ( <condition> ) <statement>

    Args:
        parser: The parser instance.

    Returns:
        WhileStmt: The loop node.
    """
    tok = parser.eat(TokenType.WHILE)
    parser.eat(TokenType.LPAREN, "after 'while'")
    condition = parser.expr()
    parser.eat(TokenType.RPAREN, "after while condition")
    body = parser.statement()
    return WhileStmt(condition, body, tok.line)


def parse_expression_statement(parser: 'Parser') -> ExprStmt:
    """
    Parse an expression used as a statement.

    Syntax:
        <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        ExprStmt: The expression statement node.
    """
    line = parser.curr_token.line
    expr_node = parser.expr()
    parser.eat(TokenType.SEMICOLON, "after expression")
    return ExprStmt(expr_node, line)
