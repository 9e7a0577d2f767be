"""
Main parser entry point for Lox.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`loxlang.parser.expressions` and `loxlang.parser.statements`.

The parser keeps a cursor into the token list that only ever moves forward,
and stops at the first error: there is no recovery or synchronization.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.exceptions import ParseException
from loxlang.tokens import Token, TokenType

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Lox parser."""

    def __init__(self, tokens: list[Token], file: str | None = None):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with ``EOF``.
            file (str): The name of the script, used in error messages.
        """
        if not tokens or tokens[-1].type is not TokenType.EOF:
            line = tokens[-1].line if tokens else 1
            tokens = [*tokens, Token(TokenType.EOF, '', None, line)]
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file

    def check(self, *token_types: TokenType) -> bool:
        """
        Return True if the current token is one of ``token_types``.
        """
        return self.curr_token.type in token_types

    def advance(self) -> Token:
        """
        Move past the current token and return it. Never moves past ``EOF``.
        """
        tok = self.curr_token
        if tok.type is not TokenType.EOF:
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def eat(self, token_type: TokenType, context: str | None = None) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.
            context (str): Optional description of what was being parsed.

        Returns:
            Token: The consumed token.

        Raises:
            ParseException: If the token does not match the expected type.
        """
        if self.curr_token.type is token_type:
            return self.advance()

        act_type = self.curr_token.type
        act_value = self.curr_token.lexeme
        message = f"expected '{token_type.value}' but got '{act_type.value}'"
        if act_value and act_value != act_type.value:
            message += f" ({act_value})"
        if context:
            message += f" {context}"
        raise self.error(message)

    def error(self, message: str, token: Token | None = None) -> ParseException:
        """
        Build a parse error located at ``token`` (default: the current token).
        """
        return ParseException(message, token or self.curr_token, self.source_file)


    # Expression wrappers
    def expr(self):
        """
        Parse a full expression, starting at assignment.
        """
        return _expr.parse_expr(self)

    def assignment(self):
        """
        Parse a right-associative assignment or fall through to ``or``.
        """
        return _expr.parse_assignment(self)

    def logic_or(self):
        """
        Parse a logical OR expression.
        """
        return _expr.parse_logic_or(self)

    def logic_and(self):
        """
        Parse a logical AND expression.
        """
        return _expr.parse_logic_and(self)

    def equality(self):
        """
        Parse an equality expression using '==' or '!='.
        """
        return _expr.parse_equality(self)

    def comparison(self):
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def term(self):
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_term(self)

    def factor(self):
        """
        Parse a multiplication or division expression.
        """
        return _expr.parse_factor(self)

    def unary(self):
        """
        Parse a prefix '-' or '!' expression.
        """
        return _expr.parse_unary(self)

    def primary(self):
        """
        Parse a literal, variable, or parenthesized group.
        """
        return _expr.parse_primary(self)


    # Statement wrappers
    def declaration(self):
        """
        Parse a variable declaration or any other statement.
        """
        return _stmt.parse_declaration(self)

    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self):
        """
        Parse a block of declarations enclosed in braces.
        """
        return _stmt.parse_block(self)

    def parse_var_declaration(self):
        """
        Parse a 'var' declaration.
        """
        return _stmt.parse_var_declaration(self)

    def parse_print(self):
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_if(self):
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_while(self):
        """
        Parse a 'while' loop statement.
        """
        return _stmt.parse_while(self)

    def parse_expression_statement(self):
        """
        Parse an expression evaluated for its side effects.
        """
        return _stmt.parse_expression_statement(self)


    def parse(self) -> list:
        """
        Parse the full input into a list of statements.
        """
        statements = []
        while not self.check(TokenType.EOF):
            try:
                statements.append(self.declaration())
            except RecursionError:
                raise self.error("expression nested too deeply") from None
        return statements
