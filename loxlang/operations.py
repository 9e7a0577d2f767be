"""Shared definitions for AST operator identifiers.

This module centralizes the operator labels used by the parser and
interpreter for unary, binary and logical nodes in the abstract syntax tree.
Keeping them in one place prevents the two components from drifting apart.
"""

from enum import Enum

from loxlang.tokens import TokenType


class Op(str, Enum):
    """
    Enumeration of supported AST operators, valued by their source spelling.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    # Comparison
    EQ = "=="
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="

    # Unary
    NEG = "neg"
    NOT = "!"

    # Boolean
    AND = "and"
    OR = "or"

    @property
    def symbol(self) -> str:
        """
        Return the operator as written in source.
        """
        return "-" if self is Op.NEG else self.value

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.symbol


BINARY_OPS: dict[TokenType, Op] = {
    TokenType.PLUS: Op.ADD,
    TokenType.MINUS: Op.SUB,
    TokenType.STAR: Op.MUL,
    TokenType.SLASH: Op.DIV,
    TokenType.EQUAL_EQUAL: Op.EQ,
    TokenType.BANG_EQUAL: Op.NE,
    TokenType.GREATER: Op.GT,
    TokenType.GREATER_EQUAL: Op.GE,
    TokenType.LESS: Op.LT,
    TokenType.LESS_EQUAL: Op.LE,
}

UNARY_OPS: dict[TokenType, Op] = {
    TokenType.MINUS: Op.NEG,
    TokenType.BANG: Op.NOT,
}

LOGICAL_OPS: dict[TokenType, Op] = {
    TokenType.AND: Op.AND,
    TokenType.OR: Op.OR,
}


__all__ = ["BINARY_OPS", "LOGICAL_OPS", "Op", "UNARY_OPS"]
