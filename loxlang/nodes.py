"""AST node definitions.

Expressions and statements are immutable dataclasses. Each node owns its
children outright, so a parsed program is a plain tree that compares equal
to any other tree parsed from the same tokens. The interpreter dispatches on
node type with a single ``match`` per evaluator function.

:func:`format_node` renders a node back to readable, source-like text and is
used for debug output and error messages.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from loxlang.operations import Op
from loxlang.tokens import Token


# ----------------------------------------------------------------------
# Expressions
# ----------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Literal:
    value: Any

    # 1.0 == True in Python, but a number literal is not a boolean literal
    def __eq__(self, other):
        if not isinstance(other, Literal):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self):
        return hash((type(self.value), self.value))


@dataclass(frozen=True)
class Variable:
    name: Token


@dataclass(frozen=True)
class Unary:
    op: Op
    operand: Expr
    line: int


@dataclass(frozen=True)
class Binary:
    left: Expr
    op: Op
    right: Expr
    line: int


@dataclass(frozen=True)
class Logical:
    left: Expr
    op: Op
    right: Expr
    line: int


@dataclass(frozen=True)
class Grouping:
    inner: Expr


@dataclass(frozen=True)
class Assignment:
    target: Token
    value: Expr


Expr = Union[Literal, Variable, Unary, Binary, Logical, Grouping, Assignment]


# ----------------------------------------------------------------------
# Statements
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class VarDecl:
    name: Token
    initializer: Optional[Expr]


@dataclass(frozen=True)
class ExprStmt:
    expr: Expr
    line: int


@dataclass(frozen=True)
class PrintStmt:
    expr: Expr
    line: int


@dataclass(frozen=True)
class IfStmt:
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt]
    line: int


@dataclass(frozen=True)
class WhileStmt:
    condition: Expr
    body: Stmt
    line: int


@dataclass(frozen=True)
class BlockStmt:
    statements: tuple[Stmt, ...]
    line: int


Stmt = Union[VarDecl, ExprStmt, PrintStmt, IfStmt, WhileStmt, BlockStmt]


def _format_literal(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_node(node, indent: int = 0) -> str:
    """
    Convert an AST node back to a readable string for debugging.

    Binary and logical expressions are fully parenthesized so the tree shape
    is visible, e.g. ``1 + 2 * 3`` renders as ``(1 + (2 * 3))``.

    Args:
        node: An expression or statement node.
        indent (int): Nesting depth used when rendering block statements.

    Returns:
        str: A string representation of the node.
    """
    pad = "    " * indent
    match node:
        case Literal(value):
            return _format_literal(value)
        case Variable(name):
            return name.lexeme
        case Unary(op, operand, _):
            return f"{op.symbol}{format_node(operand)}"
        case Binary(left, op, right, _) | Logical(left, op, right, _):
            return f"({format_node(left)} {op.symbol} {format_node(right)})"
        case Grouping(inner):
            return f"({format_node(inner)})"
        case Assignment(target, value):
            return f"{target.lexeme} = {format_node(value)}"
        case VarDecl(name, None):
            return f"{pad}var {name.lexeme};"
        case VarDecl(name, initializer):
            return f"{pad}var {name.lexeme} = {format_node(initializer)};"
        case ExprStmt(expr, _):
            return f"{pad}{format_node(expr)};"
        case PrintStmt(expr, _):
            return f"{pad}print {format_node(expr)};"
        case IfStmt(condition, then_branch, else_branch, _):
            text = f"{pad}if ({format_node(condition)})\n{format_node(then_branch, indent + 1)}"
            if else_branch is not None:
                text += f"\n{pad}else\n{format_node(else_branch, indent + 1)}"
            return text
        case WhileStmt(condition, body, _):
            return f"{pad}while ({format_node(condition)})\n{format_node(body, indent + 1)}"
        case BlockStmt(statements, _):
            inner = [format_node(stmt, indent + 1) for stmt in statements]
            return "\n".join([f"{pad}{{", *inner, f"{pad}}}"])
    raise TypeError(f"Invalid AST node: {node!r}")


__all__ = [
    "Assignment",
    "Binary",
    "BlockStmt",
    "Expr",
    "ExprStmt",
    "Grouping",
    "IfStmt",
    "Literal",
    "Logical",
    "PrintStmt",
    "Stmt",
    "Unary",
    "Variable",
    "VarDecl",
    "WhileStmt",
    "format_node",
]
