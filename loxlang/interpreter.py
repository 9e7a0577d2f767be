"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic, comparison and logical expressions, variables, block scoping, conditionals, loops,
and print statements.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via the `execute()` method, and expressions are evaluated using
`eval_expr()`. Both take the environment to run against and dispatch with a single `match`
over the node dataclasses.

2. Environment
The interpreter owns a global `Environment`, created once and holding the native `clock`
binding. Every block runs in a fresh child environment whose parent is the environment
active when the block was entered, so declarations inside a block never leak outward.

3. Expression Evaluation
Operands are evaluated left to right. `nil` and `false` are falsy and every other value is
truthy. Equality never coerces between kinds. Arithmetic and ordering operators require
numbers (`+` also joins two strings); anything else raises `OperandTypeException`.
`and`/`or` short-circuit and yield the operand that decided the result.

4. Control Flow
Control constructs include:
- `if`/`else`: executes a branch based on the truthiness of the condition.
- `while`: repeatedly executes its body while the condition holds. There is no iteration
  limit.
- `block`: executes a nested sequence of declarations in its own scope.

5. Error Handling
Runtime errors, such as undefined variables or operands of the wrong kind, are raised as
typed exceptions with line numbers and file context. Nothing is caught here: the first error
stops the program.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import time
from typing import Any, Callable, TextIO

from loxlang.environment import Environment
from loxlang.exceptions import LoxRuntimeException, OperandTypeException
from loxlang.nodes import (
    Assignment,
    Binary,
    BlockStmt,
    ExprStmt,
    Grouping,
    IfStmt,
    Literal,
    Logical,
    PrintStmt,
    Unary,
    Variable,
    VarDecl,
    WhileStmt,
    format_node,
)
from loxlang.operations import Op


class NativeFunction:
    """Runtime representation of a function provided by the host."""

    def __init__(self, name: str, arity: int, func: Callable[..., Any]):
        self.name = name
        self.arity = arity
        self.func = func

    def __call__(self, *args):
        if len(args) != self.arity:
            raise TypeError(
                f"{self.name}() expects {self.arity} arguments but got {len(args)}"
            )
        return self.func(*args)

    def __repr__(self) -> str:
        return f"<native fn {self.name}>"


def is_truthy(value: Any) -> bool:
    """
    Return the truthiness of a value: only ``nil`` and ``false`` are falsy.
    """
    return value is not None and value is not False


def is_equal(lhs: Any, rhs: Any) -> bool:
    """
    Compare two values without coercing between kinds.
    """
    return type(lhs) is type(rhs) and lhs == rhs


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def stringify(value: Any) -> str:
    """
    Render a value the way ``print`` shows it.
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, str):
        return value
    return repr(value)


class Interpreter:
    """Tree-walk interpreter for Lox."""

    def __init__(self, file: str = "<stdin>", output: TextIO | None = None):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Script name used in error messages.
            output (TextIO): Stream ``print`` writes to. Defaults to stdout.
        """
        self.file = file
        self.output = output
        self.globals = Environment(file=file)
        self.globals.define("clock", NativeFunction("clock", 0, time.time))

    def interpret(self, statements: list, environment: Environment | None = None) -> None:
        """
        Execute a program's top-level statements in order.

        Parameters:
            statements (list): Statement nodes produced by the parser.
            environment (Environment): Root scope. Defaults to the globals.
        """
        if environment is None:
            environment = self.globals
        for stmt in statements:
            try:
                self.execute(stmt, environment)
            except RecursionError:
                line = stmt.name.line if isinstance(stmt, VarDecl) else stmt.line
                raise LoxRuntimeException(
                    "expression nested too deeply", line, self.file
                ) from None

    def execute_block(self, statements, environment: Environment) -> None:
        """
        Execute ``statements`` in a new scope enclosed by ``environment``.
        """
        scope = environment.child()
        for stmt in statements:
            self.execute(stmt, scope)

    def execute(self, stmt, env: Environment) -> None:
        """
        Execute one statement for its side effects.

        Raises:
            LoxRuntimeException: For runtime failures inside the statement.
            TypeError: For objects that are not statement nodes.
        """
        match stmt:
            case VarDecl(name, initializer):
                value = None if initializer is None else self.eval_expr(initializer, env)
                env.define(name.lexeme, value)

            case ExprStmt(expr_node, _):
                self.eval_expr(expr_node, env)

            case PrintStmt(expr_node, _):
                value = self.eval_expr(expr_node, env)
                print(stringify(value), file=self.output)

            case IfStmt(condition, then_branch, else_branch, _):
                if is_truthy(self.eval_expr(condition, env)):
                    self.execute(then_branch, env)
                elif else_branch is not None:
                    self.execute(else_branch, env)

            case WhileStmt(condition, body, _):
                while is_truthy(self.eval_expr(condition, env)):
                    self.execute(body, env)

            case BlockStmt(statements, _):
                self.execute_block(statements, env)

            case _:
                raise TypeError(f"Unknown statement type: {stmt!r}")

    def eval_expr(self, node, env: Environment) -> Any:
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node: An expression node.
            env (Environment): The scope variables are resolved in.

        Returns:
            The evaluated result of the expression.

        Raises:
            UndefinedVariableException: If a variable is read or assigned before declaration.
            OperandTypeException: If an operator is applied to values of the wrong kind.
            LoxRuntimeException: On division by zero.
        """
        match node:
            case Literal(value):
                return value

            case Variable(name):
                return env.get(name)

            case Grouping(inner):
                return self.eval_expr(inner, env)

            case Assignment(target, value_node):
                value = self.eval_expr(value_node, env)
                env.set(target, value)
                return value

            case Logical(left, op, right, _):
                lhs = self.eval_expr(left, env)
                if op == Op.OR:
                    if is_truthy(lhs):
                        return lhs
                elif not is_truthy(lhs):
                    return lhs
                return self.eval_expr(right, env)

            case Unary(op, operand_node, line):
                operand = self.eval_expr(operand_node, env)
                if op == Op.NOT:
                    return not is_truthy(operand)
                if not is_number(operand):
                    raise OperandTypeException(
                        f"operand of unary '-' must be a number: {format_node(node)}",
                        line,
                        self.file,
                    )
                return -operand

            case Binary(left, op, right, line):
                lhs = self.eval_expr(left, env)
                rhs = self.eval_expr(right, env)
                return self._binary(node, op, lhs, rhs, line)

        raise TypeError(f"Invalid expression node: {node!r}")

    def _binary(self, node: Binary, op: Op, lhs: Any, rhs: Any, line: int) -> Any:
        """
        Apply a binary operator to already evaluated operands.
        """
        match op:
            case Op.EQ:
                return is_equal(lhs, rhs)
            case Op.NE:
                return not is_equal(lhs, rhs)
            case Op.ADD:
                if isinstance(lhs, str) and isinstance(rhs, str):
                    return lhs + rhs
                if not (is_number(lhs) and is_number(rhs)):
                    raise OperandTypeException(
                        f"operands of '+' must be two numbers or two strings: "
                        f"{format_node(node)}",
                        line,
                        self.file,
                    )
                return lhs + rhs

        if not (is_number(lhs) and is_number(rhs)):
            raise OperandTypeException(
                f"operands of '{op.symbol}' must be numbers: {format_node(node)}",
                line,
                self.file,
            )

        match op:
            case Op.SUB:
                return lhs - rhs
            case Op.MUL:
                return lhs * rhs
            case Op.DIV:
                if rhs == 0:
                    raise LoxRuntimeException(
                        f"division by zero: {format_node(node)}", line, self.file
                    )
                return lhs / rhs
            case Op.GT:
                return lhs > rhs
            case Op.GE:
                return lhs >= rhs
            case Op.LT:
                return lhs < rhs
            case Op.LE:
                return lhs <= rhs
        raise LoxRuntimeException(f"unknown binary operator '{op.symbol}'", line, self.file)
