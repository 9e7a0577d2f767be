"""Lox language package.

Source text flows through four stages: :func:`loxlang.lexer.scan` produces
tokens, :class:`loxlang.parser.Parser` builds the statement list,
:class:`loxlang.environment.Environment` models nested scopes and
:class:`loxlang.interpreter.Interpreter` walks the tree.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
