"""Parser package for Lox.

This package splits the parser functionality into multiple modules to
keep the code organized. The :class:`Parser` class is exposed at the
package level for convenience, together with :func:`parse` for callers
that only need the statement list.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .parser import Parser


def parse(tokens, file=None) -> list:
    """
    Parse a token list into a list of statements.
    """
    return Parser(tokens, file).parse()


__all__ = ["Parser", "parse"]
