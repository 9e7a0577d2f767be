"""Environment.

A scope's variable bindings plus a link to the scope that encloses it.
Lookups and assignments that miss locally walk outward through the
``enclosing`` chain; missing at the outermost scope raises
:class:`UndefinedVariableException`. Inner scopes can read and mutate outer
bindings, outer scopes never see inner ones.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import Any, Optional

from loxlang.exceptions import UndefinedVariableException
from loxlang.tokens import Token


class Environment:
    """Name to value bindings chained to an enclosing scope."""

    def __init__(self, enclosing: Optional[Environment] = None, file: str | None = None):
        """
        Initialize an empty scope.

        Parameters:
            enclosing (Environment): The parent scope, or None for globals.
            file (str): Script name used in error messages.
        """
        if file is None and enclosing is not None:
            file = enclosing.file
        self.values: dict[str, Any] = {}
        self.enclosing = enclosing
        self.file = file

    def __contains__(self, name: str) -> bool:
        """
        Return True when ``name`` is bound in this scope or any enclosing one.
        """
        return self._owner(name) is not None

    def _owner(self, name: str) -> Optional[Environment]:
        """
        Return the nearest environment whose own bindings hold ``name``.
        """
        env = self
        while env is not None:
            if name in env.values:
                return env
            env = env.enclosing
        return None

    def child(self) -> Environment:
        """
        Create a new scope enclosed by this one.
        """
        return Environment(self)

    def define(self, name: str, value: Any) -> None:
        """
        Bind ``name`` in this scope, shadowing any outer binding.
        """
        self.values[name] = value

    def get(self, token: Token) -> Any:
        """
        Look up the value bound to ``token.lexeme``.

        Raises:
            UndefinedVariableException: If no scope in the chain binds the name.
        """
        owner = self._owner(token.lexeme)
        if owner is None:
            raise UndefinedVariableException(token.lexeme, "get", token.line, self.file)
        return owner.values[token.lexeme]

    def set(self, token: Token, value: Any) -> None:
        """
        Rebind ``token.lexeme`` in the nearest scope that already declares it.

        Raises:
            UndefinedVariableException: If no scope in the chain binds the name.
        """
        owner = self._owner(token.lexeme)
        if owner is None:
            raise UndefinedVariableException(token.lexeme, "set", token.line, self.file)
        owner.values[token.lexeme] = value
