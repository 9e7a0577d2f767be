"""Errors.

Every failure in the pipeline is raised as a subclass of
:class:`LoxException`, carrying the component that detected it, a short
message and the source line. Nothing in the core catches these; they travel
up to the caller, which decides how to report them.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class LoxException(Exception):
    """
    Base error for scan, parse and runtime failures.
    """
    def __init__(self, location, message, line=None, file=None):
        self.location = location
        self.message = message
        self.line = line
        self.file = file
        text = f"[line {line}] Error {location}: {message}"
        if file is not None:
            text += f" in {file}"
        super().__init__(text)


class ScanException(LoxException):
    """
    Error for source text the scanner cannot tokenize.

    ``incomplete`` marks errors caused by the source ending too early, such
    as a string literal that is still open.
    """
    def __init__(self, message, line=None, file=None, incomplete=False):
        self.incomplete = incomplete
        super().__init__("scanner", message, line, file)


class ParseException(LoxException):
    """
    Error for token sequences that do not match the grammar.
    """
    def __init__(self, message, token, file=None):
        self.token = token
        super().__init__("parser", message, token.line, file)


class LoxRuntimeException(LoxException):
    """
    Error raised while executing a program.
    """
    def __init__(self, message, line=None, file=None, location="interpreter"):
        super().__init__(location, message, line, file)


class UndefinedVariableException(LoxRuntimeException):
    """
    Error for reads or writes of variables that were never declared.
    """
    def __init__(self, varname, action, line=None, file=None):
        self.varname = varname
        self.action = action
        message = f"cannot {action} variable {varname} which is not defined"
        super().__init__(message, line, file, location="environment")


class OperandTypeException(LoxRuntimeException):
    """
    Error for operators applied to values of the wrong kind.
    """
    pass
