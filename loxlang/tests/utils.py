"""
Utility functions shared across Lox Language tests.
"""
from loxlang.interpreter import Interpreter
from loxlang.lexer import scan
from loxlang.parser import Parser


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    tokens = scan(source, "<test>")
    parser = Parser(tokens, "<test>")
    return parser.parse()


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.interpret(parse_source(source))
    return interpreter


def printed(capsys) -> list[str]:
    """
    Return the lines written to stdout so far.
    """
    return capsys.readouterr().out.splitlines()
