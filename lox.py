"""
Lox Language Interpreter

This is the main entry point for the Lox language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Exit codes:
    0   success
    64  command line misuse
    65  scan, parse or runtime error in the script

Set the ``LOXDEBUG`` environment variable to print the tokens and the AST
before a script runs.
"""
import os
import sys

from loxlang.exceptions import LoxException, ParseException, ScanException
from loxlang.interpreter import Interpreter
from loxlang.lexer import scan
from loxlang.nodes import format_node
from loxlang.parser import Parser
from loxlang.tokens import TokenType

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_DATAERR = 65


def print_usage(stream=None):
    """
    Print usage.
    """
    print("Usage: lox [script]", file=stream)
    print("  script      run a Lox source file; omit it to start the REPL", file=stream)
    print("  -h, --help  show this message", file=stream)


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    for stmt in ast:
        print(format_node(stmt))
    print(" ")


def run_source(source: str, interpreter: Interpreter, file: str) -> None:
    """
    Scan, parse and execute one chunk of source against ``interpreter``.

    Raises:
        LoxException: The first scan, parse or runtime error.
    """
    tokens = scan(source, file)
    parser = Parser(tokens, file)
    ast = parser.parse()

    if os.environ.get('LOXDEBUG'):
        debug_print_tokens_ast(tokens, ast)

    interpreter.interpret(ast)


def run_script(script_name: str) -> int:
    """
    Run a Lox script and return the process exit code.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        run_source(code, Interpreter(script_name), script_name)
    except LoxException as e:
        print(e, file=sys.stderr)
        return EXIT_DATAERR
    return EXIT_OK


def run_repl():
    """
    Run the interactive REPL
    """
    print("Lox Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    while True:
        try:
            prompt = "> " if not buffer else ". "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                run_source(source, interpreter, "<stdin>")
                buffer.clear()
            except ParseException as e:
                # A statement cut off by the end of input is still being typed
                if e.token.type is TokenType.EOF:
                    continue
                print(e, file=sys.stderr)
                buffer.clear()
            except ScanException as e:
                # An open string literal continues on the next line
                if e.incomplete:
                    continue
                print(e, file=sys.stderr)
                buffer.clear()
            except LoxException as e:
                print(e, file=sys.stderr)
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return the usage exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return EXIT_OK
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return EXIT_OK
    if len(args) == 1:
        return run_script(args[0])
    print_usage(sys.stderr)
    return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main(sys.argv))
