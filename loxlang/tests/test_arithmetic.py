"""
Tests for arithmetic, comparison and equality in Lox Language.
"""
import pytest

from loxlang.exceptions import LoxRuntimeException, OperandTypeException
from loxlang.interpreter import Interpreter, stringify

from loxlang.tests.utils import parse_source, printed, run_source


def test_precedence(capsys):
    run_source("print 1 + 2 * 3;\nprint (1 + 2) * 3;")
    assert printed(capsys) == ['7', '9']


def test_left_associative_subtraction_and_division(capsys):
    run_source("print 10 - 2 - 3;\nprint 16 / 4 / 2;")
    assert printed(capsys) == ['5', '2']


def test_fractional_results(capsys):
    run_source("print 7 / 2;\nprint 0.1 + 0.2 > 0.3;\nprint 1.5 * 2;")
    assert printed(capsys) == ['3.5', 'true', '3']


def test_string_concatenation(capsys):
    run_source('var greeting = "hello" + ", " + "world";\nprint greeting;')
    assert printed(capsys) == ['hello, world']


def test_comparisons(capsys):
    run_source(
        "print 1 < 2;\n"
        "print 2 <= 2;\n"
        "print 3 > 4;\n"
        "print 4 >= 5;\n"
    )
    assert printed(capsys) == ['true', 'true', 'false', 'false']


def test_equality_is_strict(capsys):
    run_source(
        "print 1 == 1;\n"
        'print "a" == "a";\n'
        "print nil == nil;\n"
        "print 1 == true;\n"
        'print 0 == "0";\n'
        "print nil == false;\n"
        "print 1 != 2;\n"
        "print true != true;\n"
    )
    assert printed(capsys) == [
        'true', 'true', 'true', 'false', 'false', 'false', 'true', 'false',
    ]


def test_operands_evaluate_left_to_right(capsys):
    run_source(
        "var log = \"\";\n"
        "var total = (log = log + \"L\") == (log = log + \"R\");\n"
        "print log;\n"
    )
    assert printed(capsys) == ['LR']


@pytest.mark.parametrize("source", [
    '"a" - 1;',
    '1 * "b";',
    'true / 2;',
    'nil < 1;',
    '"a" >= "b";',
    '1 + "a";',
    'true + false;',
])
def test_non_numeric_operands_raise(source):
    ast = parse_source(source)
    interpreter = Interpreter('<test>')
    with pytest.raises(OperandTypeException) as exc_info:
        interpreter.interpret(ast)
    assert exc_info.value.line == 1
    assert exc_info.value.location == "interpreter"


def test_type_error_message_shows_expression():
    ast = parse_source('var x = "s";\nprint x - 1;')
    with pytest.raises(OperandTypeException) as exc_info:
        Interpreter('<test>').interpret(ast)
    assert "(x - 1)" in exc_info.value.message
    assert exc_info.value.line == 2


def test_division_by_zero():
    ast = parse_source("print 1 / 0;")
    with pytest.raises(LoxRuntimeException, match="division by zero"):
        Interpreter('<test>').interpret(ast)


def test_stringify():
    assert stringify(None) == "nil"
    assert stringify(True) == "true"
    assert stringify(False) == "false"
    assert stringify(3.0) == "3"
    assert stringify(-0.5) == "-0.5"
    assert stringify("text") == "text"
