"""Builtin registry contracts: arity, argument kinds and output."""

import io

import pytest

from monkey import run_source
from monkey.environment import Environment
from monkey.evaluator.core import Evaluator
from monkey.lexer import Lexer
from monkey.parser import Parser
from monkey.object import Integer, Array, Null, EvaluationError, Builtin


def _run(source, output=None):
    return run_source(source, output=output)


@pytest.mark.parametrize("source, expected", [
    ('len("")', 0),
    ('len("four")', 4),
    ('len("hello world")', 11),
    ("len([1, 2, 3])", 3),
    ("len([])", 0),
])
def test_len(source, expected):
    result = _run(source)
    assert isinstance(result, Integer)
    assert result.value == expected


@pytest.mark.parametrize("source, message", [
    ("len(1);", 'argument to "len" not supported. got Integer(1)'),
    ('len("one", "two");', "wrong number of arguments. got 2 want=1"),
    ("len();", "wrong number of arguments. got 0 want=1"),
    ('first("abc")', 'argument to "first" must be Array, got String("abc")'),
    ("last(1)", 'argument to "last" must be Array, got Integer(1)'),
    ("rest(true)", 'argument to "rest" must be Array, got Boolean(true)'),
    ("push(1, 1)", 'argument to "push" must be Array, got Integer(1)'),
    ("push([1])", "wrong number of arguments. got 1 want=2"),
    ("first([1], [2])", "wrong number of arguments. got 2 want=1"),
])
def test_builtin_contract_errors(source, message):
    result = _run(source)
    assert isinstance(result, EvaluationError)
    assert result.message == message


@pytest.mark.parametrize("source, expected", [
    ("first([1, 2, 3])", 1),
    ("last([1, 2, 3])", 3),
    ("first([])", None),
    ("last([])", None),
    ("rest([])", None),
])
def test_first_last_rest(source, expected):
    result = _run(source)
    if expected is None:
        assert isinstance(result, Null)
    else:
        assert result.value == expected


def test_rest_and_push_do_not_mutate():
    source = """
    let a = [1, 2, 3];
    let b = rest(a);
    let c = push(a, 4);
    [len(a), len(b), len(c), last(c)]
    """
    result = _run(source)
    assert isinstance(result, Array)
    assert [e.value for e in result.elements] == [3, 2, 4, 4]


def test_println_writes_to_injected_output():
    out = io.StringIO()
    result = _run('println("hello", 1, [true]); println()', output=out)
    assert isinstance(result, Null)
    assert out.getvalue() == "hello 1 [true]\n\n"


def test_puts_writes_each_argument_on_its_own_line():
    out = io.StringIO()
    _run('puts("a", 2, {"k": "v"})', output=out)
    assert out.getvalue() == "a\n2\n{k: v}\n"


def test_println_defaults_to_stdout(capsys):
    _run('println("to stdout")')
    assert capsys.readouterr().out == "to stdout\n"


def test_output_is_not_written_after_an_error():
    out = io.StringIO()
    result = _run('println(missing); println("after")', output=out)
    assert isinstance(result, EvaluationError)
    assert out.getvalue() == ""


def test_builtins_resolve_by_name():
    result = _run("len")
    assert isinstance(result, Builtin)
    assert result.name == "len"


def test_registry_can_be_extended():
    evaluator = Evaluator()
    evaluator.register_builtin("double", lambda *a: Integer(a[0].value * 2))
    program = Parser(Lexer("double(21)")).parse_program()
    assert evaluator.eval_node(program, Environment()).value == 42
