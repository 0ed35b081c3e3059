import io

import pytest

from monkey import run_source, parse_source, ParseError, Environment, evaluate
from monkey.object import EvaluationError


# Helper: run a whole program and return a plain Python value
def run_and_get_result(src, env=None, output=None):
    res = run_source(src, env=env, output=output)
    if isinstance(res, EvaluationError):
        return res
    return _normalize(res)


def _normalize(value):
    if hasattr(value, "elements"):
        return [_normalize(e) for e in value.elements]
    if hasattr(value, "pairs"):
        return {_normalize(p.key): _normalize(p.value) for p in value.pairs.values()}
    if hasattr(value, "value"):
        return value.value
    return value.inspect()


def test_map_and_reduce_over_arrays():
    src = """
let map = fn(arr, f) {
    let iter = fn(arr, acc) {
        if (len(arr) == 0) { acc } else { iter(rest(arr), push(acc, f(first(arr)))) }
    };
    iter(arr, []);
};
let reduce = fn(arr, initial, f) {
    let iter = fn(arr, result) {
        if (len(arr) == 0) { result } else { iter(rest(arr), f(result, first(arr))) }
    };
    iter(arr, initial);
};
let doubled = map([1, 2, 3, 4], fn(x) { x * 2 });
[doubled, reduce(doubled, 0, fn(a, b) { a + b })]
"""
    assert run_and_get_result(src) == [[2, 4, 6, 8], 20]


def test_counter_closures_are_independent():
    src = """
let makeAdder = fn(n) { fn(x) { x + n } };
let addTwo = makeAdder(2);
let addTen = makeAdder(10);
[addTwo(1), addTen(1), makeAdder(100)(1)]
"""
    assert run_and_get_result(src) == [3, 11, 101]


def test_hash_of_people():
    src = """
let people = [{"name": "Alice", "age": 24}, {"name": "Anna", "age": 28}];
let getName = fn(person) { person["name"] };
{getName(people[0]): people[0]["age"], getName(people[1]): people[1]["age"], true: people[0]["email"]}
"""
    assert run_and_get_result(src) == {"Alice": 24, "Anna": 28, True: "null"}


def test_early_return_from_nested_blocks():
    src = """
let classify = fn(n) {
    if (n > 0) {
        if (n > 100) { return "big"; }
        return "positive";
    }
    "not positive"
};
[classify(500), classify(5), classify(0)]
"""
    assert run_and_get_result(src) == ["big", "positive", "not positive"]


def test_error_stops_the_program():
    out = io.StringIO()
    res = run_and_get_result('println("before"); let x = -true; println("after"); x', output=out)
    assert isinstance(res, EvaluationError)
    assert res.message == "unknown operator: -Boolean(true)"
    assert out.getvalue() == "before\n"


def test_environment_persists_between_runs():
    env = Environment.new_global()
    run_source("let total = 10;", env=env)
    run_source("let bump = fn(n) { total + n };", env=env)
    assert run_and_get_result("bump(5)", env=env) == 15


def test_parse_errors_raise():
    with pytest.raises(ParseError) as excinfo:
        run_source("let x 1;\nlet = 2;")
    assert len(excinfo.value.errors) >= 2
    assert "Expected next token to be =" in str(excinfo.value)


def test_evaluate_with_debug_restores_level():
    from monkey.config import config

    program = parse_source("1 + 2")
    res = evaluate(program, Environment.new_global(), debug_mode=True)
    assert res.value == 3
    assert config.debug_level == "none"


def test_recursive_map_over_a_long_array():
    src = """
let map = fn(arr, f) {
    if (len(arr) == 0) { [] } else { push(map(rest(arr), f), f(first(arr))) }
};
let build = fn(n, acc) { if (n == 0) { acc } else { build(n - 1, push(acc, n)) } };
len(map(build(200, []), fn(x) { x * 2 }))
"""
    assert run_and_get_result(src) == 200


def test_program_after_many_comment_lines():
    assert run_and_get_result("# c\n" * 1500 + "5") == 5
