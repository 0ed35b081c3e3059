"""Environment chain: lookup, shadowing and shared enclosing scopes."""

from monkey.environment import Environment
from monkey.object import Integer, String


def test_new_global_is_empty_and_unparented():
    env = Environment.new_global()
    assert env.outer is None
    assert dict(env.items()) == {}
    assert env.get("x") is None


def test_set_returns_value_and_binds_locally():
    env = Environment()
    value = Integer(1)
    assert env.set("x", value) is value
    assert env.get("x") is value
    assert "x" in env


def test_lookup_walks_outward():
    outer = Environment()
    outer.set("x", Integer(1))
    inner = Environment.new_enclosed(outer)
    innermost = Environment.new_enclosed(inner)
    assert innermost.get("x").value == 1
    assert "x" in innermost
    assert innermost.outer.outer is outer


def test_set_never_writes_to_the_enclosing_scope():
    outer = Environment()
    outer.set("x", Integer(1))
    inner = Environment.new_enclosed(outer)
    inner.set("x", Integer(2))

    assert inner.get("x").value == 2
    assert outer.get("x").value == 1
    assert [name for name, _ in outer.items()] == ["x"]


def test_redefinition_overwrites_in_place():
    env = Environment()
    env.set("x", Integer(1))
    env.set("x", String("now a string"))
    assert env.get("x").value == "now a string"


def test_enclosed_scope_shares_rather_than_copies_its_parent():
    outer = Environment()
    inner = Environment.new_enclosed(outer)
    assert inner.outer is outer

    # Bound after the child was created, still visible through it.
    outer.set("late", Integer(9))
    assert inner.get("late").value == 9


def test_unbound_name_uses_default():
    env = Environment.new_enclosed(Environment())
    assert env.get("missing") is None
    assert env.get("missing", "fallback") == "fallback"
    assert "missing" not in env


def test_items_and_repr_show_only_local_bindings():
    outer = Environment()
    outer.set("a", Integer(1))
    inner = Environment.new_enclosed(outer)
    inner.set("b", Integer(2))

    assert [name for name, _ in inner.items()] == ["b"]
    assert repr(inner) == "Environment(names=['b'], enclosed=True)"
    assert repr(outer) == "Environment(names=['a'], enclosed=False)"
