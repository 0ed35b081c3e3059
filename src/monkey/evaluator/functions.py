# src/monkey/evaluator/functions.py
import sys

from ..environment import Environment
from ..object import (
    Integer, String, Array, Builtin, Function, ReturnValue,
)
from .utils import is_control, debug_log, new_error, NULL


def _wrong_arity(got, want):
    return new_error(f"wrong number of arguments. got {got} want={want}")


class FunctionEvaluatorMixin:
    """Handles function application and defines all builtins."""

    def __init__(self, output=None):
        # None means "sys.stdout at write time" so redirected streams are honoured.
        self.output = output
        self.builtins = {}
        self._register_core_builtins()

    def eval_call_expression(self, node, env):
        debug_log("CallExpression node", f"Calling {node.function}")

        fn = self.eval_node(node.function, env)
        if is_control(fn):
            return fn

        args = self.eval_expressions(node.arguments, env)
        if is_control(args):
            return args

        return self.apply_function(fn, args)

    def apply_function(self, fn, args):
        debug_log("apply_function", f"Calling {fn.describe()} with {len(args)} args")

        if isinstance(fn, Function):
            if len(args) != len(fn.parameters):
                return _wrong_arity(len(args), len(fn.parameters))

            new_env = self.extend_function_env(fn, args)
            res = self.eval_node(fn.body, new_env)

            # Unwrap here, at the call boundary, and nowhere else.
            if isinstance(res, ReturnValue):
                return res.value
            return res

        if isinstance(fn, Builtin):
            return fn.fn(*args)

        return new_error(f"not a function {fn.describe()}")

    def extend_function_env(self, fn, args):
        # Enclose the *defining* environment, never the caller's.
        new_env = Environment.new_enclosed(fn.env)
        for param, arg in zip(fn.parameters, args):
            new_env.set(param.value, arg)
        return new_env

    def register_builtin(self, name, fn):
        self.builtins[name] = Builtin(fn, name)

    def _write(self, text):
        stream = self.output if self.output is not None else sys.stdout
        stream.write(text)

    def _register_core_builtins(self):

        def _len(*a):
            if len(a) != 1:
                return _wrong_arity(len(a), 1)
            arg = a[0]
            if isinstance(arg, String):
                return Integer(len(arg.value))
            if isinstance(arg, Array):
                return Integer(len(arg.elements))
            return new_error(f'argument to "len" not supported. got {arg.describe()}')

        def _println(*a):
            self._write(" ".join(arg.inspect() for arg in a) + "\n")
            return NULL

        def _puts(*a):
            for arg in a:
                self._write(arg.inspect() + "\n")
            return NULL

        def _array_arg(name, a, want):
            if len(a) != want:
                return _wrong_arity(len(a), want)
            if not isinstance(a[0], Array):
                return new_error(f'argument to "{name}" must be Array, got {a[0].describe()}')
            return None

        def _first(*a):
            err = _array_arg("first", a, 1)
            if err is not None:
                return err
            elements = a[0].elements
            return elements[0] if elements else NULL

        def _last(*a):
            err = _array_arg("last", a, 1)
            if err is not None:
                return err
            elements = a[0].elements
            return elements[-1] if elements else NULL

        def _rest(*a):
            err = _array_arg("rest", a, 1)
            if err is not None:
                return err
            elements = a[0].elements
            if not elements:
                return NULL
            return Array(elements[1:])

        def _push(*a):
            err = _array_arg("push", a, 2)
            if err is not None:
                return err
            return Array(a[0].elements + [a[1]])

        self.register_builtin("len", _len)
        self.register_builtin("println", _println)
        self.register_builtin("puts", _puts)
        self.register_builtin("first", _first)
        self.register_builtin("last", _last)
        self.register_builtin("rest", _rest)
        self.register_builtin("push", _push)
