# src/monkey/evaluator/core.py
import sys
from contextlib import contextmanager

from .. import monkey_ast
from ..config import config as monkey_config
from .utils import debug_log, new_error, NULL
from .expressions import ExpressionEvaluatorMixin
from .statements import StatementEvaluatorMixin
from .functions import FunctionEvaluatorMixin

# Each Monkey call costs roughly fifteen Python frames.
RECURSION_LIMIT = 10_000


@contextmanager
def recursion_limit(limit=RECURSION_LIMIT):
    """Raise the interpreter recursion limit while evaluating, then restore it."""
    prev_limit = sys.getrecursionlimit()
    try:
        sys.setrecursionlimit(max(prev_limit, limit))
        yield
    finally:
        sys.setrecursionlimit(prev_limit)


class Evaluator(ExpressionEvaluatorMixin, StatementEvaluatorMixin, FunctionEvaluatorMixin):
    def __init__(self, output=None):
        # Initialize mixins (FunctionEvaluatorMixin sets up builtins)
        FunctionEvaluatorMixin.__init__(self, output=output)

        # One handler per syntax-tree node class; eval_node refuses anything else.
        self.node_handlers = {
            # === STATEMENTS ===
            monkey_ast.Program: self.eval_program,
            monkey_ast.BlockStatement: self.eval_block_statement,
            monkey_ast.ExpressionStatement: self.eval_expression_statement,
            monkey_ast.LetStatement: self.eval_let_statement,
            monkey_ast.ReturnStatement: self.eval_return_statement,
            # === EXPRESSIONS ===
            monkey_ast.Identifier: self.eval_identifier,
            monkey_ast.IntegerLiteral: self.eval_integer_literal,
            monkey_ast.StringLiteral: self.eval_string_literal,
            monkey_ast.Boolean: self.eval_boolean,
            monkey_ast.ArrayLiteral: self.eval_array_literal,
            monkey_ast.HashLiteral: self.eval_hash_literal,
            monkey_ast.FunctionLiteral: self.eval_function_literal,
            monkey_ast.PrefixExpression: self.eval_prefix_expression,
            monkey_ast.InfixExpression: self.eval_infix_expression,
            monkey_ast.IfExpression: self.eval_if_expression,
            monkey_ast.CallExpression: self.eval_call_expression,
            monkey_ast.IndexExpression: self.eval_index_expression,
        }

    def eval_node(self, node, env):
        if node is None:
            debug_log("eval_node", "Node is None, returning NULL")
            return NULL

        handler = self.node_handlers.get(type(node))
        if handler is None:
            return new_error(f"unknown node type: {type(node).__name__}")

        debug_log("eval_node", type(node).__name__)
        try:
            return handler(node, env)
        except RecursionError:
            return new_error("maximum recursion depth exceeded")


# Global Entry Point
def evaluate(program, env, debug_mode=False, output=None):
    previous_level = monkey_config.debug_level
    if debug_mode:
        monkey_config.debug_level = "debug"

    try:
        evaluator = Evaluator(output=output)
        with recursion_limit():
            return evaluator.eval_node(program, env)
    finally:
        if debug_mode:
            monkey_config.debug_level = previous_level
